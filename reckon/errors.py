"""
The ways an evaluation can go wrong.

Every typed failure is an EvalError and carries whatever fragment
of the expression (or which operand values) caused the trouble,
so that a host can explain the problem in its own terms.
"""

class EvalError(Exception):
	""" Root of the typed evaluation failures. """

class UnsupportedExpression(EvalError):
	""" The shape of this expression matches none of the recognized forms. """
	def __init__(self, expression, reason:str="not a recognized expression"):
		super().__init__("%s: %r"%(reason, expression))
		self.expression = expression
		self.reason = reason

class MalformedApplication(EvalError):
	""" A known operator got the wrong number of operands. """
	def __init__(self, symbol:str, given:int, least:int, most):
		if most is None: need = "at least %d"%least
		elif least == most: need = "exactly %d"%least
		else: need = "%d to %d"%(least, most)
		plural = '' if given == 1 else 's'
		super().__init__("%r takes %s operands, but got %d operand%s instead."%(symbol, need, given, plural))
		self.symbol = symbol
		self.given = given

class UnsupportedOperation(EvalError):
	""" The operator is fine, and so is the arity, but these values do not combine that way. """
	def __init__(self, operation:str, a, b, reason:str=""):
		message = "cannot %s %r and %r"%(operation, a, b)
		if reason: message += " (%s)"%reason
		super().__init__(message)
		self.operation = operation
		self.operands = a, b

class ResourceExhausted(Exception):
	"""
	Nesting ran deeper than the interpreter's stack allows.
	This is not an EvalError: it says nothing about whether the expression makes sense.
	"""
