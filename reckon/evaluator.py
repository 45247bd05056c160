"""
The dispatcher: one visit method per syntax node.

Reading happens first, all at once, so a shape problem anywhere in the
tree shows up before any arithmetic does. After that, evaluation walks
the nodes depth-first, left to right, and the only thing it consults
besides the tree is the clock.
"""
from typing import Optional
from boozetools.support.foundation import Visitor
from . import syntax, operators
from .clock import Clock, system_clock
from .reader import read
from .values import Duration
from .errors import UnsupportedExpression, ResourceExhausted

class Evaluator(Visitor):
	"""
	Holds nothing but a clock, so one of these may serve
	any number of evaluations, in any number of threads.
	"""
	
	def __init__(self, clock:Optional[Clock]=None):
		self._clock = clock or system_clock
	
	def evaluate(self, expression):
		return self._conclude(read(expression), expression)
	
	def evaluate_node(self, node:syntax.Node):
		return self._conclude(node, node)
	
	def _conclude(self, node:syntax.Node, culprit):
		try: value = self.visit(node)
		except RecursionError as ex:
			raise ResourceExhausted("expression nests too deeply to evaluate") from ex
		if isinstance(value, Duration):
			raise UnsupportedExpression(culprit, "a duration is not a result by itself")
		return value
	
	@staticmethod
	def visit_Atom(atom:syntax.Atom):
		return atom.value
	
	def visit_Keyword(self, keyword:syntax.Keyword):
		if keyword.word == "now": return self._clock.now()
		else: return self._clock.today()
	
	def visit_DurationLiteral(self, literal:syntax.DurationLiteral):
		return Duration(self.visit(literal.amount), literal.unit)
	
	def visit_Application(self, app:syntax.Application):
		return operators.apply(app.symbol, app.operands, self.visit)

def evaluate(expression, clock:Optional[Clock]=None):
	""" Evaluate one expression. Pass a clock to pin down "now" and "today". """
	return Evaluator(clock).evaluate(expression)
