"""
Telling the person at the console what went wrong.

The evaluator itself never prints anything. The command-line host collects
problems here and emits them all at once, on stderr, when it gives up.
"""
import sys, random
from .errors import EvalError, UnsupportedExpression, MalformedApplication, UnsupportedOperation

def _outburst():
	exclamation = ['Drat', 'Rats', 'Bother', 'Hmm', 'Oops', 'Well, now']
	resignation = [
		'That does not compute.',
		'I cannot make sense of this.',
		'The arithmetic gods frown upon this.',
		'Something here does not add up.',
	]
	return "%s! %s"%(random.choice(exclamation), random.choice(resignation))

class Issue:
	def __init__(self, intro:str, footer=()):
		self.intro, self.footer = intro, footer
	def as_text(self):
		return '\n'.join([self.intro, *self.footer])

class Report:
	_issues : list[Issue]
	
	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self): return tuple(self._issues)
	
	def issue(self, it:Issue):
		self._issues.append(it)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues:
			print("*"*60, file=sys.stderr)
			print(_outburst(), file=sys.stderr)
		for i in self._issues:
			print("  -"*20, file=sys.stderr)
			print(i.as_text(), file=sys.stderr)
		sys.stderr.flush()
	
	# Methods the command-line host calls while getting hold of an expression:
	
	def unreadable_json(self, source:str, ex:ValueError):
		self.issue(Issue("Could not decode the expression from %s."%source, [str(ex)]))
	
	def no_such_file(self, path, ex:OSError):
		self.issue(Issue("Could not read %s."%path, [str(ex)]))
	
	# Methods for things the evaluator raises:
	
	def evaluation_failed(self, ex:EvalError):
		if isinstance(ex, UnsupportedExpression):
			intro = "This is not something I know how to evaluate:"
			footer = ["    %r"%(ex.expression,), "(%s)"%ex.reason]
		elif isinstance(ex, MalformedApplication):
			intro = "An operator got the wrong number of operands."
			footer = [str(ex)]
		elif isinstance(ex, UnsupportedOperation):
			intro = "These values do not combine that way."
			footer = [str(ex)]
		else:
			intro, footer = "Evaluation failed.", [str(ex)]
		self.issue(Issue(intro, footer))
	
	def arithmetic_failed(self, ex:ArithmeticError):
		self.issue(Issue("The arithmetic itself failed.", [str(ex)]))
	
	def nested_too_deeply(self, ex:Exception):
		footer = [str(ex), "(The limit is Python's recursion limit, currently %d.)"%sys.getrecursionlimit()]
		self.issue(Issue("The expression is nested too deeply.", footer))
