"""
Turn raw interchange data into syntax nodes.

Shapes overlap, so the order of the checks below is load-bearing:
	1. The reserved words "now" and "today".
	2. Atoms: numbers, text, flags, dates and date-times.
	3. [amount, unit] where the unit text starts with a known unit name.
	4. [operator, operand, ...]
Anything else is an UnsupportedExpression. Since the duration shape is
tried before the operator shape, ["+", "days"] is a duration of "+" days,
which will not combine with anything, rather than a lonely plus.

The whole tree is read before any of it is evaluated. So in
["*", ["*", "a", 2], ["?"]] the unknown "?" is what gets reported,
even though multiplying "a" would have failed first in a strict
left-to-right walk.
"""
from datetime import date
from .syntax import Node, Atom, Keyword, DurationLiteral, Application, KEYWORDS
from .values import unit_of
from .operators import is_operator, check_arity
from .errors import UnsupportedExpression, ResourceExhausted

BASE_TYPES = (bool, int, float, str, date)  # datetime is a date, so it comes along.

def read(expression) -> Node:
	try: return _read(expression)
	except RecursionError as ex:
		raise ResourceExhausted("expression nests too deeply to read") from ex

def _read(expression) -> Node:
	if isinstance(expression, str) and expression in KEYWORDS:
		return Keyword(expression)
	if isinstance(expression, BASE_TYPES):
		return Atom(expression)
	if isinstance(expression, (list, tuple)):
		if len(expression) == 2 and isinstance(expression[1], str):
			unit = unit_of(expression[1])
			if unit is not None:
				return DurationLiteral(_read(expression[0]), unit)
		if expression and is_operator(expression[0]):
			symbol, operands = expression[0], expression[1:]
			check_arity(symbol, len(operands))
			return Application(symbol, [_read(x) for x in operands])
	raise UnsupportedExpression(expression)
