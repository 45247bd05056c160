"""
The four operators: how many operands each takes, and how they reduce.

Operands arrive unevaluated. Each is forced exactly once, left to right,
just before the step of the reduction that needs it. The variadic ones
fold from the left, so ["+", a, b, c] means add(add(a, b), c).
"""
from typing import Callable, NamedTuple, Optional, Sequence
from . import algebra
from .errors import MalformedApplication

class Operator(NamedTuple):
	combine: Callable
	least: int
	most: Optional[int]  # None means no upper limit.

OPERATORS = {
	"+": Operator(algebra.add, 1, None),
	"*": Operator(algebra.multiply, 1, None),
	"-": Operator(algebra.subtract, 2, 2),
	"/": Operator(algebra.divide, 2, 2),
}

def is_operator(symbol) -> bool:
	return isinstance(symbol, str) and symbol in OPERATORS

def arity(symbol:str) -> tuple[int, Optional[int]]:
	op = OPERATORS[symbol]
	return op.least, op.most

def check_arity(symbol:str, given:int):
	least, most = arity(symbol)
	if given < least or (most is not None and given > most):
		raise MalformedApplication(symbol, given, least, most)

def apply(symbol:str, operands:Sequence, strict:Callable):
	"""
	Reduce the operands under the operator. `strict` turns one operand into its value.
	With a lone operand, its value comes back untouched, whatever it is.
	"""
	check_arity(symbol, len(operands))
	combine = OPERATORS[symbol].combine
	each = iter(operands)
	result = strict(next(each))
	for operand in each:
		result = combine(result, strict(operand))
	return result
