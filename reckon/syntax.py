"""
The closed set of expression forms.
The reader builds these from raw interchange data; the evaluator visits them.
Nothing else should construct them, which is how the evaluator gets away
with having exactly one method per class.
"""
from typing import Sequence

KEYWORDS = frozenset(["now", "today"])

class Node:
	""" Any expression form, after reading. """
	def __eq__(self, other):
		return type(self) is type(other) and vars(self) == vars(other)
	def __hash__(self): return hash(type(self))

class Atom(Node):
	""" Numbers, text, flags, dates and date-times play themselves. """
	def __init__(self, value):
		self.value = value
	def __eq__(self, other):
		# 1 and True compare equal in Python, but they are not the same atom.
		return super().__eq__(other) and type(self.value) is type(other.value)
	def __hash__(self): return hash(type(self.value))
	def __repr__(self): return "<Atom %r>"%(self.value,)

class Keyword(Node):
	""" A reserved word whose value depends on when you ask. """
	def __init__(self, word:str):
		assert word in KEYWORDS, word
		self.word = word
	def __repr__(self): return "<Keyword %s>"%self.word

class DurationLiteral(Node):
	def __init__(self, amount:Node, unit:str):
		assert isinstance(amount, Node), type(amount)
		self.amount = amount
		self.unit = unit
	def __repr__(self): return "<Duration %r %s>"%(self.amount, self.unit)

class Application(Node):
	def __init__(self, symbol:str, operands:Sequence[Node]):
		self.symbol = symbol
		self.operands = tuple(operands)
	def __repr__(self):
		return "(%s %s)"%(self.symbol, ' '.join(map(repr, self.operands)))
