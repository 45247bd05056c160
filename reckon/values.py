"""
Values the evaluator passes around internally, beyond the ones that play themselves.

Numbers, text, flags, dates and date-times are just the ordinary Python objects.
A Duration only ever exists on its way into a date or date-time calculation.
"""
from datetime import timedelta
from typing import NamedTuple, Optional

UNITS = ("second", "minute", "hour", "day")

def unit_of(text:str) -> Optional[str]:
	"""
	The unit a duration-literal's second element names, if any.
	Matching is by prefix, so "days", "hours" or "minutes" all work.
	"""
	for unit in UNITS:
		if text.startswith(unit): return unit

class Duration(NamedTuple):
	amount: object  # Usually an int. Anything else will not combine with a date.
	unit: str
	
	def __repr__(self): return "<Duration %r %s>"%(self.amount, self.unit)
	
	def is_whole(self):
		return isinstance(self.amount, int) and not isinstance(self.amount, bool)
	
	def as_timedelta(self, sign:int=1) -> timedelta:
		assert self.unit in UNITS, self.unit
		return timedelta(**{self.unit+"s": sign * self.amount})
