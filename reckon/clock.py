"""
Where "now" and "today" come from.

The evaluator reads the current time only through one of these,
so a test (or a host replaying an old decision) can pin it down.
"""
from abc import ABC, abstractmethod
from datetime import date, datetime, time, timezone

class Clock(ABC):
	@abstractmethod
	def now(self) -> datetime: pass
	
	def today(self) -> date:
		return self.now().date()

class SystemClock(Clock):
	""" The wall clock, in UTC, without a time-zone attached. """
	def now(self) -> datetime:
		return datetime.now(timezone.utc).replace(tzinfo=None)

class FixedClock(Clock):
	""" A clock that is stuck. Give it a date and it reads midnight of that day. """
	def __init__(self, moment):
		if not isinstance(moment, datetime):
			assert isinstance(moment, date), type(moment)
			moment = datetime.combine(moment, time())
		self._moment = moment
	
	def __repr__(self): return "<FixedClock %s>"%self._moment.isoformat()
	
	def now(self) -> datetime:
		return self._moment

system_clock = SystemClock()
