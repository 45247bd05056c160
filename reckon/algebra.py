"""
Which values combine under which operation, and what comes out.

The whole algebra is one table, keyed by the operation's name and the
type-classes of the two operands. A pairing not in the table does not
make sense, and says so with UnsupportedOperation.
"""
import operator
from datetime import date, datetime
from .values import Duration
from .errors import UnsupportedOperation

NUMBER, TEXT, FLAG, DATE, DATETIME, DURATION = "number", "text", "flag", "date", "datetime", "duration"

PRIMITIVE_TYPE_TOKENS = {
	bool: FLAG,
	int: NUMBER,
	float: NUMBER,
	str: TEXT,
	datetime: DATETIME,
	date: DATE,
	Duration: DURATION,
}

def type_class(x):
	"""
	Walk the MRO so that subclasses land somewhere sensible.
	The order matters: bool is an int and datetime is a date, but not for our purposes.
	"""
	for kind in type(x).__mro__:
		try: return PRIMITIVE_TYPE_TOKENS[kind]
		except KeyError: pass

def _shift(operation:str, when, duration:Duration, sign:int):
	if not duration.is_whole():
		raise UnsupportedOperation(operation, when, duration, "the amount must be a whole number")
	if type_class(when) == DATE and duration.unit != "day":
		raise UnsupportedOperation(operation, when, duration, "a date only moves by whole days")
	try: return when + duration.as_timedelta(sign)
	except OverflowError as ex:
		raise UnsupportedOperation(operation, when, duration, "the result falls off the calendar") from ex

def _later(when, duration): return _shift("add", when, duration, 1)
def _earlier(when, duration): return _shift("subtract", when, duration, -1)

# Writing the duration first is only a matter of taste; the date still moves the same way.
def _later_swapped(duration, when): return _later(when, duration)
def _earlier_swapped(duration, when): return _earlier(when, duration)

OVERLOAD = {
	("add", (NUMBER, NUMBER)): operator.add,
	("add", (DATETIME, DURATION)): _later,
	("add", (DATE, DURATION)): _later,
	("add", (DURATION, DATETIME)): _later_swapped,
	("add", (DURATION, DATE)): _later_swapped,
	
	("subtract", (NUMBER, NUMBER)): operator.sub,
	("subtract", (DATETIME, DURATION)): _earlier,
	("subtract", (DATE, DURATION)): _earlier,
	("subtract", (DURATION, DATETIME)): _earlier_swapped,
	("subtract", (DURATION, DATE)): _earlier_swapped,
	
	("multiply", (NUMBER, NUMBER)): operator.mul,
	("divide", (NUMBER, NUMBER)): operator.truediv,
}

def combine(operation:str, a, b):
	signature = type_class(a), type_class(b)
	try: method = OVERLOAD[operation, signature]
	except KeyError: raise UnsupportedOperation(operation, a, b) from None
	return method(a, b)

def add(a, b): return combine("add", a, b)
def subtract(a, b): return combine("subtract", a, b)
def multiply(a, b): return combine("multiply", a, b)
def divide(a, b):
	""" Always true division: 4/2 is 2.0, never a truncated 2. """
	return combine("divide", a, b)
