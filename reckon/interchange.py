"""
Getting expressions in and results out through JSON.

JSON has no dates, so on the way in a date travels as a one-key object:
	{"date": "2000-01-20"}
	{"datetime": "2000-01-20T23:00:28"}
Any other object stays a dict, which is not an expression, and the reader says so.
On the way out, dates and date-times become ISO 8601 text.
"""
import json
from datetime import date, datetime

def _decode_object(obj:dict):
	if len(obj) == 1:
		(tag, text), = obj.items()
		if isinstance(text, str):
			if tag == "datetime": return datetime.fromisoformat(text)
			if tag == "date": return date.fromisoformat(text)
	return obj

def _encode_other(value):
	if isinstance(value, date): return value.isoformat()
	raise TypeError("Not a JSON-able result: %r"%(value,))

def loads(text:str):
	""" Malformed JSON or a malformed date both raise ValueError. """
	return json.loads(text, object_hook=_decode_object)

def load(fh):
	return loads(fh.read())

def dumps(value) -> str:
	return json.dumps(value, default=_encode_other)
