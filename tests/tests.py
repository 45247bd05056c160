import sys
import unittest
from datetime import date, datetime, timezone

from reckon.evaluator import evaluate, Evaluator
from reckon.clock import FixedClock
from reckon.errors import UnsupportedExpression, MalformedApplication, UnsupportedOperation, ResourceExhausted

T = datetime(2000, 1, 20, 23, 0, 28)
D = date(2000, 1, 20)

class AtomTests(unittest.TestCase):
	""" Things that play themselves. """
	
	def test_atoms_pass_through(self):
		for atom in [11, 11.22, "hello", True, False, D, T, 0, -3, ""]:
			with self.subTest(atom):
				self.assertEqual(atom, evaluate(atom))
				self.assertIs(type(atom), type(evaluate(atom)))
	
	def test_tuples_work_like_lists(self):
		self.assertEqual(6, evaluate(("+", 1, (["*", 1, 5]))))

class ArithmeticTests(unittest.TestCase):
	
	def test_binary(self):
		for a, b in [(1, 2), (5, 3), (2.5, 4), (-7, 0.5), (10**20, 3)]:
			with self.subTest((a, b)):
				self.assertEqual(a + b, evaluate(["+", a, b]))
				self.assertEqual(a * b, evaluate(["*", a, b]))
				self.assertEqual(a - b, evaluate(["-", a, b]))
				self.assertEqual(a / b, evaluate(["/", a, b]))
	
	def test_examples(self):
		self.assertEqual(3, evaluate(["+", 1, 2]))
		self.assertEqual(10, evaluate(["+", 1, 2, 3, 4]))
		self.assertEqual(6, evaluate(["*", 2, 3]))
		self.assertEqual(24, evaluate(["*", 2, 3, 4]))
		self.assertEqual(2, evaluate(["-", 5, 3]))
		self.assertEqual(2.5, evaluate(["/", 5, 2]))
	
	def test_division_never_truncates(self):
		result = evaluate(["/", 4, 2])
		self.assertEqual(2, result)
		self.assertIsInstance(result, float)
	
	def test_integers_stay_exact(self):
		self.assertIsInstance(evaluate(["+", 1, 2]), int)
		self.assertIsInstance(evaluate(["*", 2, 3, 4]), int)
		self.assertIsInstance(evaluate(["-", 2, 3]), int)
	
	def test_lone_operand_is_identity(self):
		for x in [7, 2.5, "text", ["*", 3, 4], ["+", T, [1, "hour"]]]:
			with self.subTest(x):
				self.assertEqual(evaluate(x), evaluate(["+", x]))
				self.assertEqual(evaluate(x), evaluate(["*", x]))
	
	def test_nesting(self):
		self.assertEqual(14, evaluate(["+", 2, ["*", 3, 4]]))
		self.assertEqual(-1.5, evaluate(["-", ["/", 3, 2], ["+", 1, 2]]))
	
	def test_division_by_zero_is_not_our_business(self):
		with self.assertRaises(ZeroDivisionError):
			evaluate(["/", 1, 0])
	
	def test_float_overflow_is_not_our_business_either(self):
		with self.assertRaises(OverflowError):
			evaluate(["+", 10**400, 0.5])
	
	def test_input_is_not_disturbed(self):
		expression = ["+", D, [["-", 5, 3], "days"], ["*", [1, "day"]]]
		before = repr(expression)
		evaluate(expression)
		self.assertEqual(before, repr(expression))

class TemporalTests(unittest.TestCase):
	
	def test_date_time_shift(self):
		self.assertEqual(datetime(2000, 1, 23, 23, 0, 28), evaluate(["+", T, [3, "days"]]))
		self.assertEqual(datetime(2000, 1, 20, 23, 3, 28), evaluate(["+", T, [3, "minute"]]))
		self.assertEqual(datetime(2000, 1, 17, 23, 0, 28), evaluate(["-", T, [3, "days"]]))
		self.assertEqual(datetime(2000, 1, 20, 22, 57, 28), evaluate(["-", T, [3, "minute"]]))
	
	def test_date_shift(self):
		self.assertEqual(date(2000, 1, 23), evaluate(["+", D, [3, "days"]]))
		self.assertEqual(date(2000, 1, 17), evaluate(["-", D, [3, "days"]]))
		self.assertIs(date, type(evaluate(["+", D, [3, "days"]])))
	
	def test_each_unit(self):
		self.assertEqual(datetime(2000, 1, 20, 23, 0, 31), evaluate(["+", T, [3, "seconds"]]))
		self.assertEqual(datetime(2000, 1, 21, 2, 0, 28), evaluate(["+", T, [3, "hours"]]))
		self.assertEqual(datetime(2000, 1, 21, 23, 0, 28), evaluate(["+", T, [1, "day"]]))
	
	def test_calendar_boundaries(self):
		self.assertEqual(date(2000, 2, 29), evaluate(["+", date(2000, 2, 28), [1, "day"]]))
		self.assertEqual(date(2001, 3, 1), evaluate(["+", date(2001, 2, 28), [1, "day"]]))
		self.assertEqual(date(1999, 12, 31), evaluate(["-", date(2000, 1, 1), [1, "day"]]))
		self.assertEqual(datetime(2001, 1, 1, 0, 0, 28), evaluate(["+", datetime(2000, 12, 31, 23, 59, 28), [1, "minute"]]))
	
	def test_duration_may_come_first(self):
		self.assertEqual(date(2000, 1, 21), evaluate(["+", [1, "day"], D]))
		self.assertEqual(datetime(2000, 1, 20, 23, 1, 28), evaluate(["+", [1, "minute"], T]))
		# Still means the date minus the duration.
		self.assertEqual(date(2000, 1, 19), evaluate(["-", [1, "day"], D]))
		self.assertEqual(datetime(2000, 1, 20, 22, 0, 28), evaluate(["-", [1, "hour"], T]))
	
	def test_amount_may_be_an_expression(self):
		self.assertEqual(datetime(2000, 1, 21, 5, 0, 28), evaluate(["+", T, [["*", 2, 3], "hours"]]))
	
	def test_variadic_shifts(self):
		self.assertEqual(date(2000, 1, 23), evaluate(["+", D, [1, "day"], [2, "days"]]))
	
	def test_date_only_moves_by_days(self):
		for unit in ["second", "minutes", "hours"]:
			with self.subTest(unit):
				with self.assertRaises(UnsupportedOperation):
					evaluate(["+", D, [3, unit]])
				with self.assertRaises(UnsupportedOperation):
					evaluate(["-", D, [3, unit]])
				with self.assertRaises(UnsupportedOperation):
					evaluate(["+", [3, unit], D])
	
	def test_fractional_amount_does_not_combine(self):
		with self.assertRaises(UnsupportedOperation):
			evaluate(["+", T, [1.5, "hours"]])
		with self.assertRaises(UnsupportedOperation):
			evaluate(["+", T, [True, "hours"]])
	
	def test_off_the_calendar(self):
		with self.assertRaises(UnsupportedOperation):
			evaluate(["+", date(9999, 12, 31), [1, "day"]])

class KeywordTests(unittest.TestCase):
	
	def test_today_from_the_wall_clock(self):
		before = datetime.now(timezone.utc).date()
		result = evaluate("today")
		after = datetime.now(timezone.utc).date()
		self.assertIs(date, type(result))
		self.assertIn(result, (before, after))
	
	def test_now_from_the_wall_clock(self):
		result = evaluate("now")
		self.assertIsInstance(result, datetime)
		self.assertIsNone(result.tzinfo)
	
	def test_today_minus_days_is_a_date(self):
		self.assertIs(date, type(evaluate(["-", "today", [180, "days"]])))
	
	def test_fixed_clock(self):
		clock = FixedClock(T)
		self.assertEqual(T, evaluate("now", clock))
		self.assertEqual(D, evaluate("today", clock))
		self.assertEqual(date(1999, 7, 24), evaluate(["-", "today", [180, "days"]], clock))
		self.assertEqual(datetime(2000, 1, 20, 23, 30, 28), evaluate(["+", "now", [30, "minutes"]], clock))
	
	def test_fixed_clock_from_a_date(self):
		clock = FixedClock(D)
		self.assertEqual(datetime(2000, 1, 20), evaluate("now", clock))
		self.assertEqual(D, evaluate("today", clock))
	
	def test_evaluator_is_reusable(self):
		sut = Evaluator(FixedClock(T))
		self.assertEqual(D, sut.evaluate("today"))
		self.assertEqual(5, sut.evaluate(["+", 2, 3]))
		self.assertEqual(D, sut.evaluate("today"))

class ZooOfFail(unittest.TestCase):
	""" Tests that assert about failure modes. """
	
	def test_unsupported_expression(self):
		for bogon in [["?", 1, 2], [], None, {"a": 1}, ["plus", 1, 2], [1, 2, 3], [3, "weeks"], object()]:
			with self.subTest(bogon):
				with self.assertRaises(UnsupportedExpression):
					evaluate(bogon)
	
	def test_malformed_application(self):
		for bogon in [["-", 1], ["-", 1, 2, 3], ["/", 1], ["/", 1, 2, 3], ["+"], ["*"]]:
			with self.subTest(bogon):
				with self.assertRaises(MalformedApplication):
					evaluate(bogon)
	
	def test_unsupported_operation(self):
		for bogon in [
			["*", "a", 2],
			["+", "a", "b"],
			["+", True, 1],
			["*", D, D],
			["/", T, [1, "day"]],
			["*", T, [1, "day"]],
			["-", 5, [1, "day"]],
			["+", [1, "day"], [2, "days"]],
			["-", T, D],
			["+", ["+", "days"], D],
		]:
			with self.subTest(bogon):
				with self.assertRaises(UnsupportedOperation):
					evaluate(bogon)
	
	def test_bare_duration_is_not_a_result(self):
		for bogon in [[3, "days"], ["+", [3, "days"]], ["*", [1, "hour"]]]:
			with self.subTest(bogon):
				with self.assertRaises(UnsupportedExpression):
					evaluate(bogon)
	
	def test_shape_is_checked_before_arithmetic(self):
		with self.assertRaises(UnsupportedExpression):
			evaluate(["*", ["*", "a", 2], ["?"]])
	
	def test_deep_nesting(self):
		expression = 1
		for _ in range(sys.getrecursionlimit() * 2):
			expression = ["+", expression]
		with self.assertRaises(ResourceExhausted):
			evaluate(expression)

if __name__ == '__main__':
	unittest.main()
