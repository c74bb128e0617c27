from otpgen_tstlib import *
initTest(__file__)

from libotpgen import *

class Test_Factor(TestCase):
	def test_counter(self):
		self.assertEqual(Counter(0).counterAtTime(0), 0)
		self.assertEqual(Counter(42).counterAtTime(1234567890.0), 42)
		# The time is ignored for counters.
		self.assertEqual(Counter(7).counterAtTime(-100), 7)
		self.assertEqual(Counter(COUNTER_MAX).counterAtTime(0), COUNTER_MAX)

	def test_counter_range(self):
		self.assertRaises(CounterError, lambda: Counter(-1))
		self.assertRaises(CounterError, lambda: Counter(2 ** 64))
		self.assertRaises(CounterError, lambda: Counter(1.0))
		self.assertRaises(CounterError, lambda: Counter(True))
		self.assertRaises(ValueError, lambda: Counter(-1))

	def test_timer(self):
		self.assertEqual(Timer(30).counterAtTime(0), 0)
		self.assertEqual(Timer(30).counterAtTime(29.999), 0)
		self.assertEqual(Timer(30).counterAtTime(30), 1)
		self.assertEqual(Timer(30).counterAtTime(59), 1)
		self.assertEqual(Timer(30).counterAtTime(1111111109), 37037036)
		self.assertEqual(Timer(60).counterAtTime(1234567890), 20576131)
		self.assertEqual(Timer(0.5).counterAtTime(10.25), 20)

	def test_timer_invalid_time(self):
		self.assertRaises(InvalidTimeError, lambda: Timer(30).counterAtTime(-1))
		self.assertRaises(InvalidTimeError, lambda: Timer(30).counterAtTime(-0.001))
		self.assertRaises(InvalidTimeError, lambda: Timer(30).counterAtTime(float("nan")))
		self.assertRaises(InvalidTimeError, lambda: Timer(30).counterAtTime(float("inf")))
		self.assertRaises(InvalidTimeError, lambda: Timer(1e-9).counterAtTime(1e12))
		# Quotient beyond the float range.
		self.assertRaises(InvalidTimeError, lambda: Timer(1e-300).counterAtTime(1e10))
		self.assertRaises(InvalidTimeError, lambda: Timer(5e-324).counterAtTime(1.0))
		self.assertRaises(InvalidTimeError, lambda: Timer(30).counterAtTime(10 ** 400))
		# The time is checked before the period.
		self.assertRaises(InvalidTimeError, lambda: Timer(0).counterAtTime(-1))

	def test_timer_invalid_period(self):
		for period in (0, 0.0, -1, -30.0, float("nan")):
			self.assertRaises(InvalidPeriodError, lambda: Timer(period).counterAtTime(100))

	def test_equality(self):
		self.assertEqual(Counter(1), Counter(1))
		self.assertNotEqual(Counter(1), Counter(2))
		self.assertEqual(Timer(30), Timer(30.0))
		self.assertNotEqual(Timer(30), Timer(60))
		self.assertNotEqual(Counter(30), Timer(30))
		self.assertEqual(hash(Timer(30)), hash(Timer(30)))
