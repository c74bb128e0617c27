# -*- coding: utf-8 -*-
"""
# HOTP/TOTP moving factors
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import *

from dataclasses import dataclass
import math

__all__ = [
	"Factor",
	"Counter",
	"Timer",
	"COUNTER_MAX",
	"validatePeriod",
	"validateTime",
]

COUNTER_MAX = (2 ** 64) - 1

def validatePeriod(period):
	# The period must be positive and non-zero. NaN is rejected, too.
	return period > 0

def validateTime(time):
	try:
		return time >= 0 and math.isfinite(time)
	except OverflowError:
		# Integer beyond the float range.
		return False

class Factor:
	"""A moving factor with which a generator produces different
	one-time passwords over time.
	Either a Counter (HOTP) or a Timer (TOTP).
	"""

	__slots__ = ()

	def counterAtTime(self, time):
		"""Calculate the counter value for the moving factor at the
		target time (seconds since the Unix epoch).
		Raises a GeneratorError, if no valid counter can be calculated.
		"""
		raise NotImplementedError

@dataclass(frozen=True)
class Counter(Factor):
	"""HOTP moving factor.
	The counter should be incremented after each use of the
	password generator to stay in sync with the server.
	"""

	value: int

	def __post_init__(self):
		if (isinstance(self.value, bool) or
		    not isinstance(self.value, int) or
		    not (0 <= self.value <= COUNTER_MAX)):
			raise CounterError()

	def counterAtTime(self, time):
		return self.value

@dataclass(frozen=True)
class Timer(Factor):
	"""TOTP moving factor.
	The period is used as a divisor for the number of seconds
	since the Unix epoch.
	"""

	period: float = 30.0

	def counterAtTime(self, time):
		if not validateTime(time):
			raise InvalidTimeError()
		if not validatePeriod(self.period):
			raise InvalidPeriodError()
		try:
			counter = int(time / self.period)
		except OverflowError:
			raise InvalidTimeError("Time is out of the counter range.")
		if counter > COUNTER_MAX:
			raise InvalidTimeError("Time is out of the counter range.")
		return counter
