# -*- coding: utf-8 -*-
"""
# HOTP/TOTP password generator
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

__all__ = [
	"OtpGenError",
	"GeneratorError",
	"InvalidTimeError",
	"InvalidPeriodError",
	"InvalidDigitsError",
	"CounterError",
]

class OtpGenError(Exception):
	"""Main otpgen exception.
	"""

class GeneratorError(OtpGenError):
	"""A password could not be generated.
	"""

class InvalidTimeError(GeneratorError):
	"""The requested time is before the epoch date.
	"""

	def __init__(self, msg="Invalid time."):
		super().__init__(msg)

class InvalidPeriodError(GeneratorError):
	"""The timer period is not a positive number of seconds.
	"""

	def __init__(self, msg="Invalid timer period."):
		super().__init__(msg)

class InvalidDigitsError(GeneratorError):
	"""The number of digits is either too short to be secure,
	or too long to compute.
	"""

	def __init__(self, msg="Invalid number of digits."):
		super().__init__(msg)

class CounterError(OtpGenError, ValueError):
	"""The HOTP counter does not fit into 64 unsigned bits.
	"""

	def __init__(self, msg="Invalid counter."):
		super().__init__(msg)
