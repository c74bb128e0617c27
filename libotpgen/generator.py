# -*- coding: utf-8 -*-
"""
# HOTP/TOTP password generator
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.algorithm import Algorithm
from libotpgen.exception import *
from libotpgen.factor import *
from libotpgen.hmaclib import HMAC

from dataclasses import dataclass, field
import time

__all__ = [
	"Generator",
	"DIGITS_MIN",
	"DIGITS_MAX",
]

# RFC 4226 section 5.3: "Implementations MUST extract a 6-digit code
# at a minimum and possibly 7 and 8-digit codes."
DIGITS_MIN = 6
DIGITS_MAX = 8

def _validateDigits(digits):
	return (isinstance(digits, int) and
		not isinstance(digits, bool) and
		DIGITS_MIN <= digits <= DIGITS_MAX)

def _validateSecret(secret):
	return isinstance(secret, (bytes, bytearray, memoryview))

def _validateFactor(factor):
	if isinstance(factor, Counter):
		return True
	if isinstance(factor, Timer):
		return validatePeriod(factor.period)
	return False

@dataclass(frozen=True)
class Generator:
	"""All of the parameters needed to generate a one-time password.

	factor: The moving factor. Counter (HOTP) or Timer (TOTP).
	secret: The secret bytes shared between the client and server.
	algorithm: The Algorithm of the HMAC.
	digits: The number of digits in the password. 6 to 8.

	Use Generator.create() to get a new instance.
	"""

	factor: Factor
	secret: bytes = field(repr=False)
	algorithm: Algorithm = Algorithm.SHA1
	digits: int = 6

	def __post_init__(self):
		if not _validateFactor(self.factor):
			raise InvalidPeriodError()
		if not _validateDigits(self.digits):
			raise InvalidDigitsError()
		if not isinstance(self.algorithm, Algorithm):
			raise OtpGenError("Invalid HMAC hash type.")
		if not _validateSecret(self.secret):
			raise OtpGenError("Invalid secret.")
		object.__setattr__(self, "secret", bytes(self.secret))

	@classmethod
	def create(cls, factor, secret, algorithm=Algorithm.SHA1, digits=6):
		"""Create a new password generator with the given parameters.
		Returns None, if the parameters are invalid.
		"""
		if not (_validateFactor(factor) and
			_validateDigits(digits) and
			_validateSecret(secret) and
			isinstance(algorithm, Algorithm)):
			return None
		return cls(factor=factor,
			   secret=secret,
			   algorithm=algorithm,
			   digits=digits)

	def passwordAtTime(self, time):
		"""Generate the password for the given point in time.
		time: The target time, as seconds since the Unix epoch.
		Raises a GeneratorError, if no valid password can be generated.
		"""
		if not _validateDigits(self.digits):
			raise InvalidDigitsError()

		counter = self.factor.counterAtTime(time)
		counterBytes = counter.to_bytes(length=8, byteorder="big", signed=False)

		h = HMAC.get().digest(algorithm=self.algorithm,
				      key=self.secret,
				      message=counterBytes)

		# Dynamic truncation.
		# The offset is the low nibble of the last byte (0 <= offset <= 15).
		offset = h[-1] & 0x0F
		hSlice = int.from_bytes(h[offset:offset+4], byteorder="big", signed=False)
		hSlice &= 0x7FFFFFFF
		otp = hSlice % (10 ** self.digits)
		fmt = "%0" + str(self.digits) + "d"
		return fmt % otp

	def currentPassword(self):
		"""Generate the password for the current system time.
		"""
		return self.passwordAtTime(time.time())

	def successor(self):
		"""Returns a Generator configured to generate the password
		that follows the password generated by self.
		"""
		if isinstance(self.factor, Counter):
			nextGenerator = self.create(factor=Counter(self.factor.value + 1),
						    secret=self.secret,
						    algorithm=self.algorithm,
						    digits=self.digits)
			if nextGenerator is None:
				raise AssertionError("Generator: Invalid successor.")
			return nextGenerator
		# A timer based generator does not need to be updated.
		return self
