# -*- coding: utf-8 -*-
"""
# HOTP/TOTP support
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.algorithm import Algorithm
from libotpgen.exception import *
from libotpgen.factor import Counter, Timer
from libotpgen.generator import Generator
from libotpgen.util import decodeKey

import time

__all__ = [
	"OtpError",
	"hotp",
	"totp",
]

class OtpError(OtpGenError):
	"""HOTP/TOTP exception.
	"""

def _prepare(key, hmacHash):
	try:
		return (decodeKey(key, encoding="base32"),
			Algorithm.fromName(hmacHash))
	except OtpGenError as e:
		raise OtpError(str(e))

def hotp(key, counter, nrDigits=6, hmacHash="SHA1"):
	"""HOTP - An HMAC-Based One-Time Password Algorithm.
	key: The HOTP key. Either raw bytes or a base32 encoded string.
	counter: The HOTP counter integer.
	nrDigits: The number of digits to return. Can be 6 to 8.
	hmacHash: The name string of the hashing algorithm.
	Returns the calculated HOTP token string.
	"""
	key, algorithm = _prepare(key, hmacHash)
	try:
		factor = Counter(counter)
	except CounterError as e:
		raise OtpError(str(e))
	generator = Generator.create(factor=factor,
				     secret=key,
				     algorithm=algorithm,
				     digits=nrDigits)
	if generator is None:
		raise OtpError("Invalid number of digits.")
	return generator.passwordAtTime(0)

def totp(key, nrDigits=6, hmacHash="SHA1", t=None, period=30):
	"""TOTP - Time-Based One-Time Password Algorithm.
	nrDigits: The number of digits to return. Can be 6 to 8.
	hmacHash: The name string of the hashing algorithm.
	t: Optional; the time in seconds. Uses time.time(), if not given.
	period: The time step in seconds.
	Returns the calculated TOTP token string.
	"""
	key, algorithm = _prepare(key, hmacHash)
	if t is None:
		t = time.time()
	generator = Generator.create(factor=Timer(period),
				     secret=key,
				     algorithm=algorithm,
				     digits=nrDigits)
	if generator is None:
		raise OtpError("Invalid number of digits or period.")
	try:
		return generator.passwordAtTime(t)
	except GeneratorError as e:
		raise OtpError(str(e))
