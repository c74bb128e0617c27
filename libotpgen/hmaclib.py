# -*- coding: utf-8 -*-
"""
# HMAC wrapper
# Copyright (c) 2023-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.algorithm import Algorithm
from libotpgen.exception import OtpGenError

import os

__all__ = [
	"HMAC",
]

class HMAC:
	"""Abstraction layer for the HMAC implementation.
	"""

	__singleton = None

	@classmethod
	def get(cls):
		"""Get the HMAC singleton.
		"""
		if cls.__singleton is None:
			cls.__singleton = cls()
		return cls.__singleton

	@classmethod
	def reset(cls):
		"""Drop the singleton, so that the next get()
		selects the backend again.
		"""
		cls.__singleton = None

	def __init__(self):
		self.__cryptodome = None
		self.__hashlib = None

		hmaclib = os.getenv("OTPGEN_HMACLIB", "").lower().strip()

		if hmaclib in ("", "cryptodome"):
			# Try to use Cryptodome
			try:
				import Cryptodome
				import Cryptodome.Hash.HMAC
				import Cryptodome.Hash.SHA1
				import Cryptodome.Hash.SHA256
				import Cryptodome.Hash.SHA512
				self.__cryptodome = Cryptodome
				return
			except ImportError as e:
				pass

		if hmaclib in ("", "hashlib"):
			# Use the Python hmac and hashlib modules
			import hashlib
			import hmac
			self.__hashlib = (hmac, hashlib)
			return

		msg = "Python module import error."
		msg += "\n'OTPGEN_HMACLIB=%s' is not supported or not installed." % hmaclib
		raise OtpGenError(msg)

	@property
	def backendName(self):
		if self.__cryptodome is not None:
			return "cryptodome"
		return "hashlib"

	def digest(self, algorithm, key, message):
		"""Calculate HMAC(key, message) with the given Algorithm.
		Returns the raw digest bytes.
		"""

		# Check parameters.
		if not isinstance(algorithm, Algorithm):
			raise OtpGenError("HMAC: Invalid algorithm.")
		if not isinstance(key, (bytes, bytearray, memoryview)):
			raise OtpGenError("HMAC: Invalid key.")
		key = bytes(key)
		message = bytes(message)

		try:
			if self.__cryptodome is not None:
				# Use Cryptodome
				digestmod = {
					Algorithm.SHA1   : self.__cryptodome.Hash.SHA1,
					Algorithm.SHA256 : self.__cryptodome.Hash.SHA256,
					Algorithm.SHA512 : self.__cryptodome.Hash.SHA512,
				}[algorithm]
				h = self.__cryptodome.Hash.HMAC.new(key=key,
								    msg=message,
								    digestmod=digestmod)
				digest = h.digest()
			else:
				# Use hmac/hashlib
				hmac, hashlib = self.__hashlib
				digestmod = {
					Algorithm.SHA1   : hashlib.sha1,
					Algorithm.SHA256 : hashlib.sha256,
					Algorithm.SHA512 : hashlib.sha512,
				}[algorithm]
				digest = hmac.new(key, message, digestmod).digest()
		except Exception as e:
			raise OtpGenError("HMAC error: %s: %s" % (type(e), str(e)))

		if len(digest) != algorithm.digestSize:
			raise OtpGenError("HMAC: Invalid digest length.")
		return digest

	@classmethod
	def quickSelfTest(cls):
		# RFC 2202, test case 1
		inst = cls.get()
		digest = inst.digest(algorithm=Algorithm.SHA1,
				     key=(b"\x0b" * 20),
				     message=b"Hi There")
		if digest != bytes.fromhex("b617318655057264e28bc0b6fb378c8ef146be00"):
			raise OtpGenError("HMAC: Quick self test failed.")
