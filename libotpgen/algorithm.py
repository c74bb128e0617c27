# -*- coding: utf-8 -*-
"""
# HMAC hash algorithm selection
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import OtpGenError

import enum

__all__ = [
	"Algorithm",
]

class Algorithm(enum.Enum):
	"""The cryptographic hash function used to calculate the HMAC
	from which a password is derived.
	"""

	SHA1	= "SHA1"
	SHA256	= "SHA256"
	SHA512	= "SHA512"

	@property
	def digestSize(self):
		"""The HMAC output length in bytes.
		"""
		return {
			Algorithm.SHA1   : 160 // 8,
			Algorithm.SHA256 : 256 // 8,
			Algorithm.SHA512 : 512 // 8,
		}[self]

	@classmethod
	def fromName(cls, name):
		"""Get the Algorithm for a name string like "sha1" or "SHA-256".
		"""
		if isinstance(name, cls):
			return name
		try:
			name = name.replace("-", "")
			name = name.replace("_", "")
			name = name.replace(" ", "")
			name = name.upper().strip()
			return cls(name)
		except (AttributeError, ValueError):
			raise OtpGenError("Invalid HMAC hash type.")

	def __str__(self):
		return self.value
