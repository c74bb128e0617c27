# -*- coding: utf-8 -*-
"""
# HOTP/TOTP password generator
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotpgen.exception import OtpGenError

from base64 import b32decode
import binascii
import getpass
import os
import sys

__all__ = [
	"str2bool",
	"decodeKey",
	"readSecret",
]

def str2bool(string, default=False):
	s = string.lower().strip()
	if not s:
		return default
	if s in ("true", "yes", "on", "1"):
		return True
	if s in ("false", "no", "off", "0"):
		return False
	try:
		return bool(int(s))
	except ValueError:
		return default

def decodeKey(key, encoding="base32"):
	"""Convert a key string to raw secret bytes.
	encoding: "base32", "hex" or "raw" (UTF-8 bytes of the string).
	bytes-like keys are returned unchanged.
	"""
	if isinstance(key, (bytes, bytearray, memoryview)):
		return bytes(key)
	if not isinstance(key, str):
		raise OtpGenError("Invalid key.")
	try:
		if encoding == "base32":
			key = "".join(key.split())
			# Authenticator apps usually strip the padding.
			key += "=" * (-len(key) % 8)
			return b32decode(key.encode("UTF-8"), casefold=True)
		if encoding == "hex":
			return bytes.fromhex(key)
		if encoding == "raw":
			return key.encode("UTF-8")
	except (binascii.Error, UnicodeError, ValueError):
		raise OtpGenError("Invalid key.")
	raise OtpGenError("Invalid key encoding '%s'." % encoding)

def _do_getpass(prompt):
	if str2bool(os.getenv("OTPGEN_RAWGETPASS", "")):
		return input(prompt)
	else:
		return getpass.getpass(prompt)

def readSecret(prompt):
	try:
		while True:
			secret = _do_getpass(prompt + ": ")
			if secret:
				return secret
	except (EOFError, KeyboardInterrupt) as e:
		print("")
		return None
	except (getpass.GetPassWarning) as e:
		print(str(e), file=sys.stderr)
		return None
