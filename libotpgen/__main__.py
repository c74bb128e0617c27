# -*- coding: utf-8 -*-
"""
# HOTP/TOTP password generator
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import argparse
import libotpgen
import sys
import time

__all__ = [
	"main",
]

def getKey(key, encoding):
	if key is None:
		key = libotpgen.util.readSecret("Secret key (%s)" % encoding)
		if key is None:
			return None
	return libotpgen.util.decodeKey(key, encoding=encoding)

def run_generator(generator, t, count, out=None):
	if out is None:
		out = sys.stdout
	for i in range(count):
		if i > 0:
			if isinstance(generator.factor, libotpgen.Timer):
				t += generator.factor.period
			else:
				generator = generator.successor()
		print(generator.passwordAtTime(t), file=out)
	return 0

def main(argv=None):
	p = argparse.ArgumentParser(
		description="HOTP/TOTP one-time password generator - "
			    "otpgen version %s" % libotpgen.__version__)
	p.add_argument("-v", "--version", action="store_true",
		       help="show the otpgen version and exit")
	p.add_argument("-e", "--encoding", type=lambda x: str(x).lower().strip(),
		       default="base32",
		       choices=("base32", "hex", "raw"),
		       help="Encoding of the KEY. Default: base32.")
	p.add_argument("-c", "--counter", type=int, default=None, metavar="COUNTER",
		       help="Generate HOTP passwords starting at COUNTER. "
			    "If not given, TOTP passwords are generated.")
	p.add_argument("-p", "--period", type=float, default=30.0, metavar="SECONDS",
		       help="The TOTP time step. Default: 30 seconds.")
	p.add_argument("-d", "--digits", type=int, default=6,
		       help="The number of password digits (6 to 8). Default: 6.")
	p.add_argument("-a", "--algorithm", type=str, default="SHA1",
		       help="The HMAC hash algorithm (SHA1, SHA256 or SHA512). "
			    "Default: SHA1.")
	p.add_argument("-T", "--time", type=float, default=None, metavar="SECONDS",
		       help="Generate the TOTP for this Unix time instead of now.")
	p.add_argument("-n", "--count", type=int, default=1,
		       help="Print COUNT consecutive passwords. Default: 1.")
	p.add_argument("key", nargs="?", metavar="KEY", default=None,
		       help="The shared secret key. "
			    "If not given, the key is read from the terminal.")
	args = p.parse_args(argv)

	if args.version:
		print("otpgen version %s" % libotpgen.__version__)
		return 0
	if args.count < 1:
		print("Error: Invalid --count.", file=sys.stderr)
		return 1

	try:
		algorithm = libotpgen.Algorithm.fromName(args.algorithm)
		if args.counter is None:
			factor = libotpgen.Timer(args.period)
		else:
			factor = libotpgen.Counter(args.counter)
		key = getKey(args.key, args.encoding)
		if key is None:
			return 1
		generator = libotpgen.Generator.create(factor=factor,
						       secret=key,
						       algorithm=algorithm,
						       digits=args.digits)
		if generator is None:
			print("Error: Invalid number of digits or period.",
			      file=sys.stderr)
			return 1
		t = time.time() if args.time is None else args.time
		return run_generator(generator, t, args.count)
	except libotpgen.OtpGenError as e:
		print("Error: " + str(e), file=sys.stderr)
		return 1

if __name__ == "__main__":
	sys.exit(main())
