from otpgen_tstlib import *
initTest(__file__)

from libotpgen import *

class Test_Algorithm(TestCase):
	def test_digest_size(self):
		self.assertEqual(Algorithm.SHA1.digestSize, 20)
		self.assertEqual(Algorithm.SHA256.digestSize, 32)
		self.assertEqual(Algorithm.SHA512.digestSize, 64)

	def test_from_name(self):
		for name in ("SHA1", "sha1", "SHA-1", "sha_1", " Sha 1 "):
			self.assertIs(Algorithm.fromName(name), Algorithm.SHA1)
		self.assertIs(Algorithm.fromName("sha-256"), Algorithm.SHA256)
		self.assertIs(Algorithm.fromName("SHA512"), Algorithm.SHA512)
		self.assertIs(Algorithm.fromName(Algorithm.SHA256), Algorithm.SHA256)
		self.assertEqual(str(Algorithm.SHA512), "SHA512")

	def test_from_name_errors(self):
		self.assertRaises(OtpGenError, lambda: Algorithm.fromName("MD5"))
		self.assertRaises(OtpGenError, lambda: Algorithm.fromName(""))
		self.assertRaises(OtpGenError, lambda: Algorithm.fromName(None))
