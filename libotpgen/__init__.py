# -*- coding: utf-8 -*-

import sys
if sys.version_info[0:2] < (3, 7):
	raise Exception("otpgen requires Python >=3.7")
del sys

import libotpgen.algorithm
import libotpgen.exception
import libotpgen.factor
import libotpgen.generator
import libotpgen.hmaclib
import libotpgen.otp
import libotpgen.util
import libotpgen.version

from libotpgen.algorithm import *
from libotpgen.exception import *
from libotpgen.factor import *
from libotpgen.generator import *
from libotpgen.otp import *
from libotpgen.version import *

__version__ = VERSION_STRING
