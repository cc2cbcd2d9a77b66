"""Top-level package for intsqrt."""

__version__ = '0.1.0+dev'

# expose submodules
from . import core
from . import inttypes
from . import sqrt
from . import testing

from .core import NegativeNumberError
from .sqrt import integer_sqrt, integer_sqrt_checked
