# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
This subpackage contains lazily evaluated Gaussian and Airy disk PSF
kernels.
"""

from .airy import *  # noqa: F401, F403
from .core import *  # noqa: F401, F403
from .extent import *  # noqa: F401, F403
from .fwhm import *  # noqa: F401, F403
from .gaussian import *  # noqa: F401, F403
