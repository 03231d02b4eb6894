# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Subpackage providing coordinate records, array materialization and
exception classes shared by the kernels.
"""

from .arrays import *  # noqa: F401, F403
from .coords import *  # noqa: F401, F403
from .exceptions import *  # noqa: F401, F403
