# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
This module provides custom exceptions.
"""

__all__ = ['FWHMShapeError']


class FWHMShapeError(ValueError):
    """
    An error class to indicate an FWHM whose shape a kernel cannot
    evaluate.
    """
