# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
This module provides the tool that sizes a kernel's index domain.
"""

import warnings

import numpy as np
from astropy.utils.exceptions import AstropyUserWarning

from psfkernels.kernels.fwhm import Correlated, Diagonal, Isotropic
from psfkernels.utils._parameters import as_pair

__all__ = ['DEFAULT_MAXSIZE', 'indices_from_extent']

DEFAULT_MAXSIZE = 3


def indices_from_extent(position, fwhm, maxsize=DEFAULT_MAXSIZE):
    """
    Compute the index ranges spanned by a kernel.

    Each range is centered on the rounded position along its axis and
    extends ``round(maxsize * fwhm)`` pixels to either side, inclusive.
    Rounding is to the nearest integer, with ties going to the nearest
    even integer.

    Parameters
    ----------
    position : array_like
        The ``(x, y)`` kernel center.

    fwhm : float, array_like, or FWHM record
        The kernel width, either a scalar used for both axes, a pair
        of per-axis widths, or an `Isotropic`, `Diagonal`, or
        `Correlated` record. Only the magnitude of the width is used.

    maxsize : float or array_like, optional
        The multiple of ``fwhm`` defining the half-width of each range.
        A scalar applies to both axes.

    Returns
    -------
    indices : tuple of 2 `range`
        The ``(x, y)`` index ranges. If the position or width is not
        finite, both ranges are empty.

    Examples
    --------
    >>> from psfkernels.kernels import indices_from_extent
    >>> indices_from_extent((0, 0), 2, 3)
    (range(-6, 7), range(-6, 7))
    >>> indices_from_extent((10.2, -3.7), (1, 2), 3)
    (range(7, 14), range(-10, 3))
    """
    position = as_pair('position', position, check_finite=False,
                       broadcast=False)
    maxsize = as_pair('maxsize', maxsize, lower_bound=(0, 1))
    if isinstance(fwhm, (Isotropic, Diagonal, Correlated)):
        width = fwhm.extent
    else:
        width = np.abs(as_pair('fwhm', fwhm, check_finite=False))

    center = np.rint(position)
    halfwidth = np.rint(maxsize * width)
    if not np.all(np.isfinite(center)) or not np.all(np.isfinite(halfwidth)):
        msg = (f'The kernel extent is undefined for position={position} '
               f'and fwhm={fwhm!r}; the kernel indices will be empty.')
        warnings.warn(msg, AstropyUserWarning)
        return range(0), range(0)

    # Python ints, since int64 overflows for very wide domains
    center = [int(value) for value in center]
    halfwidth = [int(value) for value in halfwidth]

    return tuple(range(cen - half, cen + half + 1)
                 for cen, half in zip(center, halfwidth, strict=True))
