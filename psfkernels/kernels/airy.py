# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define the Airy disk PSF kernel.
"""

import numpy as np
from scipy.special import j1

from psfkernels.kernels.core import PSFKernel

__all__ = ['AIRY_FWHM_TO_RADIUS', 'AIRY_RZ', 'AiryDisk']

# empirical ratio of the Airy disk scale radius to its FWHM
AIRY_FWHM_TO_RADIUS = 1.18677

# first zero of the Bessel function J1, in units of pi
AIRY_RZ = 3.8317059702075125 / np.pi


def _airy_profile(r):
    # 2 J1(x) / x -> 1 as x -> 0
    if r == 0:
        return 1.0
    x = np.pi * r
    return 2.0 * j1(x) / x


class AiryDisk(PSFKernel):
    r"""
    An unnormalized Airy disk kernel.

    The kernel is evaluated lazily at integer pixel coordinates with
    ``kernel[ix, iy]``. The amplitude is unnormalized, meaning the
    value at the kernel center is 1, so the kernel acts as a
    transmission weighting.

    Parameters
    ----------
    *args
        The position and FWHM in one of the forms ``(fwhm)``,
        ``(position, fwhm)``, or ``(x, y, fwhm)``. ``position`` may be
        a 2-element tuple, list, or `~numpy.ndarray`, or a
        `~psfkernels.utils.Polar` coordinate. By default the kernel is
        placed at ``(0, 0)``.

    fwhm : float or array_like, optional
        The full width at half maximum, if not given positionally. A
        scalar is isotropic and a 2-element sequence gives independent
        ``(x, y)`` widths. Correlated (matrix) widths are not
        supported.

    maxsize : float or array_like, optional
        The multiple of ``fwhm`` defining the half-width of the index
        domain (``axes``). A scalar applies to both axes.

    origin : array_like, optional
        The ``(x, y)`` offset added to a `~psfkernels.utils.Polar`
        position. The default is ``(0, 0)``.

    dtype : data-type, optional
        The numeric type of the values returned by reads.

    See Also
    --------
    Gaussian

    Notes
    -----
    The kernel is defined as:

    .. math::

        f(r) = \frac{2 J_{1}(\pi r)}{\pi r}

    where :math:`J_{1}` is the first-order Bessel function of the first
    kind and :math:`r` is the distance from the kernel position scaled
    by :math:`R / R_{z}`. Here :math:`R = 1.18677 \, \rm{FWHM}` and
    :math:`R_{z}` is the first zero of :math:`J_{1}` divided by
    :math:`\pi` (:math:`R_{z} \approx 1.2197`). At :math:`r = 0` the
    value is exactly 1. If the FWHM is a pair of values, the scaling is
    applied along each axis.

    Examples
    --------
    >>> from psfkernels.kernels import AiryDisk
    >>> kernel = AiryDisk(4, -2, 2)
    >>> kernel[4, -2]
    np.float64(1.0)
    >>> kernel.size
    (13, 13)
    """

    def _evaluate_isotropic(self, dx, dy):
        radius = np.float64(self._fwhm.value) * AIRY_FWHM_TO_RADIUS
        with np.errstate(divide='ignore', invalid='ignore'):
            r = np.hypot(dx, dy) / (radius / AIRY_RZ)
            return _airy_profile(r)

    def _evaluate_diagonal(self, dx, dy):
        fwhm = np.array((self._fwhm.x, self._fwhm.y))
        with np.errstate(divide='ignore', invalid='ignore'):
            weights = (AIRY_RZ / (fwhm * AIRY_FWHM_TO_RADIUS)) ** 2
            r = np.sqrt(weights @ np.array((dx ** 2, dy ** 2)))
            return _airy_profile(r)
