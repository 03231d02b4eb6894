# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define the Gaussian PSF kernel.
"""

import numpy as np

from psfkernels.kernels.core import PSFKernel

__all__ = ['Gaussian', 'Normal']

FOUR_LN2 = 4.0 * np.log(2.0)


class Gaussian(PSFKernel):
    r"""
    An unnormalized bivariate Gaussian kernel.

    The kernel is evaluated lazily at integer pixel coordinates with
    ``kernel[ix, iy]``. The amplitude is unnormalized, meaning the
    value at the kernel center is 1. This is distinct from the
    probability density of a bivariate Gaussian, which sums to 1; the
    kernel acts as a transmission weighting instead of a probability
    weighting.

    Parameters
    ----------
    *args
        The position and FWHM in one of the forms ``(fwhm)``,
        ``(position, fwhm)``, or ``(x, y, fwhm)``. ``position`` may be
        a 2-element tuple, list, or `~numpy.ndarray`, or a
        `~psfkernels.utils.Polar` coordinate. By default the kernel is
        placed at ``(0, 0)``.

    fwhm : float, array_like, or FWHM record, optional
        The full width at half maximum, if not given positionally. A
        scalar is isotropic, a 2-element sequence gives independent
        ``(x, y)`` widths, and a 2x2 matrix describes a correlated
        profile.

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
    AiryDisk

    Notes
    -----
    The kernel is defined as:

    .. math::

        f(\mathbf{x} | \hat{\mathbf{x}}, \rm{FWHM}) =
            \exp \left( -4 \ln{2} \,
            \frac{\|\mathbf{x} - \hat{\mathbf{x}}\|^{2}}{\rm{FWHM}^{2}}
            \right)

    where :math:`\hat{\mathbf{x}}` is the kernel position and
    :math:`\|\cdot\|^{2}` is the squared Euclidean distance. If the
    FWHM is a pair of values, the distance along each axis is weighted
    by the inverse square of the FWHM along that axis.

    If the FWHM is a 2x2 matrix :math:`F`, the kernel uses the squared
    Mahalanobis distance:

    .. math::

        f(\mathbf{x} | \hat{\mathbf{x}}, Q) =
            \exp \left( -4 \ln{2} \,
            (\mathbf{x} - \hat{\mathbf{x}})^{T} Q
            (\mathbf{x} - \hat{\mathbf{x}}) \right)

    where :math:`Q` is the precision matrix, the matrix inverse of
    :math:`F` after squaring each element.

    Examples
    --------
    >>> from psfkernels.kernels import Gaussian
    >>> kernel = Gaussian((2, 3), 4)
    >>> kernel[2, 3]
    np.float64(1.0)
    >>> round(float(kernel[4, 3]), 6)
    0.5
    >>> kernel.axes
    (range(-10, 15), range(-9, 16))
    """

    _fwhm_kinds = ('isotropic', 'diagonal', 'correlated')

    def _evaluate_isotropic(self, dx, dy):
        fwhm = np.float64(self._fwhm.value)
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.exp(-FOUR_LN2 * (dx ** 2 + dy ** 2) / fwhm ** 2)

    def _evaluate_diagonal(self, dx, dy):
        fwhm = np.array((self._fwhm.x, self._fwhm.y))
        with np.errstate(divide='ignore', invalid='ignore'):
            weights = 1.0 / fwhm ** 2
            delta = weights @ np.array((dx ** 2, dy ** 2))
            return np.exp(-FOUR_LN2 * delta)

    def _evaluate_correlated(self, dx, dy):
        resid = np.array((dx, dy))
        delta = resid @ self._fwhm.precision @ resid
        return np.exp(-FOUR_LN2 * delta)


Normal = Gaussian
