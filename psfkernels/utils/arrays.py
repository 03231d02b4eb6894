# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
This module provides tools to build dense arrays from lazy kernels.
"""

import numpy as np
from astropy import log

__all__ = ['materialize']


def materialize(kernel, dtype=None):
    """
    Evaluate a kernel over its index domain.

    The kernel is read once for each ``(ix, iy)`` pair in
    ``kernel.axes``.

    Parameters
    ----------
    kernel : `~psfkernels.kernels.PSFKernel`
        The kernel to evaluate.

    dtype : data-type, optional
        The data type of the output array. If `None`, then the kernel
        ``dtype`` is used.

    Returns
    -------
    result : 2D `~numpy.ndarray`
        The kernel values with shape ``kernel.size``. Element ``[i, j]``
        is ``kernel[kernel.axes[0][i], kernel.axes[1][j]]``, i.e., the
        first array axis is the kernel x axis.

    Examples
    --------
    >>> from psfkernels.kernels import Gaussian
    >>> from psfkernels.utils import materialize
    >>> data = materialize(Gaussian(1))
    >>> data.shape
    (7, 7)
    >>> float(data[3, 3])
    1.0
    """
    if dtype is None:
        dtype = kernel.dtype
    xaxis, yaxis = kernel.axes

    data = np.empty(kernel.size, dtype=dtype)
    for i, ix in enumerate(xaxis):
        for j, iy in enumerate(yaxis):
            data[i, j] = kernel[ix, iy]

    log.debug(f'Materialized {kernel.__class__.__name__} kernel with '
              f'shape {data.shape}')

    return data
