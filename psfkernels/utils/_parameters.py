# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define tools for parameter validation.
"""

import numpy as np


def as_pair(name, value, lower_bound=None, *, check_finite=True,
            broadcast=True):
    """
    Define a pair of float values as a 1D array.

    Parameters
    ----------
    name : str
        The name of the parameter, which is used in error messages.

    value : float or float array_like
        The input value.

    lower_bound : tuple, optional
        A tuple defining the allowed lower bound of the value. The first
        element is the bound and the second element indicates whether
        the bound is exclusive (0) or inclusive (1).

    check_finite : bool, optional
        Whether to raise a `ValueError` if any value is not finite.

    broadcast : bool, optional
        Whether a single value is repeated for both axes. If `False`,
        exactly two values are required.

    Returns
    -------
    result : (2,) `~numpy.ndarray`
        The pair as a 1D array of two floats.

    Examples
    --------
    >>> from psfkernels.utils._parameters import as_pair

    >>> as_pair('myparam', 4)
    array([4., 4.])

    >>> as_pair('myparam', (3, 4.5))
    array([3. , 4.5])
    """
    value = np.atleast_1d(value)

    if value.dtype.kind not in 'iuf':
        msg = f'{name} must have real numeric values'
        raise ValueError(msg)
    value = value.astype(float)

    if check_finite and np.any(~np.isfinite(value)):
        msg = f'{name} must be a finite value'
        raise ValueError(msg)

    if value.ndim != 1:
        msg = f'{name} must be 1D'
        raise ValueError(msg)
    if broadcast and len(value) == 1:
        value = np.array((value[0], value[0]))
    if len(value) != 2:
        if broadcast:
            msg = f'{name} must have 1 or 2 elements'
        else:
            msg = f'{name} must have 2 elements'
        raise ValueError(msg)

    if lower_bound is not None:
        if len(lower_bound) != 2:
            msg = 'lower_bound must contain only 2 elements'
            raise ValueError(msg)
        bound, inclusive = lower_bound
        if inclusive == 1:
            oper = '>'
            mask = value <= bound
        else:
            oper = '>='
            mask = value < bound
        if np.any(mask):
            msg = f'{name} must be {oper} {bound}'
            raise ValueError(msg)

    return value
