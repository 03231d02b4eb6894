# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define the full width at half maximum (FWHM) forms accepted by the
kernels.

An FWHM is one of three shapes: a scalar (isotropic), a pair of
per-axis widths (diagonal), or a 2x2 matrix (correlated). Each shape is
a frozen record with a ``kind`` tag that the kernels use to pick their
evaluation rule once, at construction time.
"""

from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from psfkernels.utils.exceptions import FWHMShapeError

__all__ = ['Correlated', 'Diagonal', 'Isotropic', 'parse_fwhm']


@dataclass(frozen=True)
class Isotropic:
    """
    A single FWHM applied to both axes.

    Parameters
    ----------
    value : float
        The full width at half maximum.
    """

    kind: ClassVar[str] = 'isotropic'

    value: float

    @property
    def extent(self):
        """
        The ``(x, y)`` widths used to size the kernel index domain.
        """
        width = abs(self.value)
        return np.array((width, width))


@dataclass(frozen=True)
class Diagonal:
    """
    Independent FWHMs along the x and y axes, with no cross term.

    Parameters
    ----------
    x, y : float
        The full width at half maximum along the x and y axes.
    """

    kind: ClassVar[str] = 'diagonal'

    x: float
    y: float

    @property
    def extent(self):
        """
        The ``(x, y)`` widths used to size the kernel index domain.
        """
        return np.abs(np.array((self.x, self.y)))


@dataclass(frozen=True, eq=False)
class Correlated:
    """
    A 2x2 FWHM matrix describing a correlated profile.

    The profile uses the squared Mahalanobis distance with the
    precision matrix ``Q``, the matrix inverse of the FWHM matrix after
    squaring each element. ``Q`` is computed once when the record is
    created.

    Parameters
    ----------
    matrix : (2, 2) array_like
        The FWHM matrix.

    Raises
    ------
    ValueError
        If the element-wise squared matrix is singular.
    """

    kind: ClassVar[str] = 'correlated'

    matrix: np.ndarray
    precision: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        matrix = np.array(self.matrix, dtype=float)
        try:
            precision = np.linalg.inv(matrix ** 2)
        except np.linalg.LinAlgError:
            msg = ('fwhm matrix must be invertible after squaring each '
                   'element')
            raise ValueError(msg) from None

        matrix.flags.writeable = False
        precision.flags.writeable = False
        object.__setattr__(self, 'matrix', matrix)
        object.__setattr__(self, 'precision', precision)

    def __eq__(self, other):
        if not isinstance(other, Correlated):
            return NotImplemented
        return np.array_equal(self.matrix, other.matrix)

    __hash__ = None

    @property
    def extent(self):
        """
        The ``(x, y)`` widths used to size the kernel index domain.

        These are the marginal widths of the profile, i.e., the
        magnitudes of the diagonal elements of the FWHM matrix.
        """
        return np.abs(np.diag(self.matrix))


_SHAPE_NAMES = {'isotropic': 'a scalar',
                'diagonal': 'a 2-element vector',
                'correlated': 'a 2x2 matrix'}


def _unsupported(kinds, fwhm):
    names = [_SHAPE_NAMES[kind] for kind in kinds]
    if len(names) > 1:
        accepted = ', '.join(names[:-1]) + f' or {names[-1]}'
    else:
        accepted = names[0]
    msg = f'fwhm must be {accepted}; got {fwhm!r}'
    return FWHMShapeError(msg)


def parse_fwhm(fwhm, kinds=('isotropic', 'diagonal', 'correlated')):
    """
    Convert an input FWHM to one of the FWHM records.

    Parameters
    ----------
    fwhm : float, array_like, or FWHM record
        The input FWHM. A scalar gives `Isotropic`, a 2-element
        sequence gives `Diagonal`, and a 2x2 array gives `Correlated`.
        Existing records are returned unchanged.

    kinds : tuple of str, optional
        The FWHM kinds that are accepted.

    Returns
    -------
    result : `Isotropic`, `Diagonal`, or `Correlated`
        The FWHM record.

    Raises
    ------
    FWHMShapeError
        If ``fwhm`` is not numeric or its shape is not one of the
        accepted ``kinds``.
    """
    if isinstance(fwhm, (Isotropic, Diagonal, Correlated)):
        if fwhm.kind not in kinds:
            raise _unsupported(kinds, fwhm)
        return fwhm

    value = np.asanyarray(fwhm)
    if value.dtype.kind not in 'iuf':
        raise _unsupported(kinds, fwhm)

    if value.ndim == 0:
        kind = 'isotropic'
    elif value.shape == (2,):
        kind = 'diagonal'
    elif value.shape == (2, 2):
        kind = 'correlated'
    else:
        kind = None

    if kind not in kinds:
        raise _unsupported(kinds, fwhm)

    if kind == 'isotropic':
        return Isotropic(float(value))
    if kind == 'diagonal':
        return Diagonal(float(value[0]), float(value[1]))
    return Correlated(value)
