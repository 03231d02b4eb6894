# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define the base class for lazily evaluated PSF kernels.
"""

import abc
import numbers
from dataclasses import dataclass

import numpy as np
from astropy import log

from psfkernels.kernels.extent import DEFAULT_MAXSIZE, indices_from_extent
from psfkernels.kernels.fwhm import parse_fwhm
from psfkernels.utils._parameters import as_pair
from psfkernels.utils._repr import make_repr
from psfkernels.utils.coords import Polar

__all__ = ['DEFAULT_DTYPE', 'KernelParams', 'PSFKernel',
           'make_kernel_params']

DEFAULT_DTYPE = np.float64


@dataclass(frozen=True, eq=False)
class KernelParams:
    """
    The canonical parameters of a kernel.

    Every kernel constructor form is reduced to this record before the
    kernel is built.

    Attributes
    ----------
    position : (2,) `~numpy.ndarray`
        The read-only ``(x, y)`` kernel center.

    fwhm : `~psfkernels.kernels.Isotropic`, \
            `~psfkernels.kernels.Diagonal`, or \
            `~psfkernels.kernels.Correlated`
        The kernel width.

    indices : tuple of 2 `range`
        The ``(x, y)`` index domain of the kernel.
    """

    position: np.ndarray
    fwhm: object
    indices: tuple


def _split_args(args, fwhm):
    """
    Split positional kernel arguments into a position and an FWHM.
    """
    nargs = len(args)
    if fwhm is None:
        if nargs == 1:
            return (0, 0), args[0]
        if nargs == 2:
            return args[0], args[1]
        if nargs == 3:
            return _xy_position(args[0], args[1]), args[2]
        msg = ('kernels take (fwhm), (position, fwhm), or (x, y, fwhm) '
               f'positional arguments; got {nargs} arguments')
        raise TypeError(msg)

    if nargs == 0:
        return (0, 0), fwhm
    if nargs == 1:
        return args[0], fwhm
    if nargs == 2:
        return _xy_position(args[0], args[1]), fwhm
    msg = ('kernels take at most 2 positional arguments when fwhm is '
           f'given by keyword; got {nargs} arguments')
    raise TypeError(msg)


def _xy_position(x, y):
    for name, value in (('x', x), ('y', y)):
        if (isinstance(value, (bool, np.bool_))
                or not isinstance(value, numbers.Real)):
            msg = f'{name} must be a real scalar; got {value!r}'
            raise TypeError(msg)
    return (x, y)


def make_kernel_params(*args, fwhm=None, maxsize=DEFAULT_MAXSIZE,
                       origin=None,
                       kinds=('isotropic', 'diagonal', 'correlated')):
    """
    Normalize kernel constructor arguments to a `KernelParams` record.

    The accepted positional forms are ``(fwhm)``, ``(position, fwhm)``,
    and ``(x, y, fwhm)``. The ``fwhm`` may instead be given by keyword,
    in which case the positional arguments are ``()``, ``(position)``,
    or ``(x, y)``. When no position is given, the kernel is placed at
    ``(0, 0)``.

    Parameters
    ----------
    *args
        The positional arguments described above. ``position`` may be
        a 2-element tuple, list, or `~numpy.ndarray`, or a
        `~psfkernels.utils.Polar` coordinate.

    fwhm : float, array_like, or FWHM record, optional
        The kernel width, if not given positionally.

    maxsize : float or array_like, optional
        The multiple of ``fwhm`` defining the half-width of the kernel
        index domain along each axis.

    origin : array_like, optional
        An ``(x, y)`` offset added to a `~psfkernels.utils.Polar`
        position after conversion to Cartesian coordinates. The default
        is ``(0, 0)``. Only valid with a polar position.

    kinds : tuple of str, optional
        The FWHM kinds the kernel can evaluate.

    Returns
    -------
    params : `KernelParams`
        The normalized parameters.

    Raises
    ------
    TypeError
        If the arguments do not match one of the accepted forms, or
        ``origin`` is given with a non-polar position.

    ValueError
        If the position is not two numbers.

    `~psfkernels.utils.FWHMShapeError`
        If the FWHM shape is not one of ``kinds``.
    """
    position, fwhm = _split_args(args, fwhm)

    if isinstance(position, Polar):
        if origin is None:
            origin = (0, 0)
        origin = as_pair('origin', origin, check_finite=False,
                         broadcast=False)
        position = position.to_cartesian() + origin
    elif origin is not None:
        msg = 'origin is only valid with a Polar position'
        raise TypeError(msg)

    position = as_pair('position', position, check_finite=False,
                       broadcast=False)
    position.flags.writeable = False
    fwhm = parse_fwhm(fwhm, kinds)
    indices = indices_from_extent(position, fwhm, maxsize)

    return KernelParams(position, fwhm, indices)


class PSFKernel(metaclass=abc.ABCMeta):
    """
    Abstract base class for lazily evaluated PSF kernels.

    A kernel behaves like a read-only 2D array: ``kernel[ix, iy]``
    computes the kernel value at the integer pixel ``(ix, iy)``. No
    values are stored; each read is a closed-form evaluation. The
    ``axes`` and ``size`` attributes describe the index domain that
    callers may use to build a finite array (see
    `~psfkernels.utils.materialize`), but reads outside of the domain
    are still evaluated.

    Kernels are amplitude-unnormalized: the value at the kernel center
    is 1.

    Parameters
    ----------
    *args
        The position and FWHM in one of the forms ``(fwhm)``,
        ``(position, fwhm)``, or ``(x, y, fwhm)``. ``position`` may be
        a 2-element tuple, list, or `~numpy.ndarray`, or a
        `~psfkernels.utils.Polar` coordinate. By default the kernel is
        placed at ``(0, 0)``.

    fwhm : float, array_like, or FWHM record, optional
        The full width at half maximum, if not given positionally.

    maxsize : float or array_like, optional
        The multiple of ``fwhm`` defining the half-width of the index
        domain. A scalar applies to both axes.

    origin : array_like, optional
        The ``(x, y)`` offset added to a `~psfkernels.utils.Polar`
        position.

    dtype : data-type, optional
        The numeric type of the values returned by reads.
    """

    _params = ('position', 'fwhm', 'indices', 'dtype')
    _fwhm_kinds = ('isotropic', 'diagonal')

    def __init__(self, *args, fwhm=None, maxsize=DEFAULT_MAXSIZE,
                 origin=None, dtype=DEFAULT_DTYPE):
        params = make_kernel_params(*args, fwhm=fwhm, maxsize=maxsize,
                                    origin=origin, kinds=self._fwhm_kinds)
        self._init_from_params(params, dtype)

    @classmethod
    def from_params(cls, params, dtype=DEFAULT_DTYPE):
        """
        Create a kernel from a `KernelParams` record.

        Parameters
        ----------
        params : `KernelParams`
            The normalized kernel parameters, e.g., from
            `make_kernel_params`.

        dtype : data-type, optional
            The numeric type of the values returned by reads.

        Returns
        -------
        result : `PSFKernel`
            The kernel.
        """
        kernel = cls.__new__(cls)
        kernel._init_from_params(params, dtype)
        return kernel

    def _init_from_params(self, params, dtype):
        if params.fwhm.kind not in self._fwhm_kinds:
            # raises FWHMShapeError listing the supported kinds
            parse_fwhm(params.fwhm, self._fwhm_kinds)

        dtype = np.dtype(dtype)
        if dtype.kind not in 'iufc':
            msg = f'dtype must be a numeric type; got {dtype}'
            raise TypeError(msg)

        self._position = params.position
        self._fwhm = params.fwhm
        self._indices = params.indices
        self._dtype = dtype
        self._evaluate = getattr(self, f'_evaluate_{params.fwhm.kind}')

        log.debug(f'{self.__class__.__name__} kernel at '
                  f'({self._position[0]}, {self._position[1]}) with '
                  f'{self._fwhm.kind} fwhm spans x={self._indices[0]}, '
                  f'y={self._indices[1]}')

    @abc.abstractmethod
    def _evaluate_isotropic(self, dx, dy):
        """
        Evaluate the kernel for an `~psfkernels.kernels.Isotropic`
        FWHM at the offset ``(dx, dy)`` from the kernel center.
        """
        msg = 'Needs to be implemented in a subclass'
        raise NotImplementedError(msg)

    @abc.abstractmethod
    def _evaluate_diagonal(self, dx, dy):
        """
        Evaluate the kernel for a `~psfkernels.kernels.Diagonal` FWHM
        at the offset ``(dx, dy)`` from the kernel center.
        """
        msg = 'Needs to be implemented in a subclass'
        raise NotImplementedError(msg)

    def __getitem__(self, index):
        if not isinstance(index, tuple) or len(index) != 2:
            msg = (f'{self.__class__.__name__} kernels must be indexed '
                   'with exactly 2 integers (ix, iy)')
            raise IndexError(msg)

        for idx in index:
            if (isinstance(idx, (bool, np.bool_))
                    or not isinstance(idx, numbers.Integral)):
                msg = ('only integers are valid kernel indices; got '
                       f'{idx!r}')
                raise TypeError(msg)

        dx = index[0] - self._position[0]
        dy = index[1] - self._position[1]
        return self._dtype.type(self._evaluate(dx, dy))

    def value_at(self, ix, iy):
        """
        Evaluate the kernel at the integer pixel ``(ix, iy)``.

        This is equivalent to ``kernel[ix, iy]``.

        Parameters
        ----------
        ix, iy : int
            The x and y pixel indices.

        Returns
        -------
        value : `~numpy.generic`
            The kernel value as a scalar of type ``dtype``.
        """
        return self[ix, iy]

    def __repr__(self):
        return make_repr(self, self._params)

    def __str__(self):
        return make_repr(self, self._params, long=True)

    def __eq__(self, other):
        """
        Equality operator for `PSFKernel`.
        """
        if not isinstance(other, self.__class__):
            return False

        return (np.array_equal(self.position, other.position)
                and self.fwhm == other.fwhm
                and self.indices == other.indices
                and self.dtype == other.dtype)

    def __ne__(self, other):
        """
        Inequality operator for `PSFKernel`.
        """
        return not self == other

    @property
    def position(self):
        """
        The read-only ``(x, y)`` kernel center as a float
        `~numpy.ndarray`.
        """
        return self._position

    @property
    def fwhm(self):
        """
        The kernel FWHM record.
        """
        return self._fwhm

    @property
    def dtype(self):
        """
        The `~numpy.dtype` of the values returned by reads.
        """
        return self._dtype

    @property
    def indices(self):
        """
        The ``(x, y)`` index domain as a tuple of 2 `range`.
        """
        return self._indices

    @property
    def axes(self):
        """
        The ``(x, y)`` index ranges of the kernel (same as
        ``indices``).
        """
        return self._indices

    @property
    def size(self):
        """
        The number of indices along the x and y axes.
        """
        # len() of a range is limited to sys.maxsize
        return tuple(max(axis.stop - axis.start, 0) for axis in self._indices)

    @property
    def shape(self):
        """
        The number of indices along the x and y axes (same as
        ``size``).
        """
        return self.size
