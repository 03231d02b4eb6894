# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Tests for the core module.
"""

import numpy as np
import pytest
from numpy.testing import assert_equal

from psfkernels.kernels import (AiryDisk, Diagonal, Gaussian, Isotropic,
                                KernelParams, PSFKernel, make_kernel_params)
from psfkernels.utils import FWHMShapeError, Polar


def test_abstract():
    with pytest.raises(TypeError):
        PSFKernel(2)


@pytest.mark.parametrize(('args', 'kwargs'), [
    ((2,), {}),
    (((0, 0), 2), {}),
    ((0, 0, 2), {}),
    ((), {'fwhm': 2}),
    (((0, 0),), {'fwhm': 2}),
    ((0, 0), {'fwhm': 2}),
    ((Polar(0, 0), 2), {}),
])
def test_make_kernel_params_forms(args, kwargs):
    params = make_kernel_params(*args, **kwargs)
    assert isinstance(params, KernelParams)
    assert_equal(params.position, (0.0, 0.0))
    assert params.position.dtype == float
    assert params.fwhm == Isotropic(2.0)
    assert params.indices == (range(-6, 7), range(-6, 7))


def test_make_kernel_params_polar():
    params = make_kernel_params(Polar(2, 0), (1, 2), origin=(1, -1),
                                maxsize=1)
    assert_equal(params.position, (3.0, -1.0))
    assert params.fwhm == Diagonal(1.0, 2.0)
    assert params.indices == (range(2, 5), range(-3, 2))


def test_make_kernel_params_readonly():
    params = make_kernel_params([1, 2], 3)
    with pytest.raises(ValueError):
        params.position[0] = 5.0


def test_make_kernel_params_invalid():
    match = 'kernels take'
    with pytest.raises(TypeError, match=match):
        make_kernel_params()
    with pytest.raises(TypeError, match=match):
        make_kernel_params(1, 2, 3, 4)
    with pytest.raises(TypeError, match=match):
        make_kernel_params(1, 2, 3, fwhm=4)

    match = 'x must be a real scalar'
    with pytest.raises(TypeError, match=match):
        make_kernel_params((1, 2), (3, 4), 1)
    match = 'y must be a real scalar'
    with pytest.raises(TypeError, match=match):
        make_kernel_params(1, True, 1)

    match = 'origin is only valid with a Polar position'
    with pytest.raises(TypeError, match=match):
        make_kernel_params((1, 2), 1, origin=(1, 1))

    match = 'position must have 2 elements'
    with pytest.raises(ValueError, match=match):
        make_kernel_params(1, 2)
    with pytest.raises(ValueError, match=match):
        make_kernel_params((1, 2, 3), 2)

    match = 'origin must have 2 elements'
    with pytest.raises(ValueError, match=match):
        make_kernel_params(Polar(1, 0), 2, origin=1)

    with pytest.raises(FWHMShapeError):
        make_kernel_params((0, 0), (1, 2, 3))
    with pytest.raises(FWHMShapeError):
        make_kernel_params(np.eye(2), kinds=('isotropic', 'diagonal'))


@pytest.mark.parametrize('kernel_class', [Gaussian, AiryDisk])
def test_from_params(kernel_class):
    params = make_kernel_params((1, 2), (2, 3))
    kernel = kernel_class.from_params(params, dtype=np.float32)
    assert kernel == kernel_class((1, 2), (2, 3), dtype=np.float32)
    assert kernel.dtype == np.float32
    assert kernel.axes == params.indices


def test_from_params_unsupported_fwhm():
    params = make_kernel_params((1, 2), np.eye(2))
    assert Gaussian.from_params(params).fwhm.kind == 'correlated'
    with pytest.raises(FWHMShapeError):
        AiryDisk.from_params(params)


@pytest.mark.parametrize('kernel_class', [Gaussian, AiryDisk])
def test_attributes(kernel_class):
    kernel = kernel_class((1, 2), 3, maxsize=(1, 2))
    assert_equal(kernel.position, (1.0, 2.0))
    assert kernel.fwhm == Isotropic(3.0)
    assert kernel.dtype == np.float64
    assert kernel.indices == (range(-2, 5), range(-4, 9))
    assert kernel.axes is kernel.indices
    assert kernel.size == (7, 13)
    assert kernel.shape == kernel.size


@pytest.mark.parametrize('kernel_class', [Gaussian, AiryDisk])
def test_immutable(kernel_class):
    kernel = kernel_class((1, 2), 3)
    with pytest.raises(AttributeError):
        kernel.position = (0, 0)
    with pytest.raises(AttributeError):
        kernel.fwhm = 2
    with pytest.raises(AttributeError):
        kernel.indices = (range(2), range(2))
    with pytest.raises(AttributeError):
        kernel.dtype = np.float32
    with pytest.raises(ValueError):
        kernel.position[0] = 0.0


@pytest.mark.parametrize('kernel_class', [Gaussian, AiryDisk])
def test_getitem(kernel_class):
    kernel = kernel_class((1, 2), 3)
    assert kernel[1, 2] == 1.0
    assert kernel[np.int64(1), np.int32(2)] == 1.0
    assert kernel.value_at(1, 2) == 1.0
    assert kernel.value_at(4, -3) == kernel[4, -3]

    match = 'must be indexed with exactly 2 integers'
    with pytest.raises(IndexError, match=match):
        kernel[1]
    with pytest.raises(IndexError, match=match):
        kernel[1, 2, 3]

    match = 'only integers are valid kernel indices'
    with pytest.raises(TypeError, match=match):
        kernel[1.0, 2]
    with pytest.raises(TypeError, match=match):
        kernel[1, np.float64(2.0)]
    with pytest.raises(TypeError, match=match):
        kernel[True, 2]
    with pytest.raises(TypeError, match=match):
        kernel[1:3, 2]


def test_repr():
    kernel = Gaussian((1, 2), 3)
    ref = ('Gaussian(position=array([1., 2.]), fwhm=Isotropic(value=3.0), '
           'indices=(range(-8, 11), range(-7, 12)), '
           "dtype=dtype('float64'))")
    assert repr(kernel) == ref

    ref = ('<psfkernels.kernels.gaussian.Gaussian>\n'
           'position: array([1., 2.])\n'
           'fwhm: Isotropic(value=3.0)\n'
           'indices: (range(-8, 11), range(-7, 12))\n'
           "dtype: dtype('float64')")
    assert str(kernel) == ref

    kernel = AiryDisk(fwhm=(1, 2))
    assert repr(kernel).startswith('AiryDisk(position=array([0., 0.]), '
                                   'fwhm=Diagonal(x=1.0, y=2.0)')


def test_equality():
    kernel = Gaussian(1, 2, 3)
    assert kernel == Gaussian((1, 2), 3)
    assert kernel == Gaussian(np.array([1.0, 2.0]), fwhm=3)
    assert kernel != Gaussian((1, 2), 3, dtype=np.float32)
    assert kernel != Gaussian((1, 2), 3, maxsize=2)
    assert kernel != Gaussian((1, 2), (3, 4))
    assert kernel != Gaussian((1, 3), 3)
    assert kernel != AiryDisk((1, 2), 3)
    assert kernel != 'Gaussian'


@pytest.mark.parametrize('dtype', [str, bool, object])
def test_invalid_dtype(dtype):
    match = 'dtype must be a numeric type'
    with pytest.raises(TypeError, match=match):
        Gaussian(2, dtype=dtype)
