# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
psfkernels provides lazily evaluated, unnormalized point spread
function (PSF) kernels for image synthesis and analysis.

Each kernel is an indexable 2D function object that evaluates a
closed-form Gaussian or Airy disk profile at integer pixel coordinates
without building a dense array.
"""

try:
    from .version import version as __version__
except ImportError:
    __version__ = ''
