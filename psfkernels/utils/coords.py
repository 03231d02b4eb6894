# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
This module provides a polar coordinate record used to place kernels.
"""

from dataclasses import dataclass

import astropy.units as u
import numpy as np

__all__ = ['Polar']


@dataclass(frozen=True)
class Polar:
    """
    A 2D position in polar coordinates.

    Parameters
    ----------
    r : float
        The radial distance from the origin.

    theta : float or `~astropy.units.Quantity`
        The counterclockwise angle from the positive x axis, either as
        a float (in radians) or a `~astropy.units.Quantity` angle.

    Examples
    --------
    >>> import astropy.units as u
    >>> from psfkernels.utils import Polar
    >>> Polar(5, 0 * u.deg).to_cartesian()
    array([5., 0.])
    """

    r: float
    theta: float

    @property
    def theta_rad(self):
        """
        The angle in radians as a float.
        """
        if isinstance(self.theta, u.Quantity):
            return self.theta.to_value(u.rad)
        return float(self.theta)

    def to_cartesian(self):
        """
        Convert to Cartesian coordinates.

        Returns
        -------
        xy : (2,) `~numpy.ndarray`
            The ``(x, y)`` position.
        """
        theta = self.theta_rad
        return np.array((self.r * np.cos(theta), self.r * np.sin(theta)),
                        dtype=float)

    @classmethod
    def from_cartesian(cls, x, y):
        """
        Create a `Polar` from Cartesian ``(x, y)`` coordinates.

        The angle is given in radians in the range ``[-pi, pi]``.
        """
        return cls(float(np.hypot(x, y)), float(np.arctan2(y, x)))
