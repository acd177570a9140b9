# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Fan beam geometries in 2 dimensions."""

import numpy as np

from fantomo.tomo.util.utility import cosd, rotation_matrix_deg, sind
from fantomo.util.exceptions import InvalidParameterError
from fantomo.util.utility import array_str, indent, signature_string

__all__ = ('MIN_SRC_RADIUS', 'resolve_fan_params', 'FanBeamGeometry')


# The source must lie outside the circle enclosing the unit square
MIN_SRC_RADIUS = np.sqrt(2) / 2


def _default_fan_angle(src_radius):
    """Fan span in degrees such that the outermost rays graze the corners.

    For a source at ``(0, R * N)``, the first and last rays touch the
    points ``(-N / 2, N / 2)`` and ``(N / 2, N / 2)``, respectively.
    """
    return 2 * np.degrees(np.arctan(1 / (2 * src_radius - 1)))


def resolve_fan_params(n, angles=None, num_rays=None, src_radius=None,
                       fan_angle=None):
    """Return the scan parameters with defaults filled in and checked.

    Parameters
    ----------
    n : positive int
        Number of cells per side of the square domain.
    angles : `array-like`, optional
        Rotation angles of the source in degrees.
        Default: ``0, 1, ..., 359``.
    num_rays : positive int, optional
        Number of rays per angle. Default: ``round(sqrt(2) * n)``.
    src_radius : float, optional
        Distance from the source to the center of the domain, in units
        of the side length ``n``. Must be at least ``sqrt(2) / 2``.
        Default: 2.
    fan_angle : float, optional
        Angular span of the rays in degrees, in ``[0, 180]``. The default
        is chosen such that the fan exactly covers the domain when the
        source sits at ``(0, src_radius * n)``.

    Returns
    -------
    angles : `numpy.ndarray`
        The rotation angles as float array of shape ``(num_angles,)``.
    num_rays : int
    src_radius : float
    fan_angle : float

    Raises
    ------
    InvalidParameterError
        If any of the parameters violates its constraints.

    Examples
    --------
    >>> angles, num_rays, src_radius, fan_angle = resolve_fan_params(10)
    >>> angles.shape, num_rays, src_radius
    ((360,), 14, 2.0)
    >>> round(fan_angle, 4)
    36.8699
    """
    n_in = n
    try:
        n = int(n)
    except (TypeError, ValueError):
        raise InvalidParameterError('`n` must be a positive integer, got {!r}'
                                    ''.format(n_in))
    if isinstance(n_in, (bool, np.bool_)) or n != n_in or n < 1:
        raise InvalidParameterError('`n` must be a positive integer, got {!r}'
                                    ''.format(n_in))

    if angles is None:
        angles = FanBeamGeometry._default_config['angles']
    angles_in = angles
    angles = np.array(angles, dtype=float, ndmin=1)
    if angles.ndim != 1 or angles.size == 0:
        raise InvalidParameterError('`angles` must be a nonempty 1d sequence, '
                                    'got {!r}'.format(angles_in))
    if not np.all(np.isfinite(angles)):
        raise InvalidParameterError('`angles` must be finite, got {}'
                                    ''.format(array_str(angles)))

    if num_rays is None:
        num_rays = int(np.floor(np.sqrt(2) * n + 0.5))
    num_rays_in = num_rays
    try:
        num_rays = int(num_rays)
    except (TypeError, ValueError):
        raise InvalidParameterError('`num_rays` must be a positive integer, '
                                    'got {!r}'.format(num_rays_in))
    if (isinstance(num_rays_in, (bool, np.bool_)) or
            num_rays != num_rays_in or num_rays < 1):
        raise InvalidParameterError('`num_rays` must be a positive integer, '
                                    'got {!r}'.format(num_rays_in))

    if src_radius is None:
        src_radius = FanBeamGeometry._default_config['src_radius']
    src_radius = float(src_radius)
    if not src_radius >= MIN_SRC_RADIUS:
        raise InvalidParameterError(
            'source must lie outside domain: `src_radius` must be at least '
            'sqrt(2)/2, got {}'.format(src_radius))

    if fan_angle is None:
        fan_angle = _default_fan_angle(src_radius)
    fan_angle = float(fan_angle)
    if not 0 <= fan_angle <= 180:
        raise InvalidParameterError('`fan_angle` must be in the interval '
                                    '[0, 180], got {}'.format(fan_angle))

    return angles, num_rays, src_radius, fan_angle


class FanBeamGeometry(object):

    """2d fan beam geometry on a square grid of unit cells.

    The domain is the square ``[-n/2, n/2]^2`` split into ``n x n`` unit
    cells. A point source rotates on a circle of radius
    ``src_radius * n`` around the origin, starting at ``(0, src_radius *
    n)`` for angle 0, and rotating counter-clockwise by the given angles
    (in degrees). For each angle, ``num_rays`` rays leave the source in
    a fan of total span ``fan_angle`` degrees centered on the direction
    towards the origin.

    Instances are immutable.
    """

    _default_config = dict(angles=np.arange(360.0), src_radius=2.0)

    def __init__(self, n, angles=None, num_rays=None, src_radius=None,
                 fan_angle=None):
        """Initialize a new instance.

        Parameters
        ----------
        n : positive int
            Number of cells per side of the square domain.
        angles : `array-like`, optional
            Rotation angles of the source in degrees.
            Default: ``0, 1, ..., 359``.
        num_rays : positive int, optional
            Number of rays per angle. Default: ``round(sqrt(2) * n)``.
        src_radius : float, optional
            Distance from the source to the center of the domain, in
            units of the side length ``n``. Default: 2.
        fan_angle : float, optional
            Angular span of the rays in degrees. By default, the first
            and last rays of the source at angle 0 touch the corners
            ``(-n/2, n/2)`` and ``(n/2, n/2)``.

        Examples
        --------
        >>> geom = FanBeamGeometry(4, angles=[0, 90], num_rays=3)
        >>> geom.shape
        (6, 16)
        >>> geom.src_position(1).tolist()
        [-8.0, 0.0]
        >>> geom.ray_angles.tolist()[1]
        0.0
        """
        angles, num_rays, src_radius, fan_angle = resolve_fan_params(
            n, angles, num_rays, src_radius, fan_angle)

        self.__n = int(n)
        self.__angles = angles
        self.__angles.setflags(write=False)
        self.__num_rays = num_rays
        self.__src_radius = src_radius
        self.__fan_angle = fan_angle

        # `linspace` with a single point yields the end point, as in the
        # classical formulation of this test problem
        if num_rays == 1:
            ray_angles = np.array([fan_angle / 2])
        else:
            ray_angles = np.linspace(-fan_angle / 2, fan_angle / 2, num_rays)
        ray_angles.setflags(write=False)
        self.__ray_angles = ray_angles

    @property
    def n(self):
        """Number of cells per side of the domain."""
        return self.__n

    @property
    def angles(self):
        """Rotation angles of the source in degrees."""
        return self.__angles

    @property
    def num_angles(self):
        """Number of rotation angles."""
        return self.__angles.size

    @property
    def num_rays(self):
        """Number of rays per angle."""
        return self.__num_rays

    @property
    def src_radius(self):
        """Source circle radius in units of the domain side length."""
        return self.__src_radius

    @property
    def src_distance(self):
        """Absolute distance from the source to the domain center."""
        return self.src_radius * self.n

    @property
    def fan_angle(self):
        """Total angular span of the rays in degrees."""
        return self.__fan_angle

    @property
    def ray_angles(self):
        """Offset angles of the rays from the center direction, degrees."""
        return self.__ray_angles

    @property
    def shape(self):
        """Shape ``(num_angles * num_rays, n ** 2)`` of the system matrix."""
        return (self.num_angles * self.num_rays, self.n ** 2)

    def src_position(self, index):
        """Return the source position for the angle with ``index``.

        For an angle ``phi``, the source position is given by::

            src(phi) = rot_matrix(phi) * (0, src_radius * n)

        Parameters
        ----------
        index : int
            Index into `angles`.

        Returns
        -------
        point : `numpy.ndarray`, shape ``(2,)``
        """
        xy0 = np.array([0.0, self.src_distance])
        return rotation_matrix_deg(self.angles[index]).dot(xy0)

    def center_direction(self, index):
        """Unit vector from the source at ``index`` towards the origin."""
        return -self.src_position(index) / self.src_distance

    def ray_directions(self, index):
        """Return the directions of all rays for the angle with ``index``.

        The center direction is rotated by each of the `ray_angles`. The
        rotation is applied to the direction vector; the source position
        stays the same for all rays of one angle.

        Returns
        -------
        directions : `numpy.ndarray`, shape ``(num_rays, 2)``
        """
        a0, b0 = self.center_direction(index)
        cph = cosd(self.ray_angles)
        sph = sind(self.ray_angles)
        return np.stack([cph * a0 + (-sph) * b0,
                         sph * a0 + cph * b0], axis=-1)

    def rays(self):
        """Iterate over all rays of this geometry.

        Rays are generated angle by angle, and within each angle, ray by
        ray.

        Yields
        ------
        angle_index : int
        ray_index : int
        src : `numpy.ndarray`, shape ``(2,)``
            Source position of the ray.
        direction : `numpy.ndarray`, shape ``(2,)``
            Unit direction vector of the ray.
        """
        for i in range(self.num_angles):
            src = self.src_position(i)
            directions = self.ray_directions(i)
            for j in range(self.num_rays):
                yield i, j, src, directions[j]

    def __eq__(self, other):
        """Return ``self == other``."""
        if other is self:
            return True
        return (isinstance(other, FanBeamGeometry) and
                self.n == other.n and
                np.array_equal(self.angles, other.angles) and
                self.num_rays == other.num_rays and
                self.src_radius == other.src_radius and
                self.fan_angle == other.fan_angle)

    def __ne__(self, other):
        """Return ``self != other``."""
        return not self.__eq__(other)

    def __hash__(self):
        """Return ``hash(self)``."""
        return hash((type(self), self.n, self.angles.tobytes(),
                     self.num_rays, self.src_radius, self.fan_angle))

    def __repr__(self):
        """Return ``repr(self)``."""
        posargs = [self.n]
        optargs = [('num_rays', self.num_rays, -1),
                   ('src_radius', self.src_radius, -1),
                   ('fan_angle', self.fan_angle, -1)]
        sig_str = signature_string(posargs, optargs, sep=',\n')
        angles_str = 'angles=' + array_str(self.angles)
        return '{}(\n{}\n)'.format(self.__class__.__name__,
                                   indent(sig_str + ',\n' + angles_str))


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
