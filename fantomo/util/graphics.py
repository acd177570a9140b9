# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Functions for graphical output."""

import numpy as np
import scipy.sparse

try:
    import matplotlib

    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False

__all__ = ('MATPLOTLIB_AVAILABLE', 'show_tomo', 'FanBeamDisplay')


# Colors of the source marker and the rays in the fan beam display
_SOURCE_COLOR = (60 / 255, 179 / 255, 113 / 255)
_RAY_COLOR = (220 / 255, 0.0, 0.0)


def _pause(fig, delay):
    """Redraw ``fig`` and wait for ``delay`` seconds.

    ``plt.pause`` with a non-positive interval runs the event loop of
    non-interactive canvases forever, hence only a redraw is done then.
    """
    import matplotlib.pyplot as plt

    if delay > 0:
        plt.pause(delay)
    else:
        fig.canvas.draw_idle()


def _safe_minmax(values):
    """Calculate min and max of array with guards for nan and inf."""
    values = np.asarray(values)
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return 0.0, 0.0
    return float(np.min(finite)), float(np.max(finite))


def _row_as_image(row, n):
    """Reshape a row of a tomography matrix to an ``(n, n)`` image.

    Flat cell indices run column by column, each column from the top of
    the domain to the bottom, so a column-major reshape gives an image
    whose first row is the top of the domain.
    """
    return np.reshape(np.asarray(row, dtype=float), (n, n), order='F')


def show_tomo(A, idx=None, timedelay=0.1, fig=None):
    """Illustrate a tomographic test problem row by row.

    Each row of ``A`` is reshaped into a square image and displayed, one
    row after the other.

    Parameters
    ----------
    A : `numpy.ndarray`, `scipy.sparse` matrix or `Operator`
        Tomography matrix, or a linear operator exposing ``shape`` and
        ``adjoint``. The number of columns must be a square number.
    idx : sequence of int, optional
        Indices of the rows to display. Default: all rows.
    timedelay : float, optional
        Time in seconds to wait between the display of two rows.
    fig : `matplotlib.figure.Figure`, optional
        Figure to draw in. By default a new figure is created.

    Returns
    -------
    fig : `matplotlib.figure.Figure`
        The figure showing the last displayed row.

    Notes
    -----
    For matrices the color range is fixed to the minimum and maximum of
    all entries. For operators a row is computed as ``A.adjoint(e_k)``
    with ``e_k`` the ``k``-th unit vector, and the color range is widened
    as rows are stepped through.
    """
    # Importing pyplot takes ~2 sec, only import when needed.
    import matplotlib.pyplot as plt
    from fantomo.operator.operator import Operator

    is_matrix = not isinstance(A, Operator)
    if is_matrix and not scipy.sparse.issparse(A):
        A = np.asarray(A)
        if A.ndim != 2:
            raise ValueError('`A` must be 2-dimensional, got array with '
                             'shape {}'.format(A.shape))

    nrows, ncols = A.shape
    n = int(round(np.sqrt(ncols)))
    if n * n != ncols:
        raise ValueError('number of columns of `A` must be a square number, '
                         'got {}'.format(ncols))

    if idx is None:
        idx = range(nrows)

    if is_matrix:
        if scipy.sparse.issparse(A):
            A = scipy.sparse.csr_matrix(A)
            clim = [float(A.min()), float(A.max())]
        else:
            clim = list(_safe_minmax(A))
    else:
        clim = [0.0, np.finfo(float).eps]

    if fig is None:
        fig = plt.figure()
    else:
        fig.clf()

    ax = fig.add_subplot(111)
    image = ax.imshow(np.zeros((n, n)), cmap='bone', interpolation='nearest')
    ax.set_axis_off()
    fig.colorbar(image, ax=ax)
    image.set_clim(*clim)

    for k in idx:
        if is_matrix:
            if scipy.sparse.issparse(A):
                row = A.getrow(k).toarray().ravel()
            else:
                row = A[k]
        else:
            unit = np.zeros(nrows)
            unit[k] = 1.0
            row = A.adjoint(unit)
            minval, maxval = _safe_minmax(row)
            clim = [min(clim[0], minval), max(clim[1], maxval)]
            image.set_clim(*clim)

        image.set_data(_row_as_image(row, n))
        ax.set_title('Row {} of {}'.format(k, nrows))
        _pause(fig, timedelay)

    return fig


class FanBeamDisplay(object):

    """Step-by-step illustration of the rays of a fan beam geometry.

    For every source position, the domain is drawn as a random image
    together with a marker for the source, and then every ray of the fan
    is added as a line. Each step waits for ``delay`` seconds.
    """

    def __init__(self, geometry, delay, fig=None):
        """Initialize a new instance.

        Parameters
        ----------
        geometry : `FanBeamGeometry`
            Geometry whose rays are illustrated.
        delay : positive float
            Time in seconds to pause after each drawing step.
        fig : `matplotlib.figure.Figure`, optional
            Figure to draw in. By default a new figure is created.
        """
        import matplotlib.pyplot as plt

        self.geometry = geometry
        self.delay = float(delay)
        if self.delay < 0:
            raise ValueError('`delay` must be nonnegative, got {}'
                             ''.format(delay))

        n = geometry.n
        self.background = np.random.rand(n, n)
        self.fig = plt.figure() if fig is None else fig
        self.ax = None

    def show_source(self, src):
        """Start a new frame with the domain and the source at ``src``."""
        self.fig.clf()
        _pause(self.fig, self.delay)

        half = self.geometry.n / 2
        radius = self.geometry.src_distance
        self.ax = self.fig.add_subplot(111)
        self.ax.imshow(self.background, cmap='gray', origin='lower',
                       interpolation='nearest',
                       extent=[-half, half, -half, half])
        self.ax.plot(src[0], src[1], 'o', color=_SOURCE_COLOR,
                     linewidth=1.5, markersize=10)
        self.ax.set_aspect('equal')
        self.ax.set_xlim(-1.1 * radius, 1.1 * radius)
        self.ax.set_ylim(-1.1 * radius, 1.1 * radius)

    def show_ray(self, src, direction):
        """Draw the ray from ``src`` along ``direction``."""
        if self.ax is None:
            raise RuntimeError('`show_source` must be called before '
                               '`show_ray`')

        radius = self.geometry.src_distance
        end = np.asarray(src) + 1.7 * radius * np.asarray(direction)
        self.ax.plot([src[0], end[0]], [src[1], end[1]], '-',
                     color=_RAY_COLOR, linewidth=1.5)
        self.ax.set_xlim(-radius, radius)
        self.ax.set_ylim(-radius, radius)
        self.ax.set_xticklabels([])
        self.ax.set_yticklabels([])
        _pause(self.fig, self.delay)
