# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities for converting phantoms between layouts."""

import numpy as np

__all__ = ('image_to_vector', 'vector_to_image')


def image_to_vector(image):
    """Flatten an image in the cell ordering of the system matrix.

    Parameters
    ----------
    image : `array-like`, shape ``(n, n)``
        Image indexed as ``image[ix, iy]``, with ``ix`` running from left
        to right and ``iy`` from bottom to top.

    Returns
    -------
    vector : `numpy.ndarray`, shape ``(n ** 2,)``
        Entry ``ix * n + (n - 1 - iy)`` holds ``image[ix, iy]``.

    Examples
    --------
    >>> image = np.array([[1, 2],
    ...                   [3, 4]])
    >>> image_to_vector(image).tolist()
    [2, 1, 4, 3]
    """
    image = np.asarray(image)
    if image.ndim != 2 or image.shape[0] != image.shape[1]:
        raise ValueError('`image` must be a square 2d array, got array '
                         'with shape {}'.format(image.shape))
    return image[:, ::-1].ravel()


def vector_to_image(vector, n=None):
    """Reshape a vector in cell ordering to an image.

    This is the inverse of `image_to_vector`.

    Parameters
    ----------
    vector : `array-like`, shape ``(n ** 2,)``
        Values in the cell ordering of the system matrix.
    n : positive int, optional
        Number of cells per side. By default it is inferred from the
        length of ``vector``.

    Returns
    -------
    image : `numpy.ndarray`, shape ``(n, n)``
        Image indexed as ``image[ix, iy]``.

    Examples
    --------
    >>> vector_to_image([2, 1, 4, 3]).tolist()
    [[1, 2], [3, 4]]
    """
    vector = np.asarray(vector)
    if vector.ndim != 1:
        raise ValueError('`vector` must be 1-dimensional, got array with '
                         'shape {}'.format(vector.shape))
    if n is None:
        n = int(round(np.sqrt(vector.size)))
    if n * n != vector.size:
        raise ValueError('length of `vector` must be a square number '
                         '{}, got {}'.format(n * n, vector.size))
    return vector.reshape((n, n))[:, ::-1]


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
