# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Named test phantoms as vectors in cell ordering."""

import numpy as np

from fantomo.phantom.geometric import cuboid, defrise
from fantomo.phantom.phantom_utils import image_to_vector
from fantomo.phantom.transmission import shepp_logan
from fantomo.util.utility import is_string

__all__ = ('PHANTOM_NAMES', 'phantom_gallery')


PHANTOM_NAMES = ('shepplogan', 'defrise', 'cuboid')


def phantom_gallery(name, n):
    """Return a named phantom as a vector with values in ``[0, 1]``.

    Parameters
    ----------
    name : str
        Name of the phantom. Supported:

        - ``'shepplogan'``: modified Shepp-Logan head phantom
        - ``'defrise'``: stack of 8 flat ellipses
        - ``'cuboid'``: centered square

    n : positive int
        Number of cells per side.

    Returns
    -------
    phantom : `numpy.ndarray`, shape ``(n ** 2,)``
        Phantom values in the cell ordering of the system matrix, see
        `image_to_vector`.

    Examples
    --------
    >>> x = phantom_gallery('cuboid', 4)
    >>> x.shape
    (16,)
    >>> float(x.sum())
    4.0
    """
    if not is_string(name):
        raise TypeError('`name` must be a string, got {!r}'.format(name))

    name_in = name
    name = name.lower()
    if name == 'shepplogan':
        image = shepp_logan(n, modified=True)
    elif name == 'defrise':
        image = defrise(n)
    elif name == 'cuboid':
        image = cuboid(n)
    else:
        raise ValueError('unknown phantom name {!r}, supported are {}'
                         ''.format(name_in, PHANTOM_NAMES))

    return image_to_vector(np.clip(image, 0, 1))


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
