# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""fantomo (fan beam tomography test problems).

fantomo is a Python library for building two-dimensional fan beam
tomography test problems: explicit sparse system matrices, phantoms and
the corresponding exact data.
"""

import numpy as np

__all__ = ('phantom', 'tomo', 'util')

__version__ = '0.1.0'

# Set printing line width to 71 to allow method docstrings to not extend
# beyond 79 characters (2 times indent of 4)
np.set_printoptions(linewidth=71)

# Import all names from "core" subpackages into the top-level namespace;
# the `__all__` collection is extended later to make import errors more
# visible (otherwise one gets errors like "... has no attribute __all__")
from .operator import *
__all__ += operator.__all__

# More "advanced" subpackages keep their namespaces separate from top-level,
# we only import the modules themselves
from . import util
from . import phantom
from . import tomo

# The main entry point is available in the top-level namespace
from .tomo.problems import FanBeamProblem, fanbeamtomo

__all__ += ('FanBeamProblem', 'fanbeamtomo')
