# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Tomography related operators, geometries and test problems."""

from .backends import *
from .geometry import *
from .operators import *
from .problems import *
from .util import *

__all__ = ()
__all__ += backends.__all__
__all__ += geometry.__all__
__all__ += operators.__all__
__all__ += problems.__all__
__all__ += util.__all__
