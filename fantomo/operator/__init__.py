# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Abstract linear operators and their matrix representations."""

from .operator import *
from .tensor_ops import *

__all__ = ()
__all__ += operator.__all__
__all__ += tensor_ops.__all__
