# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Utilities mainly for internal use."""

from .exceptions import *
from .graphics import *
from .utility import *

__all__ = ()
__all__ += exceptions.__all__
__all__ += graphics.__all__
__all__ += utility.__all__
