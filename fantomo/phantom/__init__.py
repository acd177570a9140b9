# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test data generators."""

from .gallery import *
from .geometric import *
from .phantom_utils import *
from .transmission import *

__all__ = ()
__all__ += gallery.__all__
__all__ += geometric.__all__
__all__ += phantom_utils.__all__
__all__ += transmission.__all__
