#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# This file is part of pyGBVI.
# Copyright (C) 2025 The pyGBVI Project and contributors.
#
# pyGBVI is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# pyGBVI is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with pyGBVI. If not, see <https://www.gnu.org/licenses/>.

"""
This module defines the constants used in pyGBVI.

It re-exports enumerations for:
    - ConstPhysical:         Physical constants and unit conversions (double precision).
    - ConstImplicitSolvent:  Defaults of the implicit-solvent base parameters.
    - ConstGBVISoftcore:     Defaults of the softcore GB-VI switching function and
                             the periodic box / cutoff ratio.

It also re-exports:
    - NUM_DIMENSIONS: Number of periodic box dimensions.
"""

from .physical import ConstPhysical

from .model import (
    ConstImplicitSolvent,
    ConstGBVISoftcore,
)

NUM_DIMENSIONS = 3
