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
This module defines an enumeration `ConstPhysical` containing the physical
constants and unit conversions needed by the implicit-solvent parameter
containers. All constants are stored in double precision; callers cast to
the configured model precision when they store them.
"""

from enum import Enum


class ConstPhysical(Enum):
    """
    Physical constants and unit conversions used in pyGBVI (double precision).

    Constants:
        Pi (float): Ratio of circle's circumference to its diameter.
        FourPi (float): 4 * Pi.
        OneFourPiEps0 (float): Coulomb prefactor 1/(4*pi*eps0) in kJ nm / (mol e^2).
        Calories2Joules (float): Conversion factor from calories to Joules.
        Angstrom2Nm (float): Conversion factor from Angstrom to nanometer.
        WaterDielectric (float): Relative permittivity of water used as default solvent.
    """

    Pi = 3.141592653589793
    FourPi = 1.256637061435917e1
    OneFourPiEps0 = 138.935456
    Calories2Joules = 4.184
    Angstrom2Nm = 0.1
    WaterDielectric = 78.3
