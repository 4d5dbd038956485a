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
Default values of the implicit-solvent and softcore GB-VI model parameters.

Lengths are in nm and energies in kJ/mol, matching the force-field units of
the evaluators that consume these containers.
"""

from enum import Enum

from pygbvi.constants.physical import ConstPhysical


class ConstImplicitSolvent(Enum):
    """
    Defaults of the implicit-solvent base parameters.

    Constants:
        SolventDielectric (float): Relative permittivity of the solvent.
        SoluteDielectric (float): Relative permittivity of the solute interior.
        ElectricConstant (float): -1/2 * 1/(4*pi*eps0), prefactor of the GB energy.
        ProbeRadius (float): Solvent probe radius (nm).
        Pi4Asolv (float): 4*pi times the ACE surface-area coefficient
            (0.0054 kcal/mol/A^2) expressed in kJ/mol/nm^2.
    """

    SolventDielectric = ConstPhysical.WaterDielectric.value
    SoluteDielectric = 1.0
    ElectricConstant = -0.5 * ConstPhysical.OneFourPiEps0.value
    ProbeRadius = 0.14
    Pi4Asolv = (
        ConstPhysical.FourPi.value
        * 0.0054
        * ConstPhysical.Calories2Joules.value
        / (ConstPhysical.Angstrom2Nm.value * ConstPhysical.Angstrom2Nm.value)
    )


class ConstGBVISoftcore(Enum):
    """
    Defaults of the softcore GB-VI Born-radius switching function.

    Constants:
        QuinticLowerLimitFactor (float): Lower limit of the quintic spline as a
            fraction of the upper limit.
        QuinticUpperBornRadiusLimit (float): Upper Born-radius limit (nm); the
            spline upper limit is its inverse cube.
        PeriodicBoxCutoffRatio (float): Minimum ratio between a periodic box side
            and the cutoff distance.
    """

    QuinticLowerLimitFactor = 0.8
    QuinticUpperBornRadiusLimit = 5.0
    PeriodicBoxCutoffRatio = 2.0
