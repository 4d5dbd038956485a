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
Born-radius switching-function settings of the softcore GB-VI model.

The quintic spline works on inverse-cubed Born radii, so its upper limit is
kept as ``upper_born_radius_limit ** -3`` and recomputed only when the Born
radius limit is written. Evaluators read the cached value in their per-atom
loops.
"""

from typing import Union

from pygbvi.config import global_runtime
from pygbvi.config.global_runtime import vprint
from pygbvi.config.logging_config import (
    DEBUG,
    get_effective_verbosity,
)
from pygbvi.constants import ConstGBVISoftcore
from pygbvi.foundation.enums import BornRadiusScalingMethod

_MODULE_NAME = __name__
_VERBOSITY = get_effective_verbosity(_MODULE_NAME)


class BornRadiusSwitching:
    """
    Selected switching method plus the quintic spline limits.

    Attributes:
        dtype_real (type): NumPy real type used for the limits.
    """

    def __init__(self, dtype_real: type = None) -> None:
        self.dtype_real = (
            dtype_real if dtype_real is not None else global_runtime.get_real_dtype()
        )
        self._method = BornRadiusScalingMethod.NO_SCALING
        self._quintic_lower_limit_factor = self.dtype_real(
            ConstGBVISoftcore.QuinticLowerLimitFactor.value
        )
        self._quintic_upper_born_radius_limit = None
        self._quintic_upper_spline_limit = None
        self.set_quintic_upper_born_radius_limit(
            ConstGBVISoftcore.QuinticUpperBornRadiusLimit.value
        )

    def get_method(self) -> BornRadiusScalingMethod:
        return self._method

    def set_method(self, method: Union[BornRadiusScalingMethod, int, str]) -> None:
        self._method = BornRadiusScalingMethod.coerce(method)
        vprint(DEBUG, _VERBOSITY, f"switching>> method: {self._method.name}")

    def get_quintic_lower_limit_factor(self):
        return self._quintic_lower_limit_factor

    def set_quintic_lower_limit_factor(self, quintic_lower_limit_factor: float) -> None:
        self._quintic_lower_limit_factor = self.dtype_real(quintic_lower_limit_factor)

    def get_quintic_upper_born_radius_limit(self):
        return self._quintic_upper_born_radius_limit

    def set_quintic_upper_born_radius_limit(
        self, quintic_upper_born_radius_limit: float
    ) -> None:
        """Stores the upper Born-radius limit and recomputes the spline upper limit."""
        limit = self.dtype_real(quintic_upper_born_radius_limit)
        self._quintic_upper_spline_limit = limit ** self.dtype_real(-3.0)
        self._quintic_upper_born_radius_limit = limit
        vprint(
            DEBUG,
            _VERBOSITY,
            f"switching>> upper Born radius limit: {limit}, upper spline limit: {self._quintic_upper_spline_limit}",
        )

    def get_quintic_upper_spline_limit(self):
        return self._quintic_upper_spline_limit
