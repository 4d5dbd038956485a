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
Cutoff and periodic-boundary settings.

Configuration only moves forward: no cutoff -> cutoff -> cutoff with periodic
box. Enabling periodic boundaries requires an enabled cutoff and a box whose
every side is at least twice the cutoff distance, so that neighbour searches
never see more than one image of a particle.
"""

from typing import Sequence

import numpy as np

from pygbvi.config import global_runtime
from pygbvi.config.global_runtime import vprint
from pygbvi.config.logging_config import (
    DEBUG,
    ERROR,
    get_effective_verbosity,
)
from pygbvi.constants import ConstGBVISoftcore, NUM_DIMENSIONS
from pygbvi.foundation.exceptions import ContractViolationError

_MODULE_NAME = __name__
_VERBOSITY = get_effective_verbosity(_MODULE_NAME)


class CutoffPeriodicState:
    """
    Cutoff flag and distance, periodic flag and box size.

    Attributes:
        dtype_real (type): NumPy real type used for the distance and box.
    """

    def __init__(self, dtype_real: type = None) -> None:
        self.dtype_real = (
            dtype_real if dtype_real is not None else global_runtime.get_real_dtype()
        )
        self._cutoff = False
        self._cutoff_distance = self.dtype_real(0.0)
        self._periodic = False
        self._periodic_box_size = np.zeros(NUM_DIMENSIONS, dtype=self.dtype_real)

    def _violation(self, message: str, field: str) -> ContractViolationError:
        vprint(ERROR, _VERBOSITY, f"boundary>> contract violation: {message}")
        return ContractViolationError(message, field=field)

    def _check_box(self, box: np.ndarray, cutoff_distance) -> None:
        min_side = self.dtype_real(ConstGBVISoftcore.PeriodicBoxCutoffRatio.value) * cutoff_distance
        for axis, side in zip("xyz", box):
            if not side >= min_side:
                raise self._violation(
                    f"periodic box side {axis} = {side} is smaller than twice the cutoff distance ({cutoff_distance})",
                    field="periodic_box_size",
                )

    def set_use_cutoff(self, distance: float) -> None:
        """
        Enables the cutoff with `distance`.

        Raises:
            ContractViolationError: If periodic boundaries are already enabled and
                the current box is shorter than twice the new distance.
        """
        distance = self.dtype_real(distance)
        if self._periodic:
            self._check_box(self._periodic_box_size, distance)
        self._cutoff = True
        self._cutoff_distance = distance
        vprint(DEBUG, _VERBOSITY, f"boundary>> cutoff distance: {distance}")

    def get_use_cutoff(self) -> bool:
        return self._cutoff

    def get_cutoff_distance(self):
        return self._cutoff_distance

    def set_periodic(self, box_size: Sequence[float]) -> None:
        """
        Enables periodic boundaries with the X, Y and Z widths in `box_size`.

        Raises:
            ValueError: If `box_size` does not have exactly three components.
            ContractViolationError: If no cutoff is set, or a box side is smaller
                than twice the cutoff distance. The state is left unchanged.
        """
        box = np.asarray(box_size, dtype=self.dtype_real).reshape(-1)
        if box.shape[0] != NUM_DIMENSIONS:
            raise ValueError(
                f"periodic box needs {NUM_DIMENSIONS} components, got {box.shape[0]}"
            )
        if not self._cutoff:
            raise self._violation(
                "periodic boundaries require a cutoff to be set first",
                field="cutoff",
            )
        self._check_box(box, self._cutoff_distance)

        self._periodic = True
        self._periodic_box_size[:] = box
        vprint(DEBUG, _VERBOSITY, f"boundary>> periodic box: {box}")

    def get_periodic(self) -> bool:
        return self._periodic

    def get_periodic_box(self) -> np.ndarray:
        """Returns a read-only view of the stored box size."""
        view = self._periodic_box_size.view()
        view.flags.writeable = False
        return view
