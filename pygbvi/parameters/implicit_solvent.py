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
This module defines `ImplicitSolventParameters`, the base parameter container
shared by implicit-solvent models.

It holds the quantities every generalized-Born flavour needs: the number of
atoms, the per-atom atomic radii, the solute and solvent dielectric constants,
the electric constant, the probe radius and the ACE surface-area prefactor.
Model-specific containers derive from it, register their own per-atom arrays
through `_new_owned_array` and extend `get_state_string`.
"""

from typing import List, Optional, Sequence, Union

import numpy as np

from pygbvi.config import global_runtime
from pygbvi.config.global_runtime import vprint
from pygbvi.config.logging_config import (
    DEBUG,
    get_effective_verbosity,
)
from pygbvi.constants import ConstImplicitSolvent
from pygbvi.utils.owned_array import ArrayReleaser, OwnedArray

_MODULE_NAME = __name__
_VERBOSITY = get_effective_verbosity(_MODULE_NAME)

_STRING_TAB = "   "


class ImplicitSolventParameters:
    """
    Base container for implicit-solvent parameters of one simulated system.

    Attributes:
        dtype_real (type): NumPy real type captured from the runtime precision
            at construction; used for all scalars and arrays.

    Per-atom arrays are held in `OwnedArray` slots. Arrays owned by the
    container are released by `release_arrays()`, on exit of a ``with`` block
    or when the container is garbage collected; borrowed arrays never are.
    """

    def __init__(
        self,
        number_of_atoms: int,
        releaser: Optional[ArrayReleaser] = None,
        dtype_real: type = None,
    ) -> None:
        """
        Args:
            number_of_atoms (int): Number of atoms; sizes every per-atom array.
            releaser (callable, optional): Called once with every owned array
                the container releases.
            dtype_real (type, optional): Real dtype; defaults to the runtime precision.

        Raises:
            ValueError: If `number_of_atoms` is not a positive integer.
        """
        if isinstance(number_of_atoms, bool) or not isinstance(
            number_of_atoms, (int, np.integer)
        ):
            raise ValueError(
                f"number_of_atoms must be an integer, got {number_of_atoms!r}"
            )
        if number_of_atoms <= 0:
            raise ValueError(f"number_of_atoms must be positive, got {number_of_atoms}")

        self.dtype_real = (
            dtype_real if dtype_real is not None else global_runtime.get_real_dtype()
        )
        self._number_of_atoms = int(number_of_atoms)
        self._releaser = releaser
        self._owned_arrays: List[OwnedArray] = []

        self._solvent_dielectric = self.dtype_real(
            ConstImplicitSolvent.SolventDielectric.value
        )
        self._solute_dielectric = self.dtype_real(
            ConstImplicitSolvent.SoluteDielectric.value
        )
        self._electric_constant = self.dtype_real(
            ConstImplicitSolvent.ElectricConstant.value
        )
        self._probe_radius = self.dtype_real(ConstImplicitSolvent.ProbeRadius.value)
        self._pi4_asolv = self.dtype_real(ConstImplicitSolvent.Pi4Asolv.value)

        self._atomic_radii = self._new_owned_array("atomic_radii")

    def _new_owned_array(self, name: str) -> OwnedArray:
        """Creates an empty per-atom slot that `release_arrays` will manage."""
        slot = OwnedArray(
            name,
            self._number_of_atoms,
            dtype_real=self.dtype_real,
            releaser=self._releaser,
        )
        self._owned_arrays.append(slot)
        return slot

    # --- atoms --------------------------------------------------------------

    def get_number_of_atoms(self) -> int:
        return self._number_of_atoms

    def get_atomic_radii(self) -> np.ndarray:
        return self._atomic_radii.get()

    def set_atomic_radii(self, atomic_radii: np.ndarray) -> None:
        """Borrows `atomic_radii`; see `OwnedArray.set`."""
        self._atomic_radii.set(atomic_radii)

    def set_atomic_radii_from_sequence(self, atomic_radii: Sequence[float]) -> np.ndarray:
        """Copies `atomic_radii` into an owned array; see `OwnedArray.set_from_sequence`."""
        return self._atomic_radii.set_from_sequence(atomic_radii)

    def set_own_atomic_radii(self, own: Union[bool, int]) -> None:
        self._atomic_radii.set_owned(own)

    # --- scalars ------------------------------------------------------------

    def get_solvent_dielectric(self):
        return self._solvent_dielectric

    def set_solvent_dielectric(self, solvent_dielectric: float) -> None:
        self._solvent_dielectric = self.dtype_real(solvent_dielectric)

    def get_solute_dielectric(self):
        return self._solute_dielectric

    def set_solute_dielectric(self, solute_dielectric: float) -> None:
        self._solute_dielectric = self.dtype_real(solute_dielectric)

    def get_electric_constant(self):
        return self._electric_constant

    def set_electric_constant(self, electric_constant: float) -> None:
        self._electric_constant = self.dtype_real(electric_constant)

    def get_probe_radius(self):
        return self._probe_radius

    def set_probe_radius(self, probe_radius: float) -> None:
        self._probe_radius = self.dtype_real(probe_radius)

    def get_pi4_asolv(self):
        return self._pi4_asolv

    def set_pi4_asolv(self, pi4_asolv: float) -> None:
        self._pi4_asolv = self.dtype_real(pi4_asolv)

    # --- reporting ----------------------------------------------------------

    def get_string_tab(self) -> str:
        return _STRING_TAB

    def get_state_string(self, title: Optional[str] = None) -> str:
        """
        Returns a human-readable multi-line report of the base parameters.

        Args:
            title (str, optional): First line of the report.
        """
        tab = self.get_string_tab()
        lines = []
        if title:
            lines.append(title)
        lines.append(f"{type(self).__name__}:")
        lines.append(f"{tab}Number of atoms:        {self._number_of_atoms}")
        lines.append(f"{tab}Solvent dielectric:     {self._solvent_dielectric:.6g}")
        lines.append(f"{tab}Solute dielectric:      {self._solute_dielectric:.6g}")
        lines.append(f"{tab}Electric constant:      {self._electric_constant:.6g}")
        lines.append(f"{tab}Probe radius:           {self._probe_radius:.6g}")
        lines.append(f"{tab}Pi4Asolv:               {self._pi4_asolv:.6g}")
        lines.append(f"{tab}Precision:              {np.dtype(self.dtype_real).name}")
        for slot in self._owned_arrays:
            if slot.is_allocated:
                state = "owned" if slot.owned else "borrowed"
            else:
                state = "not set"
            lines.append(f"{tab}{slot.name + ':':<24}{state}")
        return "\n".join(lines) + "\n"

    # --- lifecycle ----------------------------------------------------------

    def release_arrays(self) -> None:
        """Releases every owned per-atom array once; borrowed arrays are only forgotten."""
        for slot in getattr(self, "_owned_arrays", ()):
            slot.release()
        vprint(DEBUG, _VERBOSITY, f"{type(self).__name__}>> per-atom arrays released")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release_arrays()
        return False

    def __del__(self):
        for slot in getattr(self, "_owned_arrays", ()):
            slot.release()
