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
This module defines `GBVISoftcoreParameters`, the parameter container of the
softcore GB-VI implicit-solvent model.

On top of the implicit-solvent base it holds:

- three per-atom arrays: scaled radii, gamma (surface-area) parameters and
  Born-radius scale factors, each owned by the container or borrowed from an
  external buffer;
- the Born-radius switching function (none, tanh or quintic spline) and the
  quintic spline limits;
- the cutoff and periodic-box settings;
- the tau prefactor, derived on demand from the solute and solvent dielectrics.

Typical setup when the per-atom data lives in buffers managed elsewhere::

    params = GBVISoftcoreParameters(n_atoms)
    params.set_scaled_radii(buffer.host_array)
    params.set_own_scaled_radii(False)

Energy and force evaluators then read the arrays and scalars; the container
itself performs no evaluation.
"""

from typing import Optional, Sequence, Union

import numpy as np

from pygbvi.config.global_runtime import vprint
from pygbvi.config.logging_config import (
    DEBUG,
    get_effective_verbosity,
)
from pygbvi.foundation.enums import BornRadiusScalingMethod
from pygbvi.parameters.boundary import CutoffPeriodicState
from pygbvi.parameters.implicit_solvent import ImplicitSolventParameters
from pygbvi.parameters.switching import BornRadiusSwitching
from pygbvi.utils.owned_array import ArrayReleaser

_MODULE_NAME = __name__
_VERBOSITY = get_effective_verbosity(_MODULE_NAME)


class GBVISoftcoreParameters(ImplicitSolventParameters):
    """
    Softcore GB-VI parameters of one simulated system.

    A freshly built container has empty per-atom slots (allocated as owned
    zero arrays on first read), switching method `NO_SCALING`, quintic lower
    limit factor 0.8, upper Born-radius limit 5.0 (spline upper limit 0.008),
    and neither cutoff nor periodic boundaries.
    """

    def __init__(
        self,
        number_of_atoms: int,
        releaser: Optional[ArrayReleaser] = None,
        dtype_real: type = None,
    ) -> None:
        super().__init__(number_of_atoms, releaser=releaser, dtype_real=dtype_real)

        self._scaled_radii = self._new_owned_array("scaled_radii")
        self._gamma_parameters = self._new_owned_array("gamma_parameters")
        self._born_radius_scale_factors = self._new_owned_array(
            "born_radius_scale_factors"
        )

        self._switching = BornRadiusSwitching(dtype_real=self.dtype_real)
        self._boundary = CutoffPeriodicState(dtype_real=self.dtype_real)

        vprint(
            DEBUG,
            _VERBOSITY,
            f"gbvi_softcore>> container for {number_of_atoms} atoms, precision {np.dtype(self.dtype_real).name}",
        )

    # --- scaled radii -------------------------------------------------------

    def get_scaled_radii(self) -> np.ndarray:
        return self._scaled_radii.get()

    def set_scaled_radii(self, scaled_radii: np.ndarray) -> None:
        """Borrows `scaled_radii`, releasing a different owned array first."""
        self._scaled_radii.set(scaled_radii)

    def set_scaled_radii_from_sequence(self, scaled_radii: Sequence[float]) -> np.ndarray:
        """Copies `scaled_radii` into a new owned array (truncating copy)."""
        return self._scaled_radii.set_from_sequence(scaled_radii)

    def assign_scaled_radii(self, scaled_radii: Sequence[float]) -> np.ndarray:
        return self._scaled_radii.assign(scaled_radii)

    def set_own_scaled_radii(self, own: Union[bool, int]) -> None:
        self._scaled_radii.set_owned(own)

    # --- gamma parameters ---------------------------------------------------

    def get_gamma_parameters(self) -> np.ndarray:
        return self._gamma_parameters.get()

    def set_gamma_parameters(self, gamma_parameters: np.ndarray) -> None:
        """Borrows `gamma_parameters`, releasing a different owned array first."""
        self._gamma_parameters.set(gamma_parameters)

    def set_gamma_parameters_from_sequence(
        self, gamma_parameters: Sequence[float]
    ) -> np.ndarray:
        """Copies `gamma_parameters` into a new owned array (truncating copy)."""
        return self._gamma_parameters.set_from_sequence(gamma_parameters)

    def assign_gamma_parameters(self, gamma_parameters: Sequence[float]) -> np.ndarray:
        return self._gamma_parameters.assign(gamma_parameters)

    def set_own_gamma_parameters(self, own: Union[bool, int]) -> None:
        self._gamma_parameters.set_owned(own)

    # --- Born radius scale factors ------------------------------------------

    def get_born_radius_scale_factors(self) -> np.ndarray:
        return self._born_radius_scale_factors.get()

    def set_born_radius_scale_factors(
        self, born_radius_scale_factors: np.ndarray
    ) -> None:
        """Borrows `born_radius_scale_factors`, releasing a different owned array first."""
        self._born_radius_scale_factors.set(born_radius_scale_factors)

    def set_born_radius_scale_factors_from_sequence(
        self, born_radius_scale_factors: Sequence[float]
    ) -> np.ndarray:
        """Copies `born_radius_scale_factors` into a new owned array (truncating copy)."""
        return self._born_radius_scale_factors.set_from_sequence(
            born_radius_scale_factors
        )

    def assign_born_radius_scale_factors(
        self, born_radius_scale_factors: Sequence[float]
    ) -> np.ndarray:
        return self._born_radius_scale_factors.assign(born_radius_scale_factors)

    def set_own_born_radius_scale_factors(self, own: Union[bool, int]) -> None:
        self._born_radius_scale_factors.set_owned(own)

    # --- Born radius switching function -------------------------------------

    def get_born_radius_scaling_softcore_method(self) -> BornRadiusScalingMethod:
        return self._switching.get_method()

    def set_born_radius_scaling_softcore_method(
        self, method: Union[BornRadiusScalingMethod, int, str]
    ) -> None:
        self._switching.set_method(method)

    def get_quintic_lower_limit_factor(self):
        return self._switching.get_quintic_lower_limit_factor()

    def set_quintic_lower_limit_factor(self, quintic_lower_limit_factor: float) -> None:
        self._switching.set_quintic_lower_limit_factor(quintic_lower_limit_factor)

    def get_quintic_upper_born_radius_limit(self):
        return self._switching.get_quintic_upper_born_radius_limit()

    def set_quintic_upper_born_radius_limit(
        self, quintic_upper_born_radius_limit: float
    ) -> None:
        self._switching.set_quintic_upper_born_radius_limit(
            quintic_upper_born_radius_limit
        )

    def get_quintic_upper_spline_limit(self):
        return self._switching.get_quintic_upper_spline_limit()

    # --- cutoff and periodic boundaries -------------------------------------

    def set_use_cutoff(self, distance: float) -> None:
        self._boundary.set_use_cutoff(distance)

    def get_use_cutoff(self) -> bool:
        return self._boundary.get_use_cutoff()

    def get_cutoff_distance(self):
        return self._boundary.get_cutoff_distance()

    def set_periodic(self, box_size: Sequence[float]) -> None:
        """
        Enables periodic boundaries. Requires a cutoff and every box side to be
        at least twice the cutoff distance; otherwise raises
        `ContractViolationError`.
        """
        self._boundary.set_periodic(box_size)

    def get_periodic(self) -> bool:
        return self._boundary.get_periodic()

    def get_periodic_box(self) -> np.ndarray:
        return self._boundary.get_periodic_box()

    # --- derived scalars ----------------------------------------------------

    def get_tau(self):
        """
        Returns (1/e1 - 1/e0), where e1 is the solute and e0 the solvent
        dielectric, or 0 when either dielectric is zero.
        """
        solute_dielectric = self.get_solute_dielectric()
        solvent_dielectric = self.get_solvent_dielectric()
        if solute_dielectric == 0.0 or solvent_dielectric == 0.0:
            return self.dtype_real(0.0)
        one = self.dtype_real(1.0)
        return one / solute_dielectric - one / solvent_dielectric

    # --- reporting ----------------------------------------------------------

    def get_state_string(self, title: Optional[str] = None) -> str:
        """Returns the implicit-solvent report; subclasses append their own fields."""
        message = super().get_state_string(title)
        return message
