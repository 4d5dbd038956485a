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

import gc

import numpy as np
import pytest

from pygbvi.foundation.enums import BornRadiusScalingMethod
from pygbvi.parameters.gbvi_softcore import GBVISoftcoreParameters
from pygbvi.parameters.implicit_solvent import ImplicitSolventParameters

ARRAY_FIELDS = [
    "scaled_radii",
    "gamma_parameters",
    "born_radius_scale_factors",
]


def _accessors(params, field):
    return (
        getattr(params, f"get_{field}"),
        getattr(params, f"set_{field}"),
        getattr(params, f"set_{field}_from_sequence"),
        getattr(params, f"set_own_{field}"),
    )


@pytest.mark.parametrize("n_atoms", [1, 2, 64])
@pytest.mark.parametrize("field", ARRAY_FIELDS)
def test_lazily_fetched_arrays_are_zero(n_atoms, field):
    params = GBVISoftcoreParameters(n_atoms)
    get, _, _, _ = _accessors(params, field)

    array = get()

    assert array.shape == (n_atoms,)
    assert not array.any()
    assert get() is array


@pytest.mark.parametrize("field", ARRAY_FIELDS)
def test_set_releases_owned_array_once_and_never_the_new_one(field, recorder):
    params = GBVISoftcoreParameters(4, releaser=recorder)
    get, set_array, _, set_own = _accessors(params, field)
    previous = get()
    set_own(True)
    new_array = np.full(4, 0.25)

    set_array(new_array)
    params.release_arrays()

    assert recorder.count(previous) == 1
    assert recorder.count(new_array) == 0


@pytest.mark.parametrize("field", ARRAY_FIELDS)
def test_borrowed_array_survives_destruction(field, recorder):
    params = GBVISoftcoreParameters(4, releaser=recorder)
    borrowed = np.ones(4)
    getattr(params, f"set_{field}")(borrowed)
    getattr(params, f"set_own_{field}")(False)

    del params
    gc.collect()

    assert recorder.count(borrowed) == 0


def test_destruction_releases_each_owned_array_once(recorder):
    params = GBVISoftcoreParameters(3, releaser=recorder)
    owned = [params.get_scaled_radii(), params.get_gamma_parameters()]
    borrowed = np.ones(3)
    params.set_born_radius_scale_factors(borrowed)

    del params
    gc.collect()

    assert [recorder.count(a) for a in owned] == [1, 1]
    assert recorder.count(borrowed) == 0
    assert len(recorder.released) == 2


def test_context_manager_releases_owned_arrays(recorder):
    with GBVISoftcoreParameters(2, releaser=recorder) as params:
        radii = params.get_scaled_radii()
        params.set_atomic_radii_from_sequence([0.15, 0.17])

    params.release_arrays()

    assert recorder.count(radii) == 1
    assert len(recorder.released) == 2


@pytest.mark.parametrize("field", ARRAY_FIELDS)
def test_set_from_short_sequence_keeps_zero_tail(field):
    # Intentionally lenient truncating copy: no error for a short sequence.
    params = GBVISoftcoreParameters(5)
    get, _, set_from_sequence, _ = _accessors(params, field)

    set_from_sequence([0.1, 0.2])

    np.testing.assert_allclose(get(), [0.1, 0.2, 0.0, 0.0, 0.0])


def test_set_from_sequence_replaces_borrowed_reference_without_touching_it(recorder):
    params = GBVISoftcoreParameters(3, releaser=recorder)
    borrowed = np.array([7.0, 8.0, 9.0])
    params.set_gamma_parameters(borrowed)

    params.set_gamma_parameters_from_sequence([1.0, 2.0, 3.0])

    assert params.get_gamma_parameters() is not borrowed
    np.testing.assert_array_equal(borrowed, [7.0, 8.0, 9.0])
    assert recorder.released == []


def test_assign_writes_into_device_mirror():
    params = GBVISoftcoreParameters(3)
    mirror = np.zeros(3, dtype=np.float32)
    params.set_scaled_radii(mirror)
    params.set_own_scaled_radii(False)

    params.assign_scaled_radii([0.11, 0.12, 0.13])

    np.testing.assert_allclose(mirror, [0.11, 0.12, 0.13], rtol=1e-6)
    assert params.get_scaled_radii() is mirror


def test_defaults():
    params = GBVISoftcoreParameters(10)

    assert params.get_number_of_atoms() == 10
    assert (
        params.get_born_radius_scaling_softcore_method()
        is BornRadiusScalingMethod.NO_SCALING
    )
    assert params.get_quintic_lower_limit_factor() == pytest.approx(0.8)
    assert params.get_quintic_upper_born_radius_limit() == pytest.approx(5.0)
    assert params.get_quintic_upper_spline_limit() == pytest.approx(0.008)
    assert not params.get_use_cutoff()
    assert not params.get_periodic()
    assert params.get_solvent_dielectric() == pytest.approx(78.3)
    assert params.get_solute_dielectric() == pytest.approx(1.0)
    assert params.get_probe_radius() == pytest.approx(0.14)
    assert params.get_pi4_asolv() == pytest.approx(28.3919551, rel=1e-6)
    assert params.get_electric_constant() == pytest.approx(-69.467728)


@pytest.mark.parametrize("n_atoms", [0, -1, 3.0, "5"])
def test_invalid_atom_count_is_rejected(n_atoms):
    with pytest.raises(ValueError):
        GBVISoftcoreParameters(n_atoms)


@pytest.mark.parametrize("limit", [0.5, 1.0, 2.0, 5.0, 12.5])
def test_upper_spline_limit_tracks_born_radius_limit(limit):
    params = GBVISoftcoreParameters(1)

    params.set_quintic_upper_born_radius_limit(limit)

    assert params.get_quintic_upper_born_radius_limit() == pytest.approx(limit)
    assert params.get_quintic_upper_spline_limit() == pytest.approx(limit**-3)


def test_upper_spline_limit_is_not_stale_after_repeated_sets():
    params = GBVISoftcoreParameters(1)
    for limit in (3.0, 7.0, 0.9, 5.0):
        params.set_quintic_upper_born_radius_limit(limit)
        assert params.get_quintic_upper_spline_limit() == pytest.approx(limit**-3)


def test_lower_limit_factor_is_independent():
    params = GBVISoftcoreParameters(1)

    params.set_quintic_lower_limit_factor(0.6)

    assert params.get_quintic_lower_limit_factor() == pytest.approx(0.6)
    assert params.get_quintic_upper_born_radius_limit() == pytest.approx(5.0)
    assert params.get_quintic_upper_spline_limit() == pytest.approx(0.008)


@pytest.mark.parametrize(
    "method, expected",
    [
        (BornRadiusScalingMethod.TANH, BornRadiusScalingMethod.TANH),
        (2, BornRadiusScalingMethod.QUINTIC_SPLINE),
        ("no_scaling", BornRadiusScalingMethod.NO_SCALING),
    ],
)
def test_switching_method(method, expected):
    params = GBVISoftcoreParameters(1)

    params.set_born_radius_scaling_softcore_method(method)

    assert params.get_born_radius_scaling_softcore_method() is expected


def test_unknown_switching_method_is_rejected():
    params = GBVISoftcoreParameters(1)
    with pytest.raises(ValueError):
        params.set_born_radius_scaling_softcore_method(7)
    with pytest.raises(ValueError):
        params.set_born_radius_scaling_softcore_method("cubic")


@pytest.mark.parametrize(
    "solute, solvent, expected",
    [
        (1.0, 78.5, 1.0 - 1.0 / 78.5),
        (2.0, 80.0, 0.5 - 1.0 / 80.0),
        (4.0, 4.0, 0.0),
        (0.0, 78.5, 0.0),
        (1.0, 0.0, 0.0),
    ],
)
def test_tau(solute, solvent, expected):
    params = GBVISoftcoreParameters(1)
    params.set_solute_dielectric(solute)
    params.set_solvent_dielectric(solvent)

    assert params.get_tau() == pytest.approx(expected)


def test_tau_follows_dielectric_changes():
    params = GBVISoftcoreParameters(1)
    params.set_solvent_dielectric(78.5)
    assert params.get_tau() == pytest.approx(0.98726, abs=1e-5)

    params.set_solute_dielectric(2.0)
    assert params.get_tau() == pytest.approx(0.5 - 1.0 / 78.5)


def test_state_string_delegates_to_base_report():
    params = GBVISoftcoreParameters(3)
    params.get_scaled_radii()
    params.set_gamma_parameters(np.zeros(3))

    report = params.get_state_string("GB-VI softcore")
    base_report = ImplicitSolventParameters.get_state_string(params, "GB-VI softcore")

    assert report == base_report
    assert report.startswith("GB-VI softcore\nGBVISoftcoreParameters:")
    assert "Number of atoms:        3" in report
    assert "scaled_radii:" in report and "owned" in report
    assert "borrowed" in report


def test_state_string_extension_point():
    class ExtendedParameters(GBVISoftcoreParameters):
        def get_state_string(self, title=None):
            message = super().get_state_string(title)
            return message + f"{self.get_string_tab()}Tau: {self.get_tau():.5f}\n"

    report = ExtendedParameters(2).get_state_string()

    assert report.endswith("Tau: 0.98723\n")
    assert "Solvent dielectric:" in report
