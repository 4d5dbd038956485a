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

import numpy as np
import pytest

from pygbvi.utils.owned_array import OwnedArray


@pytest.mark.parametrize("length", [1, 3, 17, 1000])
def test_get_allocates_zero_filled_owned_array(length):
    slot = OwnedArray("scaled_radii", length)

    array = slot.get()

    assert array.shape == (length,)
    assert array.dtype == np.float64
    assert not array.any()
    assert slot.owned
    assert slot.get() is array


@pytest.mark.parametrize("length", [0, -4, 2.5, True])
def test_invalid_length_is_rejected(length):
    with pytest.raises(ValueError):
        OwnedArray("gamma_parameters", length)


def test_set_releases_previously_owned_array_once(recorder):
    slot = OwnedArray("scaled_radii", 4, releaser=recorder)
    owned = slot.get()
    external = np.ones(4)

    slot.set(external)

    assert recorder.count(owned) == 1
    assert recorder.count(external) == 0
    assert slot.get() is external
    assert not slot.owned

    slot.release()
    assert recorder.count(external) == 0
    assert len(recorder.released) == 1


def test_set_same_array_keeps_ownership(recorder):
    slot = OwnedArray("scaled_radii", 4, releaser=recorder)
    owned = slot.get()

    slot.set(owned)

    assert slot.owned
    assert recorder.released == []


def test_set_after_set_owned_true_on_empty_slot_borrows(recorder):
    slot = OwnedArray("scaled_radii", 4, releaser=recorder)
    slot.set_owned(True)
    external = np.ones(4)

    slot.set(external)
    slot.release()

    assert not slot.owned
    assert recorder.released == []


def test_set_owned_true_transfers_release_responsibility(recorder):
    slot = OwnedArray("gamma_parameters", 4, releaser=recorder)
    handed_over = np.ones(4)
    slot.set(handed_over)
    slot.set_owned(True)

    slot.set(np.zeros(4))

    assert recorder.count(handed_over) == 1


def test_set_owned_false_prevents_release(recorder):
    slot = OwnedArray("gamma_parameters", 4, releaser=recorder)
    allocated = slot.get()
    slot.set_owned(False)

    slot.release()

    assert recorder.count(allocated) == 0


def test_release_is_idempotent(recorder):
    slot = OwnedArray("born_radius_scale_factors", 3, releaser=recorder)
    allocated = slot.get()

    slot.release()
    slot.release()

    assert recorder.count(allocated) == 1
    assert not slot.is_allocated


def test_set_from_sequence_copies_into_fresh_owned_array(recorder):
    slot = OwnedArray("scaled_radii", 3, releaser=recorder)
    previous = slot.get()

    array = slot.set_from_sequence([0.1, 0.2, 0.3])

    assert array is not previous
    assert recorder.count(previous) == 1
    assert slot.owned
    np.testing.assert_allclose(array, [0.1, 0.2, 0.3])


def test_set_from_sequence_does_not_release_borrowed_array(recorder, external_buffer):
    slot = OwnedArray("scaled_radii", 4, releaser=recorder)
    slot.set(external_buffer)

    slot.set_from_sequence([1.0, 1.0, 1.0, 1.0])

    assert recorder.released == []
    np.testing.assert_array_equal(external_buffer, [1.0, 2.0, 3.0, 4.0])


def test_set_from_short_sequence_leaves_tail_zero():
    # Intentionally lenient: a length mismatch is not reported.
    slot = OwnedArray("scaled_radii", 5)

    array = slot.set_from_sequence([1.5, 2.5])

    np.testing.assert_array_equal(array, [1.5, 2.5, 0.0, 0.0, 0.0])


def test_set_from_long_sequence_is_truncated():
    # Intentionally lenient: extra values are dropped silently.
    slot = OwnedArray("scaled_radii", 2)

    array = slot.set_from_sequence([1.0, 2.0, 3.0, 4.0])

    np.testing.assert_array_equal(array, [1.0, 2.0])


def test_assign_writes_through_borrowed_array(recorder, external_buffer):
    slot = OwnedArray("born_radius_scale_factors", 4, releaser=recorder)
    slot.set(external_buffer)

    slot.assign([9.0, 8.0])

    assert slot.get() is external_buffer
    assert not slot.owned
    np.testing.assert_array_equal(external_buffer, [9.0, 8.0, 3.0, 4.0])


def test_assign_allocates_when_empty():
    slot = OwnedArray("born_radius_scale_factors", 3)

    array = slot.assign([0.5, 0.5, 0.5, 0.5])

    assert slot.owned
    np.testing.assert_array_equal(array, [0.5, 0.5, 0.5])


def test_repr_reports_state():
    slot = OwnedArray("gamma_parameters", 2)
    assert "empty" in repr(slot)
    slot.get()
    assert "owned" in repr(slot)
    slot.set(np.ones(2))
    assert "borrowed" in repr(slot)
