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
Owned-or-borrowed per-atom arrays.

An `OwnedArray` is one slot of a parameter container: a reference to an
``n_atoms`` long numpy array plus a flag telling whether the container owns
it. Arrays handed in by an external owner (e.g. the host mirror of a device
buffer) are borrowed and never released by the slot. Arrays the slot
allocated itself, or that were explicitly marked as owned, are released
exactly once: when they are replaced, or when the slot is released.

Releasing an array means passing it once to the slot's `releaser` callable
and dropping the reference. The default releaser does nothing beyond that,
so ownership bookkeeping is only observable through a custom releaser.
"""

from typing import Callable, Optional, Sequence, Union

import numpy as np
from numba import njit

from pygbvi.config import global_runtime
from pygbvi.config.global_runtime import vprint
from pygbvi.config.logging_config import (
    DEBUG,
    TRACE,
    get_effective_verbosity,
)

_MODULE_NAME = __name__
_VERBOSITY = get_effective_verbosity(_MODULE_NAME)

ArrayReleaser = Callable[[np.ndarray], None]


@njit(nogil=True, boundscheck=False, cache=True)
def _njit_truncating_copy(source, target):
    """Copies the leading min(len(source), len(target)) elements; returns the count."""
    n_copy = min(source.shape[0], target.shape[0])
    for i in range(n_copy):
        target[i] = source[i]
    return n_copy


def _drop_reference(array: np.ndarray) -> None:
    pass


class OwnedArray:
    """
    A per-atom numeric array together with its ownership flag.

    Attributes:
        name (str): Field name used in log messages and state reports.
        length (int): Number of elements of an array allocated by the slot.
        dtype_real (type): NumPy real type of allocated arrays.
    """

    def __init__(
        self,
        name: str,
        length: int,
        dtype_real: type = None,
        releaser: Optional[ArrayReleaser] = None,
    ) -> None:
        if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
            raise ValueError(f"{name}: length must be an integer, got {length!r}")
        if length <= 0:
            raise ValueError(f"{name}: length must be positive, got {length}")

        self.name = name
        self.length = int(length)
        self.dtype_real = (
            dtype_real if dtype_real is not None else global_runtime.get_real_dtype()
        )
        self._releaser = releaser if releaser is not None else _drop_reference
        self._array = None
        self._owned = False

    @property
    def owned(self) -> bool:
        return self._owned

    @property
    def is_allocated(self) -> bool:
        return self._array is not None

    def _allocate(self) -> np.ndarray:
        array = np.zeros(self.length, dtype=self.dtype_real)
        vprint(
            DEBUG,
            _VERBOSITY,
            f"owned_array>> {self.name}: allocated owned array of {self.length} x {np.dtype(self.dtype_real).name}",
        )
        return array

    def _release_current(self) -> None:
        array = self._array
        self._array = None
        self._owned = False
        self._releaser(array)
        vprint(DEBUG, _VERBOSITY, f"owned_array>> {self.name}: released owned array")

    def get(self) -> np.ndarray:
        """
        Returns the backing array, allocating a zero-filled owned array of
        `length` elements if the slot is empty.
        """
        if self._array is None:
            self._array = self._allocate()
            self._owned = True
        return self._array

    def set_owned(self, owned: Union[bool, int]) -> None:
        """
        Sets the ownership flag without touching the array. Used when an external
        buffer wrapper takes over (False) or hands over (True) exclusive ownership.
        """
        self._owned = bool(owned)
        vprint(
            TRACE, _VERBOSITY, f"owned_array>> {self.name}: ownership set to {self._owned}"
        )

    def set(self, array: np.ndarray) -> None:
        """
        Replaces the backing array with `array`, which the slot borrows.

        If the slot owns a different array, that array is released first and
        the ownership flag is cleared. Re-setting the currently held array
        leaves the ownership flag unchanged.
        """
        if self._owned and self._array is not array:
            if self._array is not None:
                self._release_current()
            self._owned = False
        self._array = array
        vprint(TRACE, _VERBOSITY, f"owned_array>> {self.name}: borrowing external array")

    def set_from_sequence(self, values: Sequence[float]) -> np.ndarray:
        """
        Copies `values` into a freshly allocated owned array.

        Any owned array is released first. Only ``min(len(values), length)``
        elements are copied; a shorter sequence leaves the tail at zero and a
        longer one is truncated. No error is raised for the mismatch.

        Returns:
            np.ndarray: The new backing array.
        """
        source = np.asarray(values, dtype=self.dtype_real).reshape(-1)
        if self._owned and self._array is not None:
            self._release_current()
        target = self._allocate()
        n_copied = _njit_truncating_copy(source, target)
        self._array = target
        self._owned = True
        if n_copied != self.length or source.shape[0] != self.length:
            vprint(
                DEBUG,
                _VERBOSITY,
                f"owned_array>> {self.name}: sequence of {source.shape[0]} values copied into {self.length} slots ({n_copied} copied)",
            )
        return target

    def assign(self, values: Sequence[float]) -> np.ndarray:
        """
        Copies `values` element-wise into the current backing array, which may
        be borrowed; ownership is not changed. An owned zero array is allocated
        first when the slot is empty. Same truncating rule as `set_from_sequence`.

        Returns:
            np.ndarray: The backing array.
        """
        target = self.get()
        source = np.asarray(values, dtype=target.dtype).reshape(-1)
        n_copied = _njit_truncating_copy(source, target)
        if n_copied != target.shape[0] or source.shape[0] != target.shape[0]:
            vprint(
                DEBUG,
                _VERBOSITY,
                f"owned_array>> {self.name}: assigned {n_copied} of {source.shape[0]} values into {target.shape[0]} slots",
            )
        return target

    def release(self) -> None:
        """
        Releases the array if it is owned and empties the slot. A borrowed
        array is only forgotten. Calling this again is a no-op.
        """
        if self._owned and self._array is not None:
            self._release_current()
        self._array = None
        self._owned = False

    def __repr__(self) -> str:
        state = "empty" if self._array is None else ("owned" if self._owned else "borrowed")
        return f"OwnedArray(name={self.name!r}, length={self.length}, state={state})"
