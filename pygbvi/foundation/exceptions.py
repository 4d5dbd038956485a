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
Exception types raised by pyGBVI.

Invalid arguments (wrong shapes, non-positive atom counts, unknown enum
codes) raise the built-in `ValueError`. Only broken configuration contracts
get their own type.
"""


class ContractViolationError(AssertionError):
    """
    Raised when a caller breaks a configuration precondition that downstream
    numerical code relies on unconditionally, e.g. enabling periodic
    boundaries without a cutoff or with a box side shorter than twice the
    cutoff distance.

    Derives from `AssertionError`. It is raised with an explicit `raise`, so
    it is also raised under ``python -O``.
    Simulation code is not expected to recover from it.
    """

    def __init__(self, message: str, *, field: str = None):
        super().__init__(message)
        self.field = field
