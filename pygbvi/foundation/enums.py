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
Module defining enumeration classes for pyGBVI configuration.

These enums cover:

    - Calculation precision (Precision)
    - Verbosity levels (VerbosityLevel)
    - Born-radius switching functions of the softcore GB-VI model
      (BornRadiusScalingMethod)

This module is intentionally kept lightweight and avoids dependencies
on libraries that are not essential for defining configuration enums.
"""

from pygbvi.foundation.enumbase import BaseInfoEnum
from pygbvi.foundation.bib_manager import cite


class Precision(BaseInfoEnum):
    """Enumerates all supported options for setting precision in pyGBVI."""

    SINGLE = 1, "Use single precision (4-byte) for real numbers."
    DOUBLE = 2, "Use double precision (8-byte) for real numbers."


class VerbosityLevel(BaseInfoEnum):
    """Enumerates all supported verbosity levels for logging in pyGBVI."""

    CRITICAL = (
        50,
        "Log only critical failures (e.g., violated parameter contracts).",
    )
    ERROR = (
        40,
        "Log errors preventing an operation from completing (e.g., invalid input).",
    )
    NOTICE = (
        35,
        "Log final results, excluding warnings and progress details.",
    )
    WARNING = (
        30,
        "Log warnings for potential issues or unexpected conditions.",
    )
    INFO = (
        20,
        "Log general progress and significant configuration events.",
    )
    DEBUG = (
        10,
        "Log internal state changes such as array allocation, ownership transfer and release.",
    )
    TRACE = (
        5,
        "Enable extremely fine-grained tracing.",
    )


class BornRadiusScalingMethod(BaseInfoEnum):
    """Enumerates the switching functions applied to softcore GB-VI Born radii."""

    NO_SCALING = 0, "No scaling of the Born radii is applied."
    TANH = (
        1,
        f"Hyperbolic-tangent rescaling of the Born radii, Eq. 6 of (see: {cite('Onufriev2004')})",
    )
    QUINTIC_SPLINE = (
        2,
        f"Quintic spline switching of the Born radii between a lower and an upper limit. (see: {cite('Labute2008')})",
    )
