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
This module provides global configuration settings and utility functions for pyGBVI,
including precision control and verbosity management.

It defines:
- `PRECISION`: The numerical precision (single or double) used for all model
  scalars and per-atom arrays.
- `gbvi_int`, `gbvi_real`: NumPy data types
  set based on the chosen `PRECISION`.
- Functions to set and get precision and verbosity levels.
- `print_if_verbose` (alias `vprint`) for conditional printing.

Precision is meant to be chosen once, before any parameter container is built.
Containers capture `gbvi_real` when they are constructed.
"""

import numpy as np

from pygbvi.foundation.enums import Precision, VerbosityLevel
import pygbvi.config.logging_config as logging_config
from pygbvi.config.logging_config import (
    VerbosityLevelValue,
)

# --- Configuration Variables and Initialization ---
PRECISION = Precision.DOUBLE  # Default precision

gbvi_int: type = None
gbvi_real: type = None


def _initialize_data_types():
    """Initializes pyGBVI data types based on the current precision.

    Called when the module is imported and whenever the precision level is changed.
    """
    global gbvi_int, gbvi_real

    if PRECISION == Precision.SINGLE:
        gbvi_int = np.int32
        gbvi_real = np.float32
    elif PRECISION == Precision.DOUBLE:
        gbvi_int = np.int64
        gbvi_real = np.float64
    else:
        raise ValueError(f"Invalid precision: {PRECISION}")


def set_precision(prec: Precision):
    """Sets the precision level and re-initializes data types.

    Args:
        prec: The desired precision level (Precision enum member).
    """
    global PRECISION
    if not isinstance(prec, Precision):
        raise ValueError(f"Invalid precision: {prec}")
    PRECISION = prec
    _initialize_data_types()


def get_precision() -> Precision:
    return PRECISION


def get_real_dtype() -> type:
    """Returns the real dtype of the current precision (looked up at call time)."""
    return gbvi_real


def set_verbosity_level(level: VerbosityLevel):
    """
    Sets the global verbosity level. This function delegates to logging_config.
    Higher `level` value means less verbose output.

    Args:
        level: The desired verbosity level (VerbosityLevel enum member).
    """
    logging_config.set_global_verbosity_level(level.int_value)
    print_if_verbose(
        logging_config.DEBUG,
        logging_config.get_effective_verbosity(__name__),
        f"Configured global verbosity level to: {level.name} (value: {level.int_value})",
    )


# --- Print Functions ---
# A message is printed when message_level >= configured_verbosity_level.


def print_if_verbose(
    message_level: VerbosityLevelValue,
    configured_verbosity_level: VerbosityLevelValue,
    *args,
    sep=" ",
    end="\n",
    file=None,
    flush=False,
):
    """
    Prints a message if its level is GREATER THAN or EQUAL TO the configured verbosity level.

    Args:
        message_level: The verbosity level of the message (e.g., logging_config.DEBUG which is 10).
        configured_verbosity_level: The effective verbosity level for the current module.
        *args: The message arguments (like the standard print function).
        sep, end, file, flush: Same as the standard print function.
    """
    if message_level >= configured_verbosity_level:
        print(*args, sep=sep, end=end, file=file, flush=flush)


# --- Shorter Aliases for Frequent Use ---
vprint = print_if_verbose


# --- Initialize data types on module import ---
_initialize_data_types()

logging_config.set_global_verbosity_level(VerbosityLevel.INFO.int_value)
