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
Centralized module for managing global and module-specific verbosity levels.
It defines verbosity constants and provides functions to query the effective
verbosity for a given module, taking into account global settings and
module-specific overrides.
"""

from pygbvi.foundation.enums import VerbosityLevel as _VL
from typing import TypeAlias

# Integer verbosity value; must be one of the VerbosityLevel int_value members.
VerbosityLevelValue: TypeAlias = int


# --- Verbosity Level Constants ---
CRITICAL = _VL.CRITICAL.int_value  # 50
ERROR = _VL.ERROR.int_value  # 40
NOTICE = _VL.NOTICE.int_value  # 35
WARNING = _VL.WARNING.int_value  # 30
INFO = _VL.INFO.int_value  # 20
DEBUG = _VL.DEBUG.int_value  # 10
TRACE = _VL.TRACE.int_value  # 5

_VALID_VERBOSITY_VALUES = frozenset(level.int_value for level in _VL)

MIN_VERBOSITY_VALUE = TRACE  # 5
MAX_VERBOSITY_VALUE = CRITICAL  # 50

# --- Module-specific Verbosity Configuration ---
_MODULE_VERBOSITY_SETTINGS = {
    # config
    "config.global_runtime": NOTICE,
    "config.logging_config": NOTICE,
    # constants
    "constants.model": NOTICE,
    "constants.physical": NOTICE,
    # foundation
    "foundation.bib_manager": NOTICE,
    "foundation.enumbase": NOTICE,
    "foundation.enums": NOTICE,
    "foundation.exceptions": NOTICE,
    # parameters
    "parameters.boundary": NOTICE,
    "parameters.gbvi_softcore": NOTICE,
    "parameters.implicit_solvent": NOTICE,
    "parameters.switching": NOTICE,
    # utils
    "utils.owned_array": NOTICE,
}


_GLOBAL_VERBOSITY_LEVEL = INFO


def _module_key(module_name: str) -> str:
    """Strips the top-level package prefix so `__name__` can be used directly."""
    package, _, rest = module_name.partition(".")
    return rest if package == "pygbvi" and rest else module_name


def set_global_verbosity_level(level_value: VerbosityLevelValue):
    """
    Sets the global verbosity level.
    Higher `level_value` means less verbose output (more severe messages).
    Raises ValueError if `level_value` is not a valid VerbosityLevel integer.
    """
    global _GLOBAL_VERBOSITY_LEVEL
    if not isinstance(level_value, int) or level_value not in _VALID_VERBOSITY_VALUES:
        raise ValueError(
            f"Invalid global verbosity level_value: {level_value}. Must be one of {sorted(list(_VALID_VERBOSITY_VALUES))}."
        )
    _GLOBAL_VERBOSITY_LEVEL = level_value


def get_global_verbosity_level() -> VerbosityLevelValue:
    """Returns the current global verbosity level (integer value)."""
    return _GLOBAL_VERBOSITY_LEVEL


def set_module_verbosity(module_name: str, level_value: VerbosityLevelValue):
    """
    Sets the specific verbosity level for a given module.
    Higher `level_value` means less verbose output for that module.
    Raises ValueError if `level_value` is not a valid VerbosityLevel integer.
    """
    if not isinstance(level_value, int) or level_value not in _VALID_VERBOSITY_VALUES:
        raise ValueError(
            f"Invalid module verbosity level_value for {module_name}: {level_value}. Must be one of {sorted(list(_VALID_VERBOSITY_VALUES))}."
        )
    _MODULE_VERBOSITY_SETTINGS[_module_key(module_name)] = level_value


def get_module_verbosity(module_name: str) -> VerbosityLevelValue:
    """
    Returns the explicitly configured verbosity level for a module.
    Returns the global verbosity level if the module is not explicitly configured.
    """
    return _MODULE_VERBOSITY_SETTINGS.get(
        _module_key(module_name), _GLOBAL_VERBOSITY_LEVEL
    )


def get_effective_verbosity(module_name: str) -> VerbosityLevelValue:
    """
    Determines the effective verbosity level for a given module based on
    global settings and module-specific overrides.

    Rule: The most restrictive (highest value) level between global and module-specific wins.
    This aligns with Python logging where a higher "effective level" means less output.
    """
    global_level = get_global_verbosity_level()
    module_level = get_module_verbosity(module_name)

    return max(global_level, module_level)
