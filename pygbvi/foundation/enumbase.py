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
Informative enumeration base used by every configuration enum in pyGBVI.

Each member carries an integer code (the value the numerical kernels see)
and a short description that is surfaced in help text and state reports.
"""

from enum import Enum


class BaseInfoEnum(Enum):
    """
    Enum whose members are declared as ``NAME = int_code, "description"``.

    Lookup by integer code returns the declared member, so ``Method(2)`` is
    ``Method.QUINTIC_SPLINE`` when that member is declared with code 2.
    """

    def __new__(cls, int_value, info):
        obj = object.__new__(cls)
        obj._value_ = int_value
        obj._info = info
        return obj

    @property
    def info(self):
        """Human-readable description of the member."""
        return self._info

    @property
    def int_value(self):
        """Integer code of the member, as consumed by numerical code."""
        return self.value

    @classmethod
    def coerce(cls, value):
        """
        Returns the member for `value`, which may be a member of this enum,
        its integer code or its name.

        Raises:
            ValueError: If `value` does not name a member of this enum.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(
                    f"{value!r} is not a valid {cls.__name__}; expected one of {cls.list()}"
                ) from None
        return cls(value)

    @classmethod
    def list(cls):
        """Names of all public members."""
        return [c.name for c in cls if not c.name.startswith("_")]

    @classmethod
    def help(cls):
        """One '<NAME>: <description>' line per public member."""
        return [f"{c.name}: {c.info}" for c in cls if not c.name.startswith("_")]
