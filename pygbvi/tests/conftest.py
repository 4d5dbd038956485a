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

from pygbvi.config import global_runtime
from pygbvi.foundation.enums import Precision


class ReleaseRecorder:
    """Releaser that records every array passed to it."""

    def __init__(self):
        self.released = []

    def __call__(self, array):
        self.released.append(array)

    def count(self, array):
        return sum(1 for a in self.released if a is array)


@pytest.fixture
def recorder():
    return ReleaseRecorder()


@pytest.fixture(autouse=True)
def double_precision():
    """Every test starts in double precision and restores it afterwards."""
    global_runtime.set_precision(Precision.DOUBLE)
    yield
    global_runtime.set_precision(Precision.DOUBLE)


@pytest.fixture
def external_buffer():
    return np.arange(1.0, 5.0)
