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
pyGBVI: parameter and configuration container for the softcore GB-VI
implicit-solvent model used in molecular-dynamics force-field evaluation.
"""

__author__ = "pyGBVI Development Team"
__copyright__ = "Copyright 2025, The pyGBVI Project"
__license__ = "AGPL-3.0-or-later"
__version__ = "0.1.0"

__maintainers__ = ["pyGBVI Development Team"]

__status__ = "Alpha"
