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
Minimal BibTeX reference manager used for help text of model options.

- Loads pygbvi/data/references.bib once, on import
- `cite("Key")` returns a short formatted citation string
"""

import os
import re
from typing import Dict, Union, List

_ENTRY_PATTERN = re.compile(r"@(\w+)\s*{\s*([^,]+),(.*?)\n}", re.DOTALL)
_FIELD_PATTERN = re.compile(r"(\w+)\s*=\s*[{\"](.*?)[}\"]\s*,?", re.DOTALL)


class BibManager:
    def __init__(self):
        self.references: Dict[str, Dict[str, str]] = {}

    def load_bib_file(self, filepath: str) -> None:
        with open(filepath, encoding="utf-8") as f:
            self.load_bib_text(f.read())

    def load_bib_text(self, content: str) -> None:
        for entry_type, key, body in _ENTRY_PATTERN.findall(content):
            fields = {
                field.lower(): value.strip().replace("\n", " ")
                for field, value in _FIELD_PATTERN.findall(body)
            }
            fields["entry_type"] = entry_type.lower()
            self.references[key.strip()] = fields

    def get_entry(self, key: str) -> Dict[str, str]:
        return self.references.get(key, {})

    def format_citation(self, key: str) -> str:
        entry = self.get_entry(key)
        if not entry:
            return f"[{key}]"

        authors = [a.strip() for a in entry.get("author", "").split(" and ") if a.strip()]
        if not authors:
            first_author = "Unknown author"
        elif len(authors) == 1:
            first_author = self._last_name(authors[0])
        else:
            first_author = f"{self._last_name(authors[0])} et al."

        journal = entry.get("journal") or entry.get("booktitle", "Unknown source")
        citation = (
            f"{first_author} ({entry.get('year', 'n.d.')}). "
            f"{entry.get('title', 'Untitled')}. {journal}"
        )
        volume = entry.get("volume")
        pages = entry.get("pages")
        if volume:
            citation += f" {volume}"
            if pages:
                citation += f", {pages}"
        citation += "."
        doi = entry.get("doi", "").strip()
        if doi:
            citation += f" https://doi.org/{doi}"
        return citation

    @staticmethod
    def _last_name(name: str) -> str:
        if "," in name:
            return name.split(",")[0].strip()
        return name.split()[-1]


# --- Load reference library once ---
reflib = BibManager()
_bib_path = os.path.normpath(
    os.path.join(os.path.dirname(__file__), "..", "data", "references.bib")
)
if os.path.exists(_bib_path):
    reflib.load_bib_file(_bib_path)
else:
    raise FileNotFoundError(f"Missing expected references.bib at {_bib_path}")


def cite(keys: Union[str, List[str]]) -> str:
    """
    Return a formatted citation string for one or more BibTeX keys.

    Args:
        keys (str or list of str): One or more BibTeX citation keys.

    Returns:
        str: Formatted citation(s), separated by semicolons if multiple.
        Unknown keys are rendered as ``[Key]``.
    """
    if isinstance(keys, str):
        return reflib.format_citation(keys)
    elif isinstance(keys, list):
        return "; ".join(reflib.format_citation(key) for key in keys)
    else:
        raise TypeError("`keys` must be a string or a list of strings.")
