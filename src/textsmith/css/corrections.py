"""The fixed table of safe property-name corrections."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Known misspelling -> correct property name. Read-only for the process lifetime.
PROPERTY_CORRECTIONS: Mapping[str, str] = MappingProxyType({
    "backgroung": "background",
    "colr": "color",
    "widht": "width",
    "heigth": "height",
})
