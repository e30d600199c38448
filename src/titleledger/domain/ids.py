"""Key and display formatting for ledger identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_PROPERTY_DISPLAY_PREFIX: Final[str] = "property_"


@dataclass(frozen=True, slots=True)
class IdFormatPolicy:
    """Maps record ids to store keys and property ids to their display form.

    Key namespaces default to empty, so property and ownership ids are used as
    store keys verbatim and share one keyspace.
    """

    property_display_prefix: str = DEFAULT_PROPERTY_DISPLAY_PREFIX
    property_key_namespace: str = ""
    ownership_key_namespace: str = ""

    def property_key(self, property_id: str) -> str:
        return f"{self.property_key_namespace}{property_id}"

    def ownership_key(self, ownership_id: str) -> str:
        return f"{self.ownership_key_namespace}{ownership_id}"

    def display_property_id(self, property_id: str) -> str:
        """Strip the display prefix, e.g. ``property_12`` -> ``12``."""

        prefix = self.property_display_prefix
        if prefix and property_id.startswith(prefix):
            return property_id[len(prefix) :]
        return property_id
