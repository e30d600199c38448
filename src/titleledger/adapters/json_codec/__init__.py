"""JSON wire format for ledger records."""

from __future__ import annotations

from .codec import (
    JsonRecordCodec,
    render_ownership_history,
    render_ownerships,
    render_properties,
    render_property_history,
    render_stakes,
    write_record_schemas,
)
from .schema import OwnershipPayload, PropertyPayload, StakePayload

__all__ = [
    "JsonRecordCodec",
    "OwnershipPayload",
    "PropertyPayload",
    "StakePayload",
    "render_ownership_history",
    "render_ownerships",
    "render_properties",
    "render_property_history",
    "render_stakes",
    "write_record_schemas",
]
