"""Domain records of the title ledger."""

from __future__ import annotations

from .records import (
    OwnerStake,
    Ownership,
    Property,
    PropertyStake,
    RecordVersion,
    Stake,
)

__all__ = [
    "OwnerStake",
    "Ownership",
    "Property",
    "PropertyStake",
    "RecordVersion",
    "Stake",
]
