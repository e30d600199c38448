"""Ownership reconciliation core.

Keeps property records and ownership records consistent whenever a property
changes hands: validate the sale, diff the owner sets, rewrite the affected
ownership records and persist the property last.
"""

from __future__ import annotations

from .apply import OwnershipRecordUpdater, UpdateResult
from .diff import OwnerSetDiff, diff_owner_sets
from .engine import PropertyTransactionOrchestrator
from .query import LedgerQuery
from .validate import validate_property

__all__ = [
    "LedgerQuery",
    "OwnerSetDiff",
    "OwnershipRecordUpdater",
    "PropertyTransactionOrchestrator",
    "UpdateResult",
    "diff_owner_sets",
    "validate_property",
]
