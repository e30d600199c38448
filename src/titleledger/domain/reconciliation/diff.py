"""Classify a new owner list against the previously stored one.

Matching policy: owner id only.
- id in both lists -> unchanged (the new entry wins, percent may differ)
- id only in the new list -> added
- id only in the old list -> removed

Duplicate ids inside one list are kept positionally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from titleledger.domain.model import OwnerStake

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(slots=True)
class OwnerSetDiff:
    """Partition of owners produced by ``diff_owner_sets``."""

    unchanged: list[OwnerStake] = field(default_factory=list["OwnerStake"])
    added: list[OwnerStake] = field(default_factory=list["OwnerStake"])
    removed: list[OwnerStake] = field(default_factory=list["OwnerStake"])

    @property
    def summary(self) -> dict[str, int]:
        return {
            "unchanged": len(self.unchanged),
            "added": len(self.added),
            "removed": len(self.removed),
        }


def diff_owner_sets(
    new_owners: Sequence[OwnerStake],
    old_owners: Sequence[OwnerStake],
) -> OwnerSetDiff:
    old_ids = {owner.id for owner in old_owners}
    new_ids = {owner.id for owner in new_owners}

    return OwnerSetDiff(
        unchanged=[owner for owner in new_owners if owner.id in old_ids],
        added=[owner for owner in new_owners if owner.id not in old_ids],
        removed=[owner for owner in old_owners if owner.id not in new_ids],
    )
