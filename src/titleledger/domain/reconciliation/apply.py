"""Apply an owner-set diff to the affected ownership records.

Every owner's record is read, modified and written back on its own. A failing
read or write aborts the remaining updates; records already written in the same
call stay written unless the surrounding unit of work rolls them back.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from titleledger.domain.model import Ownership

if TYPE_CHECKING:
    from titleledger.domain.model import OwnerStake, Property
    from titleledger.domain.ports import KeyValueStore, RecordCodec

    from .diff import OwnerSetDiff
    from .query import LedgerQuery


log = getLogger(__name__)


@dataclass(slots=True)
class UpdateResult:
    """Number of ownership records written per owner group."""

    removed: int = 0
    added: int = 0
    updated: int = 0

    @property
    def written(self) -> int:
        return self.removed + self.added + self.updated


@dataclass(slots=True)
class OwnershipRecordUpdater:
    """Bring ownership records in line with a property's new owner set."""

    store: KeyValueStore
    codec: RecordCodec
    query: LedgerQuery

    def __call__(self, diff: OwnerSetDiff, record: Property) -> UpdateResult:
        result = UpdateResult()

        for owner in diff.removed:
            ownership = self._load(owner.id)
            ownership.remove_property(record.property_id)
            self._save(owner.id, ownership)
            result.removed += 1

        for owner in diff.added:
            self._attach(owner, record)
            result.added += 1

        for owner in diff.unchanged:
            self._attach(owner, record)
            result.updated += 1

        return result

    def _attach(self, owner: OwnerStake, record: Property) -> None:
        ownership = self._load(owner.id)
        ownership.replace_stake(record.stake_for(owner))
        self._save(owner.id, ownership)

    def _load(self, ownership_id: str) -> Ownership:
        ownership = self.query.find_ownership(ownership_id)
        if ownership is None:
            log.debug("No ownership recorded for %s, starting empty", ownership_id)
            return Ownership()
        return ownership

    def _save(self, ownership_id: str, ownership: Ownership) -> None:
        key = self.query.id_policy.ownership_key(ownership_id)
        self.store.put(key, self.codec.encode_ownership(ownership))
