"""Current-state and history read paths for properties and ownerships."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from titleledger.domain.errors import OwnershipNotFoundError, PropertyNotFoundError
from titleledger.domain.ids import IdFormatPolicy
from titleledger.domain.model import PropertyStake, RecordVersion

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from titleledger.domain.model import Ownership, Property
    from titleledger.domain.ports import KeyValueStore, RecordCodec


@dataclass(slots=True)
class LedgerQuery:
    store: KeyValueStore
    codec: RecordCodec
    id_policy: IdFormatPolicy = field(default_factory=IdFormatPolicy)

    def find_property(self, property_id: str) -> Property | None:
        raw = self.store.get(self.id_policy.property_key(property_id))
        if raw is None:
            return None
        return self.codec.decode_property(raw)

    def find_ownership(self, ownership_id: str) -> Ownership | None:
        raw = self.store.get(self.id_policy.ownership_key(ownership_id))
        if raw is None:
            return None
        return self.codec.decode_ownership(raw)

    def get_property(self, property_id: str) -> Property:
        record = self.find_property(property_id)
        if record is None:
            raise PropertyNotFoundError(property_id)
        return record

    def get_ownership(self, ownership_id: str) -> list[PropertyStake]:
        """Return the ownership's stakes with property ids in display form.

        An ownership holding no stakes is returned as an empty list; only an
        ownership that was never written is reported as missing.
        """

        record = self.find_ownership(ownership_id)
        if record is None:
            raise OwnershipNotFoundError(ownership_id)
        return [
            PropertyStake(
                id=self.id_policy.display_property_id(stake.id),
                percent=stake.percent,
                sale_date=stake.sale_date,
                name=stake.name,
            )
            for stake in record.properties
        ]

    def get_properties(self, property_ids: Iterable[str]) -> list[Property]:
        return [self.get_property(property_id) for property_id in property_ids]

    def get_ownerships(self, ownership_ids: Iterable[str]) -> list[list[PropertyStake]]:
        return [self.get_ownership(ownership_id) for ownership_id in ownership_ids]

    def property_history(self, property_id: str) -> Iterator[RecordVersion[Property]]:
        for entry in self.store.history(self.id_policy.property_key(property_id)):
            record = None if entry.value is None else self.codec.decode_property(entry.value)
            yield RecordVersion(tx_id=entry.tx_id, record=record)

    def ownership_history(self, ownership_id: str) -> Iterator[RecordVersion[Ownership]]:
        for entry in self.store.history(self.id_policy.ownership_key(ownership_id)):
            record = None if entry.value is None else self.codec.decode_ownership(entry.value)
            yield RecordVersion(tx_id=entry.tx_id, record=record)
