"""Orchestrator for a single property transaction.

The orchestrator owns the control flow of one transaction:
1) decode the payload
2) validate it before any store access
3) load the previously stored property, if any
4) diff the new owners against the previous ones
5) update every affected ownership record
6) persist the property record last
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from titleledger.domain.ids import IdFormatPolicy

from .apply import OwnershipRecordUpdater
from .diff import diff_owner_sets
from .query import LedgerQuery
from .validate import validate_property

if TYPE_CHECKING:
    from titleledger.domain.model import Property
    from titleledger.domain.ports import KeyValueStore, RecordCodec


log = getLogger(__name__)


@dataclass(slots=True)
class PropertyTransactionOrchestrator:
    """Run a property transaction from raw payload to persisted records."""

    store: KeyValueStore
    codec: RecordCodec
    id_policy: IdFormatPolicy = field(default_factory=IdFormatPolicy)
    query: LedgerQuery = field(init=False)
    update_ownerships: OwnershipRecordUpdater = field(init=False)

    def __post_init__(self) -> None:
        self.query = LedgerQuery(store=self.store, codec=self.codec, id_policy=self.id_policy)
        self.update_ownerships = OwnershipRecordUpdater(
            store=self.store,
            codec=self.codec,
            query=self.query,
        )

    def execute(self, property_id: str, raw_payload: bytes | str) -> None:
        """Apply the sale described by ``raw_payload`` to ``property_id``."""

        record = self.codec.decode_property(raw_payload)
        validate_property(record)
        record.property_id = property_id
        record.tx_id = self.store.tx_id

        previous = self.query.find_property(property_id)
        previous_owners = previous.owners if previous is not None else []
        diff = diff_owner_sets(record.owners, previous_owners)
        log.debug("Owner diff for %s: %s", property_id, diff.summary)

        result = self.update_ownerships(diff, record)

        self._persist(record)
        log.info(
            "Recorded sale of %s in tx %s: owners=%s, ownerships written=%s",
            property_id,
            record.tx_id,
            len(record.owners),
            result.written,
        )

    def _persist(self, record: Property) -> None:
        key = self.id_policy.property_key(record.property_id)
        self.store.put(key, self.codec.encode_property(record))
