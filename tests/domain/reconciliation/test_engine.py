from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING

import pytest

from tests.helpers.properties import (
    SALE_DATE,
    FailingKeyValueStore,
    RecordingKeyValueStore,
    UnreachableKeyValueStore,
    owner,
    property_payload,
)
from titleledger.adapters.memory import InMemoryKeyValueStore
from titleledger.domain.errors import (
    DecodeError,
    InvalidPercentageTotalError,
    MissingSaleDateError,
    StoreError,
)
from titleledger.domain.ids import IdFormatPolicy
from titleledger.domain.model import PropertyStake
from titleledger.domain.reconciliation import PropertyTransactionOrchestrator

if TYPE_CHECKING:
    from titleledger.adapters.json_codec import JsonRecordCodec
    from titleledger.adapters.memory import InMemoryLedger


def _execute(
    ledger: InMemoryLedger,
    codec: JsonRecordCodec,
    payload: str,
    *,
    property_id: str = "property_1",
    tx_id: str = "tx-1",
) -> PropertyTransactionOrchestrator:
    store = InMemoryKeyValueStore(ledger, tx_id=tx_id)
    orchestrator = PropertyTransactionOrchestrator(store=store, codec=codec)
    orchestrator.execute(property_id, payload)
    return orchestrator


def _document(ledger: InMemoryLedger, key: str) -> dict[str, object]:
    return json.loads(ledger.state[key])


def test_first_sale_records_property_and_ownerships(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    payload = property_payload(owner("ownership_1", 0.45), owner("ownership_2", 0.55))

    _execute(ledger, codec, payload)

    assert _document(ledger, "property_1") == {
        "txid": "tx-1",
        "id": "property_1",
        "saleDate": SALE_DATE,
        "salePrice": 1000,
        "owners": [
            {"id": "ownership_1", "percent": 0.45},
            {"id": "ownership_2", "percent": 0.55},
        ],
    }
    assert _document(ledger, "ownership_1") == {
        "properties": [{"id": "property_1", "percent": 0.45, "saleDate": SALE_DATE}]
    }
    assert _document(ledger, "ownership_2") == {
        "properties": [{"id": "property_1", "percent": 0.55, "saleDate": SALE_DATE}]
    }


def test_payload_tx_id_and_id_are_overwritten(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    payload = json.dumps(
        {
            "txid": "spoofed",
            "id": "property_9",
            "saleDate": SALE_DATE,
            "salePrice": 10,
            "owners": [{"id": "ownership_1", "percent": 1}],
        }
    )

    _execute(ledger, codec, payload, tx_id="tx-real")

    document = _document(ledger, "property_1")
    assert document["txid"] == "tx-real"
    assert document["id"] == "property_1"
    assert "property_9" not in ledger.state


def test_resale_moves_stakes_between_owners(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    _execute(
        ledger,
        codec,
        property_payload(owner("ownership_1", 0.45), owner("ownership_2", 0.55)),
    )
    orchestrator = _execute(
        ledger,
        codec,
        property_payload(owner("ownership_2", 0.35), owner("ownership_3", 0.65)),
        tx_id="tx-2",
    )

    query = orchestrator.query
    assert query.get_ownership("ownership_1") == []
    assert query.get_ownership("ownership_2") == [
        PropertyStake(id="1", percent=0.35, sale_date=SALE_DATE)
    ]
    assert query.get_ownership("ownership_3") == [
        PropertyStake(id="1", percent=0.65, sale_date=SALE_DATE)
    ]
    assert query.get_property("property_1").tx_id == "tx-2"


def test_replaying_a_transaction_is_idempotent(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    payload = property_payload(owner("ownership_1", 0.45), owner("ownership_2", 0.55))

    _execute(ledger, codec, payload)
    first = dict(ledger.state)
    _execute(ledger, codec, payload)

    assert ledger.state == first


def test_invalid_payload_writes_nothing(ledger: InMemoryLedger, codec: JsonRecordCodec) -> None:
    payload = property_payload(owner("ownership_1", 0.45), owner("ownership_2", 0.50))

    with pytest.raises(InvalidPercentageTotalError):
        _execute(ledger, codec, payload)

    assert ledger.state == {}
    assert ledger.writes == {}


def test_validation_runs_before_any_store_access(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    orchestrator = PropertyTransactionOrchestrator(
        store=UnreachableKeyValueStore(ledger, tx_id="tx-1"), codec=codec
    )

    with pytest.raises(MissingSaleDateError):
        orchestrator.execute("property_1", property_payload(owner("ownership_1", 1), sale_date=""))


@pytest.mark.parametrize(
    "payload",
    [
        '{"saleDate": "2017-06-28T21:57:16", "salePrice": "1000", "owners": []}',
        '{"saleDate": "2017-06-28T21:57:16", "salePrice": 1000, "owners": [{"percent": 1}]}',
        "not json",
    ],
)
def test_undecodable_payload_is_rejected(
    ledger: InMemoryLedger, codec: JsonRecordCodec, payload: str
) -> None:
    with pytest.raises(DecodeError):
        _execute(ledger, codec, payload)

    assert ledger.state == {}


def test_store_failure_leaves_earlier_writes_in_place(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    _execute(
        ledger,
        codec,
        property_payload(owner("ownership_1", 0.45), owner("ownership_2", 0.55)),
    )
    before = _document(ledger, "property_1")
    failing = FailingKeyValueStore(ledger, failing_keys=["ownership_3"], tx_id="tx-2")
    orchestrator = PropertyTransactionOrchestrator(store=failing, codec=codec)

    with pytest.raises(StoreError):
        orchestrator.execute(
            "property_1",
            property_payload(owner("ownership_2", 0.35), owner("ownership_3", 0.65)),
        )

    assert _document(ledger, "ownership_1") == {"properties": []}
    assert _document(ledger, "property_1") == before
    assert "ownership_3" not in ledger.state


def test_property_record_is_written_after_every_ownership(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    _execute(
        ledger,
        codec,
        property_payload(owner("ownership_1", 0.45), owner("ownership_2", 0.55)),
    )
    store = RecordingKeyValueStore(ledger, tx_id="tx-2")
    orchestrator = PropertyTransactionOrchestrator(store=store, codec=codec)

    orchestrator.execute(
        "property_1",
        property_payload(owner("ownership_2", 0.35), owner("ownership_3", 0.65)),
    )

    assert store.puts == ["ownership_1", "ownership_3", "ownership_2", "property_1"]


def test_non_finite_sale_price_is_rejected_before_writing(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    payload = property_payload(owner("ownership_1", 1), sale_price=math.inf)
    assert "Infinity" in payload

    with pytest.raises(DecodeError, match="Unable to decode property"):
        _execute(ledger, codec, payload)

    assert ledger.state == {}
    _execute(ledger, codec, property_payload(owner("ownership_1", 1)))
    assert ledger.state["property_1"]


def test_duplicate_owner_ids_keep_one_stake_per_property(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    payload = property_payload(owner("ownership_1", 0.5), owner("ownership_1", 0.5))

    _execute(ledger, codec, payload)
    first = ledger.state["ownership_1"]
    orchestrator = _execute(ledger, codec, payload, tx_id="tx-2")

    query = orchestrator.query
    assert query.get_ownership("ownership_1") == [
        PropertyStake(id="1", percent=0.5, sale_date=SALE_DATE)
    ]
    assert [stake.id for stake in query.get_property("property_1").owners] == [
        "ownership_1",
        "ownership_1",
    ]
    assert ledger.state["ownership_1"] == first
    assert [entry.tx_id for entry in ledger.writes["ownership_1"]] == ["tx-1", "tx-2"]


def test_namespaced_policy_separates_keyspaces(
    ledger: InMemoryLedger, codec: JsonRecordCodec
) -> None:
    policy = IdFormatPolicy(property_key_namespace="property/", ownership_key_namespace="owner/")
    store = InMemoryKeyValueStore(ledger, tx_id="tx-1")
    orchestrator = PropertyTransactionOrchestrator(store=store, codec=codec, id_policy=policy)

    orchestrator.execute("property_1", property_payload(owner("ownership_1", 1)))

    assert set(ledger.state) == {"property/property_1", "owner/ownership_1"}
    assert orchestrator.query.get_ownership("ownership_1")[0].id == "1"
