from __future__ import annotations

from tests.helpers.properties import SALE_DATE, make_property
from titleledger.domain.model import OwnerStake, Ownership, PropertyStake, RecordVersion


def test_total_percent_sums_owner_stakes() -> None:
    assert make_property(owners=(("a", 0.25), ("b", 0.25), ("c", 0.5))).total_percent() == 1.0
    assert make_property(owners=()).total_percent() == 0.0


def test_stake_for_uses_property_sale_date_and_owner_share() -> None:
    record = make_property()
    owner = OwnerStake(id="ownership_1", percent=0.45, sale_date="ignored", name="Alice")

    stake = record.stake_for(owner)

    assert stake == PropertyStake(id="property_1", percent=0.45, sale_date=SALE_DATE, name="Alice")
    assert stake.property_id == "property_1"
    assert owner.ownership_id == "ownership_1"


def test_replace_stake_keeps_a_single_entry_per_property() -> None:
    ownership = Ownership(
        properties=[
            PropertyStake(id="property_1", percent=0.2),
            PropertyStake(id="property_2", percent=0.5),
            PropertyStake(id="property_1", percent=0.3),
        ]
    )

    ownership.replace_stake(PropertyStake(id="property_1", percent=0.9))

    assert [(stake.id, stake.percent) for stake in ownership.properties] == [
        ("property_2", 0.5),
        ("property_1", 0.9),
    ]


def test_remove_property_reports_removed_count() -> None:
    ownership = Ownership(properties=[PropertyStake(id="property_1")])

    assert ownership.remove_property("property_1") == 1
    assert ownership.remove_property("property_1") == 0
    assert ownership.properties == []


def test_record_version_marks_deletions() -> None:
    assert RecordVersion(tx_id="tx-1", record=None).is_deleted
    assert not RecordVersion(tx_id="tx-1", record=Ownership()).is_deleted
