from __future__ import annotations

from titleledger.domain.model import OwnerStake
from titleledger.domain.reconciliation import diff_owner_sets


def _ids(owners: list[OwnerStake]) -> list[str]:
    return [owner.id for owner in owners]


def test_first_sale_adds_every_owner() -> None:
    new = [OwnerStake(id="a", percent=0.5), OwnerStake(id="b", percent=0.5)]

    diff = diff_owner_sets(new, [])

    assert _ids(diff.added) == ["a", "b"]
    assert diff.unchanged == []
    assert diff.removed == []


def test_partitions_by_owner_id() -> None:
    old = [OwnerStake(id="a", percent=0.5), OwnerStake(id="b", percent=0.5)]
    new = [OwnerStake(id="b", percent=0.3), OwnerStake(id="c", percent=0.7)]

    diff = diff_owner_sets(new, old)

    assert _ids(diff.unchanged) == ["b"]
    assert _ids(diff.added) == ["c"]
    assert _ids(diff.removed) == ["a"]
    assert diff.summary == {"unchanged": 1, "added": 1, "removed": 1}


def test_unchanged_owners_carry_the_new_entry() -> None:
    old = [OwnerStake(id="a", percent=0.5)]
    new = [OwnerStake(id="a", percent=1.0, name="Alice")]

    diff = diff_owner_sets(new, old)

    assert diff.unchanged == [OwnerStake(id="a", percent=1.0, name="Alice")]


def test_identical_lists_leave_everything_unchanged() -> None:
    owners = [OwnerStake(id="a", percent=0.25), OwnerStake(id="b", percent=0.75)]

    diff = diff_owner_sets(owners, list(owners))

    assert _ids(diff.unchanged) == ["a", "b"]
    assert diff.added == []
    assert diff.removed == []


def test_duplicate_ids_are_kept_positionally() -> None:
    old = [OwnerStake(id="a", percent=0.5), OwnerStake(id="a", percent=0.5)]
    new = [OwnerStake(id="b", percent=0.5), OwnerStake(id="b", percent=0.5)]

    diff = diff_owner_sets(new, old)

    assert _ids(diff.added) == ["b", "b"]
    assert _ids(diff.removed) == ["a", "a"]
