"""Ledger records: properties, ownerships and the stakes linking them.

A stake has the same shape in both records, but its ``id`` names a different
kind of entity depending on the container: inside a ``Property`` it is an
ownership id, inside an ``Ownership`` it is a property id. The two subclasses
keep those namespaces apart in application code.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, kw_only=True)
class Stake:
    """Shared stake representation stored in both record kinds."""

    id: str
    percent: float = 0.0
    sale_date: str | None = None
    name: str | None = None


@dataclass(slots=True, kw_only=True)
class OwnerStake(Stake):
    """Owner entry of a property; ``id`` is an ownership id."""

    @property
    def ownership_id(self) -> str:
        return self.id


@dataclass(slots=True, kw_only=True)
class PropertyStake(Stake):
    """Property reference held by an ownership; ``id`` is a property id."""

    @property
    def property_id(self) -> str:
        return self.id


@dataclass(slots=True, kw_only=True)
class Property:
    """One sale event for a property, overwritten by each later sale."""

    property_id: str = ""
    tx_id: str = ""
    sale_date: str = ""
    sale_price: float = 0.0
    owners: list[OwnerStake] = field(default_factory=list["OwnerStake"])

    def total_percent(self) -> float:
        total = 0.0
        for owner in self.owners:
            total += owner.percent
        return total

    def stake_for(self, owner: OwnerStake) -> PropertyStake:
        """Build the ownership-side reference to this property for ``owner``."""

        return PropertyStake(
            id=self.property_id,
            percent=owner.percent,
            sale_date=self.sale_date,
            name=owner.name,
        )


@dataclass(slots=True)
class Ownership:
    """Property stakes currently held by one owner entity."""

    properties: list[PropertyStake] = field(default_factory=list["PropertyStake"])

    def remove_property(self, property_id: str) -> int:
        """Drop every stake for ``property_id`` and return how many were removed."""

        kept = [stake for stake in self.properties if stake.id != property_id]
        removed = len(self.properties) - len(kept)
        self.properties = kept
        return removed

    def replace_stake(self, stake: PropertyStake) -> None:
        """Store ``stake`` as the only entry for its property."""

        self.remove_property(stake.id)
        self.properties.append(stake)


@dataclass(frozen=True, slots=True)
class RecordVersion[TRecord]:
    """One entry of a record's history; ``record`` is ``None`` for deletions."""

    tx_id: str
    record: TRecord | None

    @property
    def is_deleted(self) -> bool:
        return self.record is None
