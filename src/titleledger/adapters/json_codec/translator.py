"""Translate between JSON payload models and domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from titleledger.domain.model import OwnerStake, Ownership, Property, PropertyStake

from .schema import OwnershipPayload, PropertyPayload, StakePayload

if TYPE_CHECKING:
    from titleledger.domain.model import Stake


def property_from_payload(payload: PropertyPayload) -> Property:
    return Property(
        property_id=payload.id,
        tx_id=payload.txid,
        sale_date=payload.sale_date,
        sale_price=payload.sale_price,
        owners=[
            OwnerStake(
                id=owner.id,
                percent=owner.percent,
                sale_date=owner.sale_date,
                name=owner.name,
            )
            for owner in payload.owners
        ],
    )


def ownership_from_payload(payload: OwnershipPayload) -> Ownership:
    return Ownership(
        properties=[
            PropertyStake(
                id=stake.id,
                percent=stake.percent,
                sale_date=stake.sale_date,
                name=stake.name,
            )
            for stake in payload.properties
        ]
    )


def stake_to_payload(stake: Stake) -> StakePayload:
    return StakePayload(
        id=stake.id,
        percent=float(stake.percent),
        sale_date=stake.sale_date,
        name=stake.name,
    )


def property_to_payload(record: Property) -> PropertyPayload:
    return PropertyPayload(
        txid=record.tx_id,
        id=record.property_id,
        sale_date=record.sale_date,
        sale_price=float(record.sale_price),
        owners=[stake_to_payload(owner) for owner in record.owners],
    )


def ownership_to_payload(record: Ownership) -> OwnershipPayload:
    return OwnershipPayload(properties=[stake_to_payload(stake) for stake in record.properties])
