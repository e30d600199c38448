"""Structural and numeric checks run before a property transaction touches the store."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from titleledger.domain.errors import (
    InvalidPercentageTotalError,
    InvalidSalePriceError,
    MissingSaleDateError,
    NoOwnersError,
)

if TYPE_CHECKING:
    from titleledger.domain.model import Property


def validate_property(record: Property) -> None:
    """Raise the first rule ``record`` violates; return ``None`` when it is valid.

    The sale price must be a finite positive number; the percentage total is
    compared with exact float equality.
    """

    if not record.sale_date.strip():
        raise MissingSaleDateError
    if not (math.isfinite(record.sale_price) and record.sale_price > 0):
        raise InvalidSalePriceError(record.sale_price)
    if not record.owners:
        raise NoOwnersError
    total = record.total_percent()
    if total != 1.0:
        raise InvalidPercentageTotalError(total)
