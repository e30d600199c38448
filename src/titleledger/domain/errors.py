"""Errors raised by the title-ledger core."""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for every failure reported by the ledger core."""


class DecodeError(LedgerError):
    """Raised when a payload or stored record cannot be decoded."""


class StoreError(LedgerError):
    """Raised when the key-value store fails a read or write."""


class TransactionValidationError(LedgerError):
    """Raised when a property transaction violates a structural or numeric rule."""


class MissingSaleDateError(TransactionValidationError):
    def __init__(self) -> None:
        super().__init__("A sale date is required.")


class InvalidSalePriceError(TransactionValidationError):
    def __init__(self, sale_price: float) -> None:
        super().__init__(f"The sale price must be greater than 0. Got {sale_price}")
        self.sale_price = sale_price


class NoOwnersError(TransactionValidationError):
    def __init__(self) -> None:
        super().__init__("At least one owner is required.")


class InvalidPercentageTotalError(TransactionValidationError):
    def __init__(self, total: float) -> None:
        super().__init__(
            f"Total percentage can not be greater than or less than 1. Your total percentage = {total}"
        )
        self.total = total


class RecordNotFoundError(LedgerError):
    """Raised by read paths when a record was never written."""

    record_kind: str = "record"

    def __init__(self, record_id: str) -> None:
        super().__init__(f"No {self.record_kind} recorded for id: {record_id}")
        self.record_id = record_id


class PropertyNotFoundError(RecordNotFoundError):
    record_kind = "property"


class OwnershipNotFoundError(RecordNotFoundError):
    record_kind = "ownership"
