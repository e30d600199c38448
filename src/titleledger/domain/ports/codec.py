"""Port for encoding ledger records to and from the store's byte format."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from titleledger.domain.model import Ownership, Property


@runtime_checkable
class RecordCodec(Protocol):
    """Pure conversion between records and bytes; failures raise ``DecodeError``."""

    def decode_property(self, raw: bytes | str) -> Property: ...

    def encode_property(self, record: Property) -> bytes: ...

    def decode_ownership(self, raw: bytes | str) -> Ownership: ...

    def encode_ownership(self, record: Ownership) -> bytes: ...
