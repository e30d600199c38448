"""Port for the key-value ledger store backing all records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Raw value written to a key by one transaction; ``None`` marks a deletion."""

    tx_id: str
    value: bytes | None


@runtime_checkable
class KeyValueStore(Protocol):
    """Store contract seen by the reconciliation core.

    ``get`` returns ``None`` for keys that were never written or were deleted.
    ``history`` yields one entry per transaction that wrote the key, oldest first.
    Failing reads and writes raise ``StoreError``.
    """

    @property
    def tx_id(self) -> str: ...

    def get(self, key: str) -> bytes | None: ...

    def put(self, key: str, value: bytes) -> None: ...

    def delete(self, key: str) -> None: ...

    def history(self, key: str) -> Iterator[HistoryEntry]: ...
