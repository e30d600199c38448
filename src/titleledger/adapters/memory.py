"""In-memory ledger store and unit of work, used by tests and dry runs."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal
from uuid import uuid4

from titleledger.domain.ports import HistoryEntry, LedgerRepositories

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import TracebackType


def new_tx_id() -> str:
    return uuid4().hex


@dataclass(slots=True)
class InMemoryLedger:
    """World state plus the per-key write history of every transaction."""

    state: dict[str, bytes] = field(default_factory=dict[str, bytes])
    writes: dict[str, list[HistoryEntry]] = field(default_factory=dict[str, list[HistoryEntry]])

    def snapshot(self) -> InMemoryLedger:
        return InMemoryLedger(state=dict(self.state), writes=copy.deepcopy(self.writes))

    def restore(self, snapshot: InMemoryLedger) -> None:
        self.state = dict(snapshot.state)
        self.writes = copy.deepcopy(snapshot.writes)


class InMemoryKeyValueStore:
    """Store view bound to one transaction id; writes land immediately."""

    def __init__(self, ledger: InMemoryLedger | None = None, *, tx_id: str | None = None) -> None:
        self.ledger = ledger if ledger is not None else InMemoryLedger()
        self._tx_id = tx_id or new_tx_id()

    @property
    def tx_id(self) -> str:
        return self._tx_id

    def get(self, key: str) -> bytes | None:
        return self.ledger.state.get(key)

    def put(self, key: str, value: bytes) -> None:
        self.ledger.state[key] = bytes(value)
        self._record(key, bytes(value))

    def delete(self, key: str) -> None:
        self.ledger.state.pop(key, None)
        self._record(key, None)

    def history(self, key: str) -> Iterator[HistoryEntry]:
        yield from list(self.ledger.writes.get(key, ()))

    def _record(self, key: str, value: bytes | None) -> None:
        entries = self.ledger.writes.setdefault(key, [])
        entry = HistoryEntry(tx_id=self._tx_id, value=value)
        # a repeated write in the same transaction replaces that transaction's version
        if entries and entries[-1].tx_id == self._tx_id:
            entries[-1] = entry
        else:
            entries.append(entry)


class InMemoryLedgerUnitOfWork:
    """Unit of work that restores the last committed snapshot on rollback or exit."""

    def __init__(self, ledger: InMemoryLedger) -> None:
        self.ledger = ledger
        self._snapshot: InMemoryLedger | None = None
        self._repositories: LedgerRepositories | None = None
        self.committed = False

    def __enter__(self) -> InMemoryLedgerUnitOfWork:
        self._snapshot = self.ledger.snapshot()
        self._repositories = LedgerRepositories(store=InMemoryKeyValueStore(self.ledger))
        self.committed = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        # writes after the last commit are discarded, as with a closed session
        self.rollback()
        self._snapshot = None
        self._repositories = None
        return False

    @property
    def repositories(self) -> LedgerRepositories:
        if self._repositories is None:
            raise RuntimeError("Unit of work used outside of its context")
        return self._repositories

    def commit(self) -> None:
        self._snapshot = self.ledger.snapshot()
        self.committed = True

    def rollback(self) -> None:
        if self._snapshot is not None:
            self.ledger.restore(self._snapshot)


if TYPE_CHECKING:
    from titleledger.domain.ports import KeyValueStore, LedgerUnitOfWork

    _store_check: KeyValueStore = InMemoryKeyValueStore()
    _uow_check: LedgerUnitOfWork = InMemoryLedgerUnitOfWork(InMemoryLedger())
