"""Unit-of-work abstractions for coordinating ledger access."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from titleledger.domain.ports.store import KeyValueStore


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of stores managed together."""


@runtime_checkable
class UnitOfWork[TRepositories: RepositoryCollection](Protocol):
    """Transaction boundary around a repository collection.

    Writes made through ``repositories`` become durable only on ``commit``; leaving
    the context with an exception discards them.
    """

    @property
    def repositories(self) -> TRepositories: ...

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class LedgerRepositories(RepositoryCollection):
    """Stores available to one ledger transaction."""

    store: KeyValueStore


type LedgerUnitOfWork = UnitOfWork[LedgerRepositories]
