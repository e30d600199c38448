"""SQLAlchemy-backed unit of work for ledger transactions.

The adapter keeps one process-wide engine. ``startup`` binds it and brings the
schema to the latest revision; every unit of work then opens its own session
and tags its writes with a fresh transaction id.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal
from uuid import uuid4

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from titleledger.adapters.sqlalchemy.migrations import upgrade_head
from titleledger.adapters.sqlalchemy.store import SqlAlchemyKeyValueStore
from titleledger.config import get_database_config
from titleledger.domain.ports import LedgerRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine


log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the adapter is used before ``startup`` or configured twice."""


@dataclass(slots=True)
class _AdapterState:
    engine: Engine | None = None
    sessions: sessionmaker[Session] | None = None

    def bind(self, engine: Engine | None) -> None:
        self.engine = engine
        self.sessions = (
            None if engine is None else sessionmaker(bind=engine, expire_on_commit=False)
        )

    def open_session(self) -> Session:
        if self.sessions is None:
            raise StartupError(
                "Ledger database is not initialised; call "
                "titleledger.adapters.sqlalchemy.startup() first."
            )
        return self.sessions()


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the ledger engine and migrate its schema to head."""

    if _STATE.engine is not None and not force:
        raise StartupError("Ledger database already initialised; pass force=True to rebind.")

    target = engine or create_engine(database_uri or get_database_config().uri, future=True)
    upgrade_head(engine=target)
    if _STATE.engine is not None and _STATE.engine is not target:
        _STATE.engine.dispose()
    _STATE.bind(target)
    log.debug("Ledger database ready at %s", target.url.render_as_string(hide_password=True))


def configured_engine() -> Engine | None:
    return _STATE.engine


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the bound engine; safe to call when nothing is bound."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
    _STATE.bind(None)


class SqlAlchemyLedgerUnitOfWork:
    """One session and one ledger transaction id; nothing is stored until ``commit``."""

    def __init__(self) -> None:
        if not is_started():
            raise StartupError("Ledger database is not initialised")
        self.tx_id: str | None = None
        self._session: Session | None = None
        self._repositories: LedgerRepositories | None = None

    def __enter__(self) -> SqlAlchemyLedgerUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        self._session = _STATE.open_session()
        self.tx_id = uuid4().hex
        self._repositories = LedgerRepositories(
            store=SqlAlchemyKeyValueStore(self._session, tx_id=self.tx_id)
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not open")
        return self._session

    @property
    def repositories(self) -> LedgerRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work is not open")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from titleledger.domain.ports import LedgerUnitOfWork

    _uow_check: LedgerUnitOfWork = SqlAlchemyLedgerUnitOfWork()
