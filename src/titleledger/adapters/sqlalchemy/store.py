"""Key-value store backed by a SQLAlchemy session."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from titleledger.adapters.sqlalchemy.mappings import (
    ledger_history_table,
    ledger_state_table,
    utcnow,
)
from titleledger.domain.errors import StoreError
from titleledger.domain.ports import HistoryEntry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session


log = getLogger(__name__)


class SqlAlchemyKeyValueStore:
    """Reads and writes ledger keys inside the session's transaction.

    History keeps one row per key and transaction id, holding the last value the
    transaction wrote.
    """

    def __init__(self, session: Session, *, tx_id: str) -> None:
        self.session = session
        self._tx_id = tx_id

    @property
    def tx_id(self) -> str:
        return self._tx_id

    def get(self, key: str) -> bytes | None:
        stmt = select(ledger_state_table.c.value).where(ledger_state_table.c.key == key)
        try:
            return self.session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to read key {key}: {exc}") from exc

    def put(self, key: str, value: bytes) -> None:
        try:
            exists_stmt = select(ledger_state_table.c.key).where(ledger_state_table.c.key == key)
            if self.session.execute(exists_stmt).scalar_one_or_none() is None:
                self.session.execute(insert(ledger_state_table).values(key=key, value=value))
            else:
                self.session.execute(
                    update(ledger_state_table)
                    .where(ledger_state_table.c.key == key)
                    .values(value=value)
                )
            self._record(key, value)
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to write key {key}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self.session.execute(delete(ledger_state_table).where(ledger_state_table.c.key == key))
            self._record(key, None)
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to delete key {key}: {exc}") from exc

    def history(self, key: str) -> Iterator[HistoryEntry]:
        stmt = (
            select(ledger_history_table.c.tx_id, ledger_history_table.c.value)
            .where(ledger_history_table.c.key == key)
            .order_by(ledger_history_table.c.id)
        )
        try:
            rows = self.session.execute(stmt).all()
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to read history of key {key}: {exc}") from exc
        for tx_id, value in rows:
            yield HistoryEntry(tx_id=tx_id, value=value)

    def _record(self, key: str, value: bytes | None) -> None:
        log.debug("tx %s wrote %s (%s)", self._tx_id, key, "deleted" if value is None else "set")
        latest_stmt = (
            select(ledger_history_table.c.id, ledger_history_table.c.tx_id)
            .where(ledger_history_table.c.key == key)
            .order_by(ledger_history_table.c.id.desc())
            .limit(1)
        )
        latest = self.session.execute(latest_stmt).first()
        # a repeated write in the same transaction replaces that transaction's version
        if latest is not None and latest.tx_id == self._tx_id:
            self.session.execute(
                update(ledger_history_table)
                .where(ledger_history_table.c.id == latest.id)
                .values(value=value, recorded_at=utcnow())
            )
        else:
            self.session.execute(
                insert(ledger_history_table).values(key=key, tx_id=self._tx_id, value=value)
            )


if TYPE_CHECKING:
    from typing import cast

    from titleledger.domain.ports import KeyValueStore

    _session_stub = cast("Session", object())
    _store_check: KeyValueStore = SqlAlchemyKeyValueStore(_session_stub, tx_id="check")
