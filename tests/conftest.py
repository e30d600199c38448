from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from titleledger.adapters.json_codec import JsonRecordCodec
from titleledger.adapters.memory import (
    InMemoryKeyValueStore,
    InMemoryLedger,
    InMemoryLedgerUnitOfWork,
)
from titleledger.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLedgerUnitOfWork,
    shutdown,
    startup,
)
from titleledger.domain.ids import IdFormatPolicy

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from sqlalchemy.engine import Engine

    from titleledger.domain.ports import LedgerUnitOfWork


@pytest.fixture
def codec() -> JsonRecordCodec:
    return JsonRecordCodec()


@pytest.fixture
def id_policy() -> IdFormatPolicy:
    return IdFormatPolicy()


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger()


@pytest.fixture
def store(ledger: InMemoryLedger) -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore(ledger, tx_id="tx-1")


@pytest.fixture
def memory_unit_of_work(ledger: InMemoryLedger) -> Callable[[], InMemoryLedgerUnitOfWork]:
    def factory() -> InMemoryLedgerUnitOfWork:
        return InMemoryLedgerUnitOfWork(ledger)

    return factory


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyLedgerUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyLedgerUnitOfWork:
        return SqlAlchemyLedgerUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture(params=["memory", "sqlite"])
def unit_of_work_factory(request: pytest.FixtureRequest) -> Callable[[], LedgerUnitOfWork]:
    return request.getfixturevalue(f"{request.param}_unit_of_work")
