"""Application orchestration entry points.

Each service runs one ledger operation inside its own unit of work: writes are
committed only when the whole operation succeeded.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from titleledger.adapters.json_codec import JsonRecordCodec, write_record_schemas
from titleledger.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyLedgerUnitOfWork,
    is_started,
    startup,
)
from titleledger.config import get_ledger_config
from titleledger.domain.ports.unit_of_work import LedgerUnitOfWork
from titleledger.domain.reconciliation import LedgerQuery, PropertyTransactionOrchestrator

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from titleledger.domain.ids import IdFormatPolicy
    from titleledger.domain.model import Ownership, Property, PropertyStake, RecordVersion
    from titleledger.domain.ports import KeyValueStore, RecordCodec

UnitOfWorkFactory = Callable[[], LedgerUnitOfWork]


log = getLogger(__name__)


@dataclass(slots=True)
class LedgerServices:
    """Core components bound to one transaction's store."""

    orchestrator: PropertyTransactionOrchestrator
    query: LedgerQuery


def build_services(
    store: KeyValueStore,
    *,
    codec: RecordCodec | None = None,
    id_policy: IdFormatPolicy | None = None,
) -> LedgerServices:
    effective_codec = codec or JsonRecordCodec()
    effective_policy = id_policy or get_ledger_config().id_policy()
    orchestrator = PropertyTransactionOrchestrator(
        store=store,
        codec=effective_codec,
        id_policy=effective_policy,
    )
    return LedgerServices(orchestrator=orchestrator, query=orchestrator.query)


def _default_unit_of_work() -> LedgerUnitOfWork:
    if not is_started():
        startup()
    return SqlAlchemyLedgerUnitOfWork()


def property_transaction(
    property_id: str,
    payload: bytes | str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    id_policy: IdFormatPolicy | None = None,
) -> None:
    """Record a sale of ``property_id`` and reconcile the affected ownerships."""

    effective_uow = unit_of_work_factory or _default_unit_of_work
    with effective_uow() as uow:
        services = build_services(uow.repositories.store, id_policy=id_policy)
        services.orchestrator.execute(property_id, payload)
        uow.commit()


def get_property(
    property_id: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    id_policy: IdFormatPolicy | None = None,
) -> Property:
    effective_uow = unit_of_work_factory or _default_unit_of_work
    with effective_uow() as uow:
        return build_services(uow.repositories.store, id_policy=id_policy).query.get_property(
            property_id
        )


def get_properties(
    property_ids: Iterable[str],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    id_policy: IdFormatPolicy | None = None,
) -> list[Property]:
    effective_uow = unit_of_work_factory or _default_unit_of_work
    with effective_uow() as uow:
        query = build_services(uow.repositories.store, id_policy=id_policy).query
        return query.get_properties(property_ids)


def get_property_history(
    property_id: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    id_policy: IdFormatPolicy | None = None,
) -> list[RecordVersion[Property]]:
    """Return every stored version of the property, oldest first."""

    effective_uow = unit_of_work_factory or _default_unit_of_work
    with effective_uow() as uow:
        query = build_services(uow.repositories.store, id_policy=id_policy).query
        return list(query.property_history(property_id))


def get_ownership(
    ownership_id: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    id_policy: IdFormatPolicy | None = None,
) -> list[PropertyStake]:
    effective_uow = unit_of_work_factory or _default_unit_of_work
    with effective_uow() as uow:
        query = build_services(uow.repositories.store, id_policy=id_policy).query
        return query.get_ownership(ownership_id)


def get_ownerships(
    ownership_ids: Iterable[str],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    id_policy: IdFormatPolicy | None = None,
) -> list[list[PropertyStake]]:
    effective_uow = unit_of_work_factory or _default_unit_of_work
    with effective_uow() as uow:
        query = build_services(uow.repositories.store, id_policy=id_policy).query
        return query.get_ownerships(ownership_ids)


def get_ownership_history(
    ownership_id: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    id_policy: IdFormatPolicy | None = None,
) -> list[RecordVersion[Ownership]]:
    """Return every stored version of the ownership, oldest first."""

    effective_uow = unit_of_work_factory or _default_unit_of_work
    with effective_uow() as uow:
        query = build_services(uow.repositories.store, id_policy=id_policy).query
        return list(query.ownership_history(ownership_id))


def export_record_schemas(directory: Path) -> list[Path]:
    """Write ``Property.json`` and ``Ownership.json`` schemas into ``directory``."""

    written = write_record_schemas(directory)
    log.info("Wrote record schemas: %s", ", ".join(str(path) for path in written))
    return written
