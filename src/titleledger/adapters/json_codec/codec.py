"""JSON record codec and JSON renderers for query results."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from titleledger.domain.errors import DecodeError

from .schema import OwnershipPayload, PropertyPayload
from .translator import (
    ownership_from_payload,
    ownership_to_payload,
    property_from_payload,
    property_to_payload,
    stake_to_payload,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from pydantic import BaseModel

    from titleledger.domain.model import Ownership, Property, RecordVersion, Stake


class JsonRecordCodec:
    """Encode records as compact JSON with camelCase field names."""

    def decode_property(self, raw: bytes | str) -> Property:
        try:
            payload = PropertyPayload.model_validate_json(raw)
        except ValidationError as exc:
            raise DecodeError(f"Unable to decode property: {exc}") from exc
        return property_from_payload(payload)

    def encode_property(self, record: Property) -> bytes:
        return _dump_model(property_to_payload(record))

    def decode_ownership(self, raw: bytes | str) -> Ownership:
        try:
            payload = OwnershipPayload.model_validate_json(raw)
        except ValidationError as exc:
            raise DecodeError(f"Unable to decode ownership: {exc}") from exc
        return ownership_from_payload(payload)

    def encode_ownership(self, record: Ownership) -> bytes:
        return _dump_model(ownership_to_payload(record))


def _as_document(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _dump_model(model: BaseModel) -> bytes:
    return model.model_dump_json(by_alias=True, exclude_none=True).encode()


def _dump_document(document: object) -> bytes:
    return json.dumps(document, separators=(",", ":")).encode()


def render_stakes(stakes: Iterable[Stake]) -> bytes:
    """Render an ownership view as a JSON array of stakes."""

    return _dump_document([_as_document(stake_to_payload(stake)) for stake in stakes])


def render_properties(records: Iterable[Property]) -> bytes:
    return _dump_document([_as_document(property_to_payload(record)) for record in records])


def render_ownerships(views: Iterable[Iterable[Stake]]) -> bytes:
    return _dump_document(
        [[_as_document(stake_to_payload(stake)) for stake in view] for view in views]
    )


def render_property_history(versions: Iterable[RecordVersion[Property]]) -> bytes:
    """Render ``[{"txId": ..., "property": {...} | null}]``."""

    return _dump_document(
        [
            {
                "txId": version.tx_id,
                "property": None
                if version.record is None
                else _as_document(property_to_payload(version.record)),
            }
            for version in versions
        ]
    )


def render_ownership_history(versions: Iterable[RecordVersion[Ownership]]) -> bytes:
    """Render ``[{"txId": ..., "properties": [...] | null}]``."""

    return _dump_document(
        [
            {
                "txId": version.tx_id,
                "properties": None
                if version.record is None
                else _as_document(ownership_to_payload(version.record))["properties"],
            }
            for version in versions
        ]
    )


RECORD_SCHEMA_FILES: dict[str, type[BaseModel]] = {
    "Property.json": PropertyPayload,
    "Ownership.json": OwnershipPayload,
}


def write_record_schemas(directory: Path) -> list[Path]:
    """Write JSON Schemas of the record wire shapes into ``directory``."""

    directory.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for filename, model in RECORD_SCHEMA_FILES.items():
        path = directory / filename
        schema = model.model_json_schema(by_alias=True)
        path.write_text(json.dumps(schema, indent=4) + "\n", encoding="utf-8")
        written.append(path)
    return written


if TYPE_CHECKING:
    from titleledger.domain.ports import RecordCodec

    _codec_check: RecordCodec = JsonRecordCodec()
