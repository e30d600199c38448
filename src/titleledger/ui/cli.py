# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from titleledger.adapters.json_codec import (
    JsonRecordCodec,
    render_ownership_history,
    render_ownerships,
    render_properties,
    render_property_history,
    render_stakes,
)
from titleledger.app import (
    export_record_schemas,
    get_ownership,
    get_ownership_history,
    get_ownerships,
    get_properties,
    get_property,
    get_property_history,
    property_transaction,
)
from titleledger.common.logging import configure_logging
from titleledger.domain.errors import LedgerError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Real-estate title ledger")
    subparsers = parser.add_subparsers(dest="command", required=True)

    transaction = subparsers.add_parser(
        "transaction",
        help="Record a property sale and reconcile ownerships",
    )
    transaction.add_argument("property_id", help="Id of the property being sold")
    transaction.add_argument(
        "payload",
        help="Property JSON, or @path to read it from a file",
    )

    prop = subparsers.add_parser("property", help="Show the current property record")
    prop.add_argument("property_id")

    prop_history = subparsers.add_parser("property-history", help="Show a property's history")
    prop_history.add_argument("property_id")

    ownership = subparsers.add_parser("ownership", help="Show an owner's property stakes")
    ownership.add_argument("ownership_id")

    ownership_history = subparsers.add_parser(
        "ownership-history",
        help="Show an ownership's history",
    )
    ownership_history.add_argument("ownership_id")

    props = subparsers.add_parser("properties", help="Show several property records")
    props.add_argument("property_ids", nargs="+")

    ownerships = subparsers.add_parser("ownerships", help="Show several owners' stakes")
    ownerships.add_argument("ownership_ids", nargs="+")

    schemas = subparsers.add_parser("schemas", help="Write JSON Schemas of the records")
    schemas.add_argument(
        "--output-dir",
        type=Path,
        default=Path(),
        help="Directory receiving Property.json and Ownership.json (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _read_payload(value: str) -> str:
    if value.startswith("@"):
        path = Path(value[1:])
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ValueError(f"Unable to read payload file: {path}") from exc
    return value


def _emit(document: bytes) -> None:
    print(document.decode())


def _run(args: argparse.Namespace) -> None:
    if args.command == "transaction":
        property_transaction(args.property_id, _read_payload(args.payload))
        log.info("Recorded transaction for %s", args.property_id)
    elif args.command == "property":
        _emit(JsonRecordCodec().encode_property(get_property(args.property_id)))
    elif args.command == "property-history":
        _emit(render_property_history(get_property_history(args.property_id)))
    elif args.command == "ownership":
        _emit(render_stakes(get_ownership(args.ownership_id)))
    elif args.command == "ownership-history":
        _emit(render_ownership_history(get_ownership_history(args.ownership_id)))
    elif args.command == "properties":
        _emit(render_properties(get_properties(args.property_ids)))
    elif args.command == "ownerships":
        _emit(render_ownerships(get_ownerships(args.ownership_ids)))
    elif args.command == "schemas":
        export_record_schemas(args.output_dir)
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        _run(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except LedgerError as exc:
        log.error("%s failed: %s", parsed_args.command, exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
