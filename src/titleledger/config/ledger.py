"""Ledger key and id formatting configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from titleledger.domain.ids import DEFAULT_PROPERTY_DISPLAY_PREFIX, IdFormatPolicy


@dataclass(frozen=True, slots=True)
class LedgerConfig:
    property_display_prefix: str = DEFAULT_PROPERTY_DISPLAY_PREFIX
    property_key_namespace: str = ""
    ownership_key_namespace: str = ""

    def id_policy(self) -> IdFormatPolicy:
        return IdFormatPolicy(
            property_display_prefix=self.property_display_prefix,
            property_key_namespace=self.property_key_namespace,
            ownership_key_namespace=self.ownership_key_namespace,
        )


def get_ledger_config() -> LedgerConfig:
    return LedgerConfig(
        property_display_prefix=os.getenv(
            "TITLELEDGER_PROPERTY_ID_PREFIX", DEFAULT_PROPERTY_DISPLAY_PREFIX
        ),
        property_key_namespace=os.getenv("TITLELEDGER_PROPERTY_KEY_NAMESPACE", ""),
        ownership_key_namespace=os.getenv("TITLELEDGER_OWNERSHIP_KEY_NAMESPACE", ""),
    )
