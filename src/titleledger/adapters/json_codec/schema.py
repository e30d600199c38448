"""Pydantic models describing the JSON wire shape of ledger records."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LedgerBaseModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        strict=True,
        allow_inf_nan=False,
    )


class StakePayload(LedgerBaseModel):
    id: str
    percent: float = Field(default=0.0, validation_alias=AliasChoices("percent", "percentage"))
    sale_date: str | None = Field(default=None, alias="saleDate")
    name: str | None = None


class PropertyPayload(LedgerBaseModel):
    txid: str = ""
    id: str = ""
    sale_date: str = Field(default="", alias="saleDate")
    sale_price: float = Field(default=0.0, alias="salePrice")
    owners: list[StakePayload] = Field(default_factory=list["StakePayload"])


class OwnershipPayload(LedgerBaseModel):
    properties: list[StakePayload] = Field(default_factory=list["StakePayload"])
