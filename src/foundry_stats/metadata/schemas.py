"""Pydantic models for the IRC27 and IRC30 metadata standards."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AnyUrl, BaseModel, ConfigDict, Field

_MIME_TYPE_PATTERN = r"^[\w.+-]+/[\w.+-]+(\s*;\s*[\w.+-]+=[^;]+)*$"


class Irc27Attribute(BaseModel):
    """One `{trait_type, value}` entry of an IRC27 document."""

    model_config = ConfigDict(strict=True)

    trait_type: str
    value: Any


class Irc27Metadata(BaseModel):
    """NFT-style asset metadata (IRC27 v1.0).

    Unknown keys are ignored. Known keys are only accepted under their JSON
    names and values are never coerced across types.
    """

    model_config = ConfigDict(strict=True)

    standard: Literal["IRC27"]
    version: Literal["v1.0"]
    media_type: str = Field(alias="type", pattern=_MIME_TYPE_PATTERN)
    uri: AnyUrl
    name: str
    collection_name: str | None = Field(default=None, alias="collectionName")
    royalties: dict[str, float] = Field(default_factory=dict)
    issuer_name: str | None = Field(default=None, alias="issuerName")
    description: str | None = None
    attributes: list[Irc27Attribute] = Field(default_factory=list)


class Irc30Metadata(BaseModel):
    """Fungible-token metadata (IRC30)."""

    model_config = ConfigDict(strict=True)

    standard: Literal["IRC30"]
    name: str
    symbol: str
    decimals: int = Field(ge=0, le=2**32 - 1)
    description: str | None = None
    url: AnyUrl | None = None
    logo_url: AnyUrl | None = Field(default=None, alias="logoUrl")
    logo: str | None = None
