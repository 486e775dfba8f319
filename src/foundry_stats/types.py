"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from foundry_stats.metadata.schemas import Irc27Metadata, Irc30Metadata


class OutputKind(IntEnum):
    """Stardust output type tags."""

    BASIC = 3
    ALIAS = 4
    FOUNDRY = 5
    NFT = 6


class FeatureKind(IntEnum):
    """Stardust feature type tags."""

    SENDER = 0
    ISSUER = 1
    METADATA = 2
    TAG = 3


@dataclass(frozen=True, slots=True)
class Feature:
    """A decoded output feature; `data` is only set for byte-carrying kinds."""

    kind: int
    data: bytes | None = None


@dataclass(frozen=True, slots=True)
class Output:
    """An output as returned by the node, reduced to what classification needs."""

    output_id: str
    kind: int
    immutable_features: tuple[Feature, ...] = ()


@dataclass(frozen=True, slots=True)
class DecodeError:
    """Where and why a payload stopped being valid UTF-8."""

    start: int
    end: int
    reason: str

    @classmethod
    def from_exception(cls, exc: UnicodeDecodeError) -> DecodeError:
        return cls(start=exc.start, end=exc.end, reason=exc.reason)


@dataclass(frozen=True, slots=True)
class SchemaIssue:
    location: tuple[str | int, ...]
    message: str
    kind: str


@dataclass(frozen=True, slots=True)
class SchemaError:
    """All validation issues raised when parsing text against one schema."""

    schema: str
    issues: tuple[SchemaIssue, ...]


@dataclass(frozen=True, slots=True)
class Absent:
    """The output carries no metadata feature."""


@dataclass(frozen=True, slots=True)
class Irc27Match:
    metadata: Irc27Metadata


@dataclass(frozen=True, slots=True)
class Irc30Match:
    metadata: Irc30Metadata


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Valid UTF-8 that matches neither metadata standard."""

    text: str
    irc27_error: SchemaError
    irc30_error: SchemaError


@dataclass(frozen=True, slots=True)
class EncodingFailure:
    """A payload that is not UTF-8 text at all."""

    payload: bytes
    error: DecodeError


FoundryMetadata = Union[Absent, Irc27Match, Irc30Match, ParseFailure, EncodingFailure]


@dataclass(frozen=True, slots=True)
class NodeSnapshot:
    """Classified metadata of every foundry a node returned in one collection."""

    node_url: str
    foundries: tuple[FoundryMetadata, ...]


@dataclass(frozen=True, slots=True)
class Summary:
    node_url: str
    total: int
    with_metadata: int
    without_metadata: int
    irc27: int
    irc30: int
    encoding_failure: int
    parse_failure: int
