"""Metadata extraction and IRC27/IRC30 classification."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from foundry_stats.metadata.schemas import Irc27Metadata, Irc30Metadata
from foundry_stats.types import (
    Absent,
    DecodeError,
    EncodingFailure,
    FeatureKind,
    FoundryMetadata,
    Irc27Match,
    Irc30Match,
    Output,
    ParseFailure,
    SchemaError,
    SchemaIssue,
)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def extract(output: Output) -> bytes | None:
    """Return the payload of the first metadata feature, in source order."""

    for feature in output.immutable_features:
        if feature.kind == FeatureKind.METADATA:
            return feature.data if feature.data is not None else b""
    return None


def classify(payload: bytes) -> FoundryMetadata:
    """Classify a raw metadata payload.

    IRC27 is always attempted first, so a document valid under both standards
    is reported as IRC27. Decode and parse failures are returned, never raised.
    """

    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        return EncodingFailure(payload=bytes(payload), error=DecodeError.from_exception(exc))

    irc27 = _validate(Irc27Metadata, text, schema="IRC27")
    if not isinstance(irc27, SchemaError):
        return Irc27Match(metadata=irc27)

    irc30 = _validate(Irc30Metadata, text, schema="IRC30")
    if not isinstance(irc30, SchemaError):
        return Irc30Match(metadata=irc30)

    return ParseFailure(text=text, irc27_error=irc27, irc30_error=irc30)


def classify_output(output: Output) -> FoundryMetadata:
    payload = extract(output)
    if payload is None:
        return Absent()
    return classify(payload)


def _validate(
    model: type[_ModelT], text: str, *, schema: str
) -> _ModelT | SchemaError:
    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        issues = tuple(
            SchemaIssue(
                location=tuple(error["loc"]),
                message=error["msg"],
                kind=error["type"],
            )
            for error in exc.errors(include_url=False)
        )
        return SchemaError(schema=schema, issues=issues)
