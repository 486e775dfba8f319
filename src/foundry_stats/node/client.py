"""Async REST client for the Stardust node core and indexer APIs."""

from __future__ import annotations

import logging
from typing import Annotated, Any

import httpx
from pydantic import BaseModel, Field, StrictInt, StringConstraints, ValidationError

from foundry_stats.config import CollectorConfig
from foundry_stats.types import Feature, Output

logger = logging.getLogger(__name__)

_INFO_PATH = "/api/core/v2/info"
_FOUNDRY_IDS_PATH = "/api/indexer/v1/outputs/foundry"
_OUTPUT_PATH = "/api/core/v2/outputs/{output_id}"
_HEX_PATTERN = r"^0x([0-9a-fA-F]{2})*$"


class NodeError(RuntimeError):
    """A node could not be reached or answered with an error."""

    def __init__(self, message: str, *, node_url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.node_url = node_url
        self.status_code = status_code


class _FeatureBody(BaseModel):
    type: StrictInt
    data: Annotated[str, StringConstraints(strict=True, pattern=_HEX_PATTERN)] | None = None


class _OutputBody(BaseModel):
    type: StrictInt
    immutable_features: list[_FeatureBody] = Field(default_factory=list, alias="immutableFeatures")


class _OutputResponse(BaseModel):
    """The `{metadata, output}` envelope of the core outputs endpoint."""

    output: _OutputBody


class NodeClient:
    """Thin wrapper over `httpx.AsyncClient` bound to one node.

    Requests are issued one at a time and never retried; any failure surfaces
    as `NodeError` with the underlying httpx error chained.
    """

    def __init__(
        self,
        node_url: str,
        config: CollectorConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.node_url = node_url
        self.config = config or CollectorConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> NodeClient:
        try:
            self._client = httpx.AsyncClient(
                base_url=self.node_url,
                timeout=httpx.Timeout(self.config.timeout_seconds),
                transport=self._transport,
            )
        except (httpx.InvalidURL, ValueError) as exc:
            raise NodeError(f"Invalid node url: {exc}", node_url=self.node_url) from exc
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_info(self) -> dict[str, Any]:
        info = await self._get_json(_INFO_PATH)
        protocol = info.get("protocol") or {}
        logger.info(
            "Connected to %s (name=%s, network=%s)",
            self.node_url,
            info.get("name"),
            protocol.get("networkName"),
        )
        return info

    async def foundry_output_ids(self) -> list[str]:
        """List every foundry output id known to the indexer, following cursors."""

        ids: list[str] = []
        cursor: str | None = None
        while True:
            params: dict[str, Any] = {"pageSize": self.config.page_size}
            if cursor is not None:
                params["cursor"] = cursor
            page = await self._get_json(_FOUNDRY_IDS_PATH, params=params)
            items = page.get("items")
            if not isinstance(items, list):
                raise NodeError(
                    "Indexer response is missing 'items'", node_url=self.node_url
                )
            ids.extend(str(item) for item in items)
            cursor = page.get("cursor")
            if not cursor:
                break
        logger.info("Indexer returned %d foundry output ids from %s", len(ids), self.node_url)
        return ids

    async def get_outputs(self, output_ids: list[str]) -> list[Output]:
        outputs: list[Output] = []
        for output_id in output_ids:
            body = await self._get_json(_OUTPUT_PATH.format(output_id=output_id))
            outputs.append(self._decode_output(output_id, body))
        logger.info("Fetched %d outputs from %s", len(outputs), self.node_url)
        return outputs

    async def _get_json(
        self, path: str, *, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        if self._client is None:
            raise RuntimeError("NodeClient must be used as an async context manager")

        logger.debug("GET %s%s params=%s", self.node_url, path, params)
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NodeError(
                f"{path} returned HTTP {exc.response.status_code}: "
                f"{_error_message(exc.response)}",
                node_url=self.node_url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise NodeError(
                f"Request to {path} failed: {exc!r}", node_url=self.node_url
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise NodeError(
                f"{path} returned a non-JSON body", node_url=self.node_url
            ) from exc
        if not isinstance(payload, dict):
            raise NodeError(f"{path} returned a non-object body", node_url=self.node_url)
        return payload

    def _decode_output(self, output_id: str, body: dict[str, Any]) -> Output:
        try:
            raw = _OutputResponse.model_validate(body).output
        except ValidationError as exc:
            raise NodeError(
                f"Malformed output {output_id}: {exc}", node_url=self.node_url
            ) from exc
        features = tuple(
            Feature(
                kind=feature.type,
                data=None if feature.data is None else bytes.fromhex(feature.data[2:]),
            )
            for feature in raw.immutable_features
        )
        return Output(output_id=output_id, kind=raw.type, immutable_features=features)


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return str(payload["error"].get("message", payload["error"]))
    return str(payload)[:200]
