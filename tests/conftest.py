import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

IRC27_DOCUMENT: dict[str, Any] = {
    "standard": "IRC27",
    "version": "v1.0",
    "type": "image/png",
    "uri": "https://nft.example.com/assets/shimmer-dragon.png",
    "name": "Shimmer Dragon",
    "collectionName": "Dragons",
    "issuerName": "Dragon Works",
    "royalties": {"smr1qpz8z7dmyv8y8wx9zyv6x0c3m0gmsyxx4dlvgxrjswmnv9zmd0ucg7qexlg": 0.025},
    "attributes": [{"trait_type": "Element", "value": "Fire"}],
}

IRC30_DOCUMENT: dict[str, Any] = {
    "standard": "IRC30",
    "name": "Dragon Coin",
    "description": "Fungible token for the dragon collection.",
    "symbol": "DRGN",
    "decimals": 6,
    "url": "https://dragon.example.com",
    "logoUrl": "https://dragon.example.com/logo.svg",
}


def _output_id(index: int) -> str:
    return "0x" + f"{index:064x}" + "0000"


def _foundry_body(metadata: bytes | None, output_type: int = 5) -> dict[str, Any]:
    immutable_features: list[dict[str, Any]] = [
        {"type": 1, "address": {"type": 8, "aliasId": "0x" + "11" * 32}}
    ]
    if metadata is not None:
        immutable_features.append({"type": 2, "data": "0x" + metadata.hex()})
    return {
        "metadata": {"blockId": "0x" + "22" * 32, "isSpent": False},
        "output": {
            "type": output_type,
            "amount": "57600",
            "serialNumber": 1,
            "tokenScheme": {
                "type": 0,
                "mintedTokens": "0x3e8",
                "meltedTokens": "0x0",
                "maximumSupply": "0x3e8",
            },
            "unlockConditions": [
                {"type": 6, "address": {"type": 8, "aliasId": "0x" + "11" * 32}}
            ],
            "immutableFeatures": immutable_features,
        },
    }


class FakeNode:
    """In-process Stardust node serving info, paged foundry ids and outputs."""

    def __init__(self, bodies: list[dict[str, Any]], *, page_size: int = 2) -> None:
        self.bodies = {_output_id(index): body for index, body in enumerate(bodies)}
        self.page_size = page_size
        self.requests: list[httpx.Request] = []
        self.failures: dict[str, httpx.Response] = {}

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def fail(self, path: str, status_code: int, message: str = "internal error") -> None:
        self.failures[path] = httpx.Response(
            status_code, json={"error": {"code": str(status_code), "message": message}}
        )

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.failures:
            return self.failures[path]

        if path == "/api/core/v2/info":
            return httpx.Response(
                200,
                json={"name": "HORNET", "version": "2.0.1", "protocol": {"networkName": "testnet"}},
            )

        if path == "/api/indexer/v1/outputs/foundry":
            ids = list(self.bodies)
            start = int(request.url.params.get("cursor", "0"))
            end = start + self.page_size
            page: dict[str, Any] = {"ledgerIndex": 100, "items": ids[start:end]}
            if end < len(ids):
                page["cursor"] = str(end)
            return httpx.Response(200, json=page)

        prefix = "/api/core/v2/outputs/"
        if path.startswith(prefix):
            body = self.bodies.get(path[len(prefix):])
            if body is None:
                return httpx.Response(404, json={"error": {"code": "404", "message": "output not found"}})
            return httpx.Response(200, content=json.dumps(body).encode("utf-8"))

        return httpx.Response(404, json={"error": {"code": "404", "message": "not found"}})


@pytest.fixture
def foundry_body() -> Callable[..., dict[str, Any]]:
    return _foundry_body


@pytest.fixture
def fake_node() -> Callable[..., FakeNode]:
    return FakeNode


@pytest.fixture
def irc27_payload() -> bytes:
    return json.dumps(IRC27_DOCUMENT).encode("utf-8")


@pytest.fixture
def irc30_payload() -> bytes:
    return json.dumps(IRC30_DOCUMENT).encode("utf-8")
