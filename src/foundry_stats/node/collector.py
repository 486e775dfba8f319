"""Collects and classifies every foundry output of one node."""

from __future__ import annotations

import logging

import httpx

from foundry_stats.config import CollectorConfig
from foundry_stats.metadata.classifier import classify_output
from foundry_stats.node.client import NodeClient
from foundry_stats.types import FoundryMetadata, NodeSnapshot, OutputKind

logger = logging.getLogger(__name__)


class UnexpectedOutputError(AssertionError):
    """The node returned a non-foundry output for a foundry id."""


class FoundryCollector:
    """Fetches foundry outputs from a node and turns them into a snapshot.

    The node is trusted to return only foundries for foundry ids; anything
    else raises `UnexpectedOutputError` and is not meant to be caught.
    """

    def __init__(
        self,
        config: CollectorConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or CollectorConfig()
        self._transport = transport

    async def collect(self, node_url: str) -> NodeSnapshot:
        async with NodeClient(node_url, self.config, transport=self._transport) as client:
            await client.get_info()
            output_ids = await client.foundry_output_ids()
            outputs = await client.get_outputs(output_ids)

        foundries: list[FoundryMetadata] = []
        for output in outputs:
            if output.kind != OutputKind.FOUNDRY:
                raise UnexpectedOutputError(
                    "The output should always be a foundry: "
                    f"{output.output_id} has type {output.kind}"
                )
            foundries.append(classify_output(output))

        logger.info("Classified %d foundries from %s", len(foundries), node_url)
        return NodeSnapshot(node_url=node_url, foundries=tuple(foundries))


async def collect(node_url: str, config: CollectorConfig | None = None) -> NodeSnapshot:
    return await FoundryCollector(config).collect(node_url)
