"""Command-line entrypoint: summarize foundry metadata on the default nodes."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from dataclasses import asdict

from foundry_stats.config import DEFAULT_NODES, NodeConfig
from foundry_stats.node.client import NodeError
from foundry_stats.node.collector import FoundryCollector
from foundry_stats.stats.aggregator import summarize
from foundry_stats.types import Summary

logger = logging.getLogger(__name__)


async def collect_summaries(
    collector: FoundryCollector, nodes: tuple[NodeConfig, ...] = DEFAULT_NODES
) -> list[Summary]:
    """Collect nodes strictly one after another; the first failure aborts."""

    summaries: list[Summary] = []
    for node in nodes:
        snapshot = await collector.collect(node.url)
        summaries.append(summarize(snapshot))
    return summaries


def main(collector: FoundryCollector | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        summaries = asyncio.run(collect_summaries(collector or FoundryCollector()))
    except NodeError as exc:
        logger.error("Collection from %s failed: %s", exc.node_url, exc)
        return 1

    for summary in summaries:
        print(json.dumps(asdict(summary), indent=2))
    return 0
