"""FastAPI entrypoint serving live foundry summaries for the default nodes."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, HTTPException

from foundry_stats.config import DEFAULT_NODES, NodeConfig
from foundry_stats.node.client import NodeError
from foundry_stats.node.collector import FoundryCollector
from foundry_stats.stats.aggregator import summarize


def create_app(
    collector: FoundryCollector | None = None,
    nodes: tuple[NodeConfig, ...] = DEFAULT_NODES,
) -> FastAPI:
    app = FastAPI(title="Foundry Stats", version="0.1.0")
    _collector = collector or FoundryCollector()
    _nodes = {node.name: node for node in nodes}

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {"status": "ok", "node_count": len(_nodes)}

    @app.get("/nodes")
    def list_nodes() -> dict[str, Any]:
        return {"items": [node.model_dump() for node in _nodes.values()]}

    @app.get("/nodes/{name}/summary")
    async def node_summary(name: str) -> dict[str, Any]:
        node = _nodes.get(name)
        if node is None:
            raise HTTPException(status_code=404, detail=f"Unknown node: {name}")
        try:
            snapshot = await _collector.collect(node.url)
        except NodeError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return asdict(summarize(snapshot))

    return app


app = create_app()
