"""Configuration models for foundry collection."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CollectorConfig(BaseModel):
    """Configures node client timeouts and indexer paging."""

    timeout_seconds: float = Field(default=30.0, gt=0.0)
    page_size: int = Field(default=1000, ge=1)


class NodeConfig(BaseModel):
    """A named node endpoint."""

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)


DEFAULT_NODES: tuple[NodeConfig, ...] = (
    NodeConfig(name="mainnet", url="https://api.stardust-mainnet.iotaledger.net"),
    NodeConfig(name="shimmer", url="https://api.shimmer.network"),
)
