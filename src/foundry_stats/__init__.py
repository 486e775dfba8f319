"""Foundry metadata statistics for Stardust ledger nodes."""

from .config import DEFAULT_NODES, CollectorConfig, NodeConfig

__all__ = ["CollectorConfig", "DEFAULT_NODES", "NodeConfig"]
