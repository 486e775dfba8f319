"""Reduces a node snapshot to summary counts."""

from __future__ import annotations

from foundry_stats.types import (
    Absent,
    EncodingFailure,
    Irc27Match,
    Irc30Match,
    NodeSnapshot,
    ParseFailure,
    Summary,
)


def summarize(snapshot: NodeSnapshot) -> Summary:
    foundries = snapshot.foundries
    total = len(foundries)
    with_metadata = sum(1 for item in foundries if not isinstance(item, Absent))

    return Summary(
        node_url=snapshot.node_url,
        total=total,
        with_metadata=with_metadata,
        # Derived, never recounted, so the split always adds up to total.
        without_metadata=total - with_metadata,
        irc27=sum(1 for item in foundries if isinstance(item, Irc27Match)),
        irc30=sum(1 for item in foundries if isinstance(item, Irc30Match)),
        encoding_failure=sum(1 for item in foundries if isinstance(item, EncodingFailure)),
        parse_failure=sum(1 for item in foundries if isinstance(item, ParseFailure)),
    )
