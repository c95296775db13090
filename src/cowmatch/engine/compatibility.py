"""
Compatibility Resolver - decides which intents can be netted together.

Two intents are compatible when they trade in opposite directions on the
same token pair. Resolution compares every ordered pair of the batch, so
its cost grows quadratically with batch size.
"""

from typing import Sequence

import structlog

from cowmatch.core.intent import SwapIntent
from cowmatch.core.result import CompatibilityGraph

logger = structlog.get_logger(__name__)


def are_compatible(
    intent1: SwapIntent,
    intent2: SwapIntent,
    match_fee_tier: bool = False,
) -> bool:
    """
    Check whether two intents could be settled against each other.

    Args:
        intent1: First intent
        intent2: Second intent
        match_fee_tier: Also require equal fee tiers

    Returns:
        True if the intents are compatible
    """
    # Same side can never net
    if intent1.direction == intent2.direction:
        return False

    if not intent1.venue_key.same_token_pair(intent2.venue_key):
        return False

    if match_fee_tier and intent1.venue_key.fee != intent2.venue_key.fee:
        return False

    return True


def build_compatibility_graph(
    intents: Sequence[SwapIntent],
    match_fee_tier: bool = False,
) -> CompatibilityGraph:
    """
    Build the compatibility relation of a batch.

    Every intent gets an entry, isolated intents map to an empty set.

    Args:
        intents: Validated intents with unique ids
        match_fee_tier: Also require equal fee tiers

    Returns:
        Mapping of intent_id to the ids it may be paired with
    """
    graph: CompatibilityGraph = {}

    for i, intent in enumerate(intents):
        compatible = set()
        for j, other in enumerate(intents):
            if i != j and are_compatible(intent, other, match_fee_tier):
                compatible.add(other.intent_id)
        graph[intent.intent_id] = compatible

    logger.debug(
        "compatibility_graph_built",
        intent_count=len(intents),
        edge_count=sum(len(v) for v in graph.values()) // 2,
    )
    return graph


def is_symmetric(graph: CompatibilityGraph) -> bool:
    """Check that every edge of the graph is present in both directions."""
    for intent_id, neighbours in graph.items():
        for other_id in neighbours:
            if intent_id not in graph.get(other_id, ()):
                return False
    return True
