"""
Core matcher components.

This module contains the data types shared by the matching engine:
swap intents, their venue keys, and match results.
"""

from cowmatch.core.intent import (
    AssetPairKey,
    InvalidIntent,
    SwapIntent,
    validate_batch,
    validate_intent,
)
from cowmatch.core.result import (
    CompatibilityGraph,
    MatchedPair,
    MatchResult,
    WeightedMatchGraph,
)

__all__ = [
    "AssetPairKey",
    "InvalidIntent",
    "SwapIntent",
    "validate_batch",
    "validate_intent",
    "CompatibilityGraph",
    "MatchedPair",
    "MatchResult",
    "WeightedMatchGraph",
]
