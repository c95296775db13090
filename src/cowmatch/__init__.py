"""
CoW Intent Matcher

Matches opposite swap intents on the same asset pair so they can be settled
peer-to-peer instead of being routed through an external liquidity pool.
"""

__version__ = "0.1.0"

from cowmatch.core.intent import AssetPairKey, InvalidIntent, SwapIntent
from cowmatch.core.result import MatchedPair, MatchResult
from cowmatch.engine.matcher import CowMatcher, match

__all__ = [
    "AssetPairKey",
    "InvalidIntent",
    "SwapIntent",
    "MatchedPair",
    "MatchResult",
    "CowMatcher",
    "match",
]
