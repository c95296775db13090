"""
Matching Engine module.

Contains the compatibility resolver, the pair weight estimators
and the greedy matcher.
"""

from cowmatch.engine.compatibility import are_compatible, build_compatibility_graph
from cowmatch.engine.matcher import CowMatcher, greedy_pairs, match
from cowmatch.engine.weights import (
    PoolOutputWeightEstimator,
    WeightEstimator,
    build_weighted_graph,
)

__all__ = [
    "are_compatible",
    "build_compatibility_graph",
    "CowMatcher",
    "greedy_pairs",
    "match",
    "PoolOutputWeightEstimator",
    "WeightEstimator",
    "build_weighted_graph",
]
