"""
Weight Estimator - scores compatible intent pairs.

Implements pluggable estimators for the benefit of pairing two intents.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from cowmatch.core.intent import SwapIntent
from cowmatch.core.result import CompatibilityGraph, WeightedMatchGraph


class WeightEstimator(ABC):
    """
    Abstract base class for pair scoring.

    Implementations must be commutative and return exact integers.
    Higher scores are preferred by the matcher.
    """

    @abstractmethod
    def score(self, intent1: SwapIntent, intent2: SwapIntent) -> int:
        """
        Score the pairing of two compatible intents.

        Args:
            intent1: First intent
            intent2: Second intent

        Returns:
            Non-negative score
        """
        pass


class PoolOutputWeightEstimator(WeightEstimator):
    """
    Scores a pair by the sum of both intents' pool output estimates.

    A missing estimate counts as zero. This is a simple placeholder model:
    it ignores trade sizes, price-limit feasibility and the volume that can
    actually be netted. A match is all-or-nothing for both intents.
    """

    def score(self, intent1: SwapIntent, intent2: SwapIntent) -> int:
        return intent1.pool_output_or_zero + intent2.pool_output_or_zero


def build_weighted_graph(
    intents: Sequence[SwapIntent],
    graph: CompatibilityGraph,
    estimator: Optional[WeightEstimator] = None,
) -> WeightedMatchGraph:
    """
    Score every edge of a compatibility graph.

    Args:
        intents: The intents the graph was built from
        graph: Compatibility graph keyed by intent_id
        estimator: Scoring model (defaults to PoolOutputWeightEstimator)

    Returns:
        Mapping of intent_id to {compatible intent_id: score}
    """
    estimator = estimator or PoolOutputWeightEstimator()
    by_id: Dict[int, SwapIntent] = {intent.intent_id: intent for intent in intents}

    weighted: WeightedMatchGraph = {}
    for intent_id, compatible_ids in graph.items():
        current = by_id[intent_id]
        weighted[intent_id] = {
            other_id: estimator.score(current, by_id[other_id])
            for other_id in compatible_ids
        }
    return weighted
