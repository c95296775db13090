"""
CoW Matcher - pairs opposite intents for direct settlement.

Selects disjoint pairs from the scored compatibility graph with a greedy
heuristic. The result approximates a maximum-weight matching; it is not an
optimal assignment and may leave weight on the table that an augmenting
path solver would recover.
"""

from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from cowmatch.config import MatcherConfig, get_config
from cowmatch.core.intent import SwapIntent, validate_batch
from cowmatch.core.result import MatchedPair, MatchResult, WeightedMatchGraph
from cowmatch.engine.compatibility import build_compatibility_graph
from cowmatch.engine.weights import (
    PoolOutputWeightEstimator,
    WeightEstimator,
    build_weighted_graph,
)

logger = structlog.get_logger(__name__)


def best_available_score(weights: Dict[int, int]) -> Optional[int]:
    """Get the highest edge weight of a node, None if it has no edges."""
    if not weights:
        return None
    return max(weights.values())


def greedy_pairs(weighted_graph: WeightedMatchGraph) -> List[Tuple[int, int, int]]:
    """
    Greedily select disjoint pairs from a weighted graph.

    Nodes are visited by best available score, highest first. Each
    unmatched node takes its highest scoring unmatched neighbour. Ties are
    broken by ascending intent_id, both when ordering nodes and when
    choosing a neighbour, so the outcome is deterministic.

    Scores are compared as exact integers.

    Args:
        weighted_graph: Mapping of intent_id to {neighbour id: score}

    Returns:
        List of (intent_id, partner_id, score) in selection order
    """
    best_scores = {}
    for intent_id, weights in weighted_graph.items():
        best = best_available_score(weights)
        if best is not None:
            best_scores[intent_id] = best

    order = sorted(best_scores, key=lambda i: (-best_scores[i], i))

    matched = set()
    pairs: List[Tuple[int, int, int]] = []

    for intent_id in order:
        if intent_id in matched:
            continue

        candidates = [
            (other_id, weight)
            for other_id, weight in weighted_graph[intent_id].items()
            if other_id not in matched and other_id != intent_id
        ]
        if not candidates:
            continue

        partner_id, weight = min(candidates, key=lambda c: (-c[1], c[0]))

        matched.add(intent_id)
        matched.add(partner_id)
        pairs.append((intent_id, partner_id, weight))

    return pairs


class CowMatcher:
    """
    Main matcher class that runs one matching pass over a batch.

    Resolution, scoring and selection are rebuilt from scratch on every
    call; the matcher holds no state between batches.
    """

    def __init__(
        self,
        config: Optional[MatcherConfig] = None,
        estimator: Optional[WeightEstimator] = None,
        match_fee_tier: Optional[bool] = None,
    ):
        """
        Initialize the matcher.

        Args:
            config: Matcher configuration
            estimator: Pair scoring model (defaults to pool output sum)
            match_fee_tier: Override config.match_fee_tier
        """
        self.config = config or get_config()
        self.estimator = estimator or PoolOutputWeightEstimator()
        self.match_fee_tier = (
            self.config.match_fee_tier if match_fee_tier is None else match_fee_tier
        )

    def run(self, intents: Iterable[SwapIntent]) -> MatchResult:
        """
        Match a batch of intents.

        Args:
            intents: Intents of the batch, ids unique

        Returns:
            MatchResult with the selected pairs and the unmatched intents

        Raises:
            InvalidIntent: If any intent is malformed; nothing is matched
        """
        # Producers may keep appending to the caller's list
        snapshot: Tuple[SwapIntent, ...] = tuple(intents)
        validate_batch(snapshot)

        if len(snapshot) > self.config.batch_size_warning:
            logger.warning(
                "large_batch",
                intent_count=len(snapshot),
                threshold=self.config.batch_size_warning,
            )

        logger.debug(
            "matching_started",
            intent_count=len(snapshot),
            estimator=type(self.estimator).__name__,
            match_fee_tier=self.match_fee_tier,
        )

        compatibility = build_compatibility_graph(snapshot, self.match_fee_tier)
        weighted = build_weighted_graph(snapshot, compatibility, self.estimator)
        selected = greedy_pairs(weighted)

        by_id = {intent.intent_id: intent for intent in snapshot}
        result = MatchResult(
            pairs=[
                MatchedPair(first=by_id[a], second=by_id[b], weight=w)
                for a, b, w in selected
            ]
        )
        matched_ids = set(result.intent_ids())
        result.unmatched = [i for i in snapshot if i.intent_id not in matched_ids]

        logger.info(
            "matching_completed",
            intent_count=len(snapshot),
            pair_count=len(result.pairs),
            unmatched_count=len(result.unmatched),
            total_weight=str(result.total_weight),
        )
        return result


def match(intents: Iterable[SwapIntent]) -> List[SwapIntent]:
    """
    Match a batch of intents and return the pairs flattened.

    Runs with the default settings, ignoring COWMATCH_ environment
    variables and .env files. Use CowMatcher for configured matching.

    Args:
        intents: Intents of the batch, ids unique

    Returns:
        [a1, b1, a2, b2, ...]; intents absent from it go to fallback routing

    Raises:
        InvalidIntent: If any intent is malformed
    """
    # model_construct skips settings sources and keeps field defaults
    return CowMatcher(config=MatcherConfig.model_construct()).run(intents).flatten()
