"""
Match Result model.

Represents the pairs selected by the matcher for a single batch.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from cowmatch.core.intent import SwapIntent

# intent_id -> ids of the intents it may be paired with
CompatibilityGraph = Dict[int, Set[int]]

# intent_id -> {compatible intent_id -> score}
WeightedMatchGraph = Dict[int, Dict[int, int]]


@dataclass(frozen=True)
class MatchedPair:
    """
    Two opposite intents settled directly against each other.

    Attributes:
        first: The intent that claimed the pair
        second: Its highest scoring available partner
        weight: Score of the pairing
    """

    first: SwapIntent
    second: SwapIntent
    weight: int

    @property
    def ids(self) -> Tuple[int, int]:
        return (self.first.intent_id, self.second.intent_id)


@dataclass
class MatchResult:
    """
    Outcome of matching one batch of intents.

    Attributes:
        pairs: Disjoint matched pairs, in selection order
        unmatched: Intents left for fallback routing, in input order
    """

    pairs: List[MatchedPair] = field(default_factory=list)
    unmatched: List[SwapIntent] = field(default_factory=list)

    @property
    def total_weight(self) -> int:
        """Sum of the scores of all matched pairs."""
        return sum(p.weight for p in self.pairs)

    @property
    def matched_count(self) -> int:
        """Number of intents that were matched."""
        return 2 * len(self.pairs)

    @property
    def is_empty(self) -> bool:
        """Check if no pair was matched."""
        return len(self.pairs) == 0

    def flatten(self) -> List[SwapIntent]:
        """
        Return matched intents as consecutive pairs.

        Returns:
            [a1, b1, a2, b2, ...], always of even length
        """
        intents: List[SwapIntent] = []
        for pair in self.pairs:
            intents.extend((pair.first, pair.second))
        return intents

    def intent_ids(self) -> List[int]:
        """Get the ids of all matched intents in result order."""
        return [intent.intent_id for intent in self.flatten()]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "pair_count": len(self.pairs),
            "total_weight": str(self.total_weight),
            "pairs": [
                {"ids": list(p.ids), "weight": str(p.weight)}
                for p in self.pairs
            ],
            "unmatched_ids": [i.intent_id for i in self.unmatched],
        }

    def __repr__(self) -> str:
        return f"MatchResult(pairs={len(self.pairs)}, unmatched={len(self.unmatched)})"
