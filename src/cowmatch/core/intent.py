"""
Swap Intent model.

Represents a single pending swap request submitted for CoW matching.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Union


class InvalidIntent(ValueError):
    """Raised when an intent record is missing a field or is malformed."""

    def __init__(self, message: str, intent_id: Optional[int] = None, field: Optional[str] = None):
        super().__init__(message)
        self.intent_id = intent_id
        self.field = field


@dataclass(frozen=True)
class AssetPairKey:
    """
    Identifies a trading venue by its token pair and fee tier.

    Attributes:
        token_a: Address of the first token of the pair
        token_b: Address of the second token of the pair
        fee: Fee tier of the venue (e.g. 3000 for 0.3%)
    """

    token_a: str
    token_b: str
    fee: int = 0

    def same_token_pair(self, other: "AssetPairKey") -> bool:
        """Check whether both keys refer to the same token pair."""
        return self.token_a == other.token_a and self.token_b == other.token_b

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssetPairKey":
        """Create a key from a producer payload."""
        try:
            token_a = data.get("token_a", data.get("token0"))
            token_b = data.get("token_b", data.get("token1"))
            fee = data.get("fee", 0)
        except AttributeError:
            raise InvalidIntent("venue key must be a mapping", field="venue_key")
        try:
            fee = parse_int(fee)
        except ValueError as e:
            raise InvalidIntent(f"malformed fee tier: {e}", field="venue_key") from e
        return cls(token_a=token_a, token_b=token_b, fee=fee if fee is not None else 0)

    def to_dict(self) -> dict:
        return {"token_a": self.token_a, "token_b": self.token_b, "fee": self.fee}


# Producer payloads use camelCase keys
_PAYLOAD_ALIASES = {
    "direction": "zeroForOne",
    "amount_specified": "amountSpecified",
    "price_limit": "sqrtPriceLimitX96",
    "originator": "sender",
    "venue_id": "poolId",
    "venue_key": "poolKey",
    "created_at_block": "taskCreatedBlock",
    "intent_id": "taskId",
    "estimated_pool_output": "poolOutputAmount",
    "estimated_pool_input": "poolInputAmount",
}

_REQUIRED_KEYS = ("direction", "amount_specified", "venue_key", "intent_id")


def parse_int(value: Union[int, str, None]) -> Optional[int]:
    """
    Parse an arbitrary-precision integer from a payload value.

    Accepts ints, decimal strings and 0x-prefixed hex strings.
    Floats are rejected since they cannot carry exact token amounts.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith(("0x", "-0x")):
            return int(text, 16)
        return int(text, 10)
    raise ValueError(f"expected an integer, got {type(value).__name__}")


@dataclass(frozen=True)
class SwapIntent:
    """
    A swap request waiting to be matched against an opposite intent.

    Intents are immutable inputs to the matching engine. The engine only
    selects and reorders them.

    Attributes:
        direction: True to sell token_a for token_b, False for the reverse
        amount_specified: Positive for exact-input, negative for exact-output
        price_limit: Bound on the acceptable execution price
        originator: Account that submitted the intent
        venue_id: Identifier of the pool instance
        venue_key: Token pair and fee tier of the venue
        created_at_block: Block height at which the intent was created
        intent_id: Identifier, unique within a batch
        estimated_pool_output: Amount received if routed through the pool
        estimated_pool_input: Amount paid if routed through the pool
    """

    direction: bool
    amount_specified: int
    price_limit: int
    originator: str
    venue_id: str
    venue_key: AssetPairKey
    created_at_block: int
    intent_id: int
    estimated_pool_output: Optional[int] = None
    estimated_pool_input: Optional[int] = None

    @property
    def is_exact_input(self) -> bool:
        """Whether the specified amount is the exact amount paid in."""
        return self.amount_specified > 0

    @property
    def pool_output_or_zero(self) -> int:
        """Pool output estimate, zero when not computed yet."""
        return self.estimated_pool_output or 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SwapIntent":
        """
        Create a SwapIntent from a producer payload.

        Both snake_case and the producer's camelCase keys are accepted.
        Integer amounts may be passed as decimal or hex strings.

        Args:
            data: Mapping describing the intent

        Returns:
            New SwapIntent instance

        Raises:
            InvalidIntent: If a required key is missing or an amount is malformed
        """
        values: Dict[str, Any] = {}
        for name, alias in _PAYLOAD_ALIASES.items():
            if name in data:
                values[name] = data[name]
            elif alias in data:
                values[name] = data[alias]

        raw_id = values.get("intent_id")
        for name in _REQUIRED_KEYS:
            if values.get(name) is None:
                raise InvalidIntent(f"missing required field '{name}'", intent_id=raw_id, field=name)

        venue_key = values["venue_key"]
        if not isinstance(venue_key, AssetPairKey):
            try:
                venue_key = AssetPairKey.from_dict(venue_key)
            except InvalidIntent as e:
                raise InvalidIntent(str(e), intent_id=raw_id, field="venue_key") from e

        parsed = {}
        for name in (
            "amount_specified",
            "price_limit",
            "created_at_block",
            "intent_id",
            "estimated_pool_output",
            "estimated_pool_input",
        ):
            try:
                parsed[name] = parse_int(values.get(name))
            except ValueError as e:
                raise InvalidIntent(f"malformed {name}: {e}", intent_id=raw_id, field=name) from e

        return cls(
            direction=values["direction"],
            amount_specified=parsed["amount_specified"],
            price_limit=parsed["price_limit"] if parsed["price_limit"] is not None else 0,
            originator=values.get("originator", ""),
            venue_id=values.get("venue_id", ""),
            venue_key=venue_key,
            created_at_block=parsed["created_at_block"] or 0,
            intent_id=parsed["intent_id"],
            estimated_pool_output=parsed["estimated_pool_output"],
            estimated_pool_input=parsed["estimated_pool_input"],
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "intent_id": self.intent_id,
            "direction": self.direction,
            "amount_specified": str(self.amount_specified),
            "price_limit": str(self.price_limit),
            "originator": self.originator,
            "venue_id": self.venue_id,
            "venue_key": self.venue_key.to_dict(),
            "created_at_block": self.created_at_block,
            "estimated_pool_output": _optional_str(self.estimated_pool_output),
            "estimated_pool_input": _optional_str(self.estimated_pool_input),
        }


def _optional_str(value: Optional[int]) -> Optional[str]:
    return str(value) if value is not None else None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_intent(intent: SwapIntent) -> None:
    """
    Check that an intent is well formed.

    Args:
        intent: The intent to check

    Raises:
        InvalidIntent: If a required field is missing or an amount is malformed
    """
    intent_id = getattr(intent, "intent_id", None)

    if not _is_int(intent_id):
        raise InvalidIntent("intent_id must be an integer", intent_id=None, field="intent_id")

    if not isinstance(getattr(intent, "direction", None), bool):
        raise InvalidIntent("direction must be a boolean", intent_id=intent_id, field="direction")

    venue_key = getattr(intent, "venue_key", None)
    if not isinstance(venue_key, AssetPairKey):
        raise InvalidIntent("venue_key must be an AssetPairKey", intent_id=intent_id, field="venue_key")
    if not venue_key.token_a or not venue_key.token_b:
        raise InvalidIntent("venue_key is missing a token address", intent_id=intent_id, field="venue_key")
    if not _is_int(venue_key.fee) or venue_key.fee < 0:
        raise InvalidIntent(
            "venue_key fee must be a non-negative integer", intent_id=intent_id, field="venue_key"
        )

    for name in ("amount_specified", "price_limit", "created_at_block"):
        if not _is_int(getattr(intent, name, None)):
            raise InvalidIntent(f"{name} must be an integer", intent_id=intent_id, field=name)

    if intent.price_limit < 0:
        raise InvalidIntent("price_limit must not be negative", intent_id=intent_id, field="price_limit")
    if intent.created_at_block < 0:
        raise InvalidIntent(
            "created_at_block must not be negative", intent_id=intent_id, field="created_at_block"
        )

    for name in ("estimated_pool_output", "estimated_pool_input"):
        value = getattr(intent, name, None)
        if value is None:
            continue
        if not _is_int(value) or value < 0:
            raise InvalidIntent(f"{name} must be a non-negative integer", intent_id=intent_id, field=name)


def validate_batch(intents: Iterable[SwapIntent]) -> None:
    """
    Validate every intent of a batch and reject duplicate ids.

    Raises:
        InvalidIntent: On the first malformed intent or repeated intent_id
    """
    seen = set()
    for intent in intents:
        validate_intent(intent)
        if intent.intent_id in seen:
            raise InvalidIntent(
                f"duplicate intent_id {intent.intent_id} in batch",
                intent_id=intent.intent_id,
                field="intent_id",
            )
        seen.add(intent.intent_id)
