"""
Test suite for intent parsing and validation.

Malformed intents must fail the whole batch before any matching happens.
"""

import dataclasses

import pytest

from cowmatch.core.intent import (
    AssetPairKey,
    InvalidIntent,
    SwapIntent,
    parse_int,
    validate_batch,
    validate_intent,
)
from cowmatch.engine.matcher import CowMatcher, match

from helpers import BUY, SELL, TOKEN_A, TOKEN_B, make_intent, make_payload


# ============================================================================
# Test Payload Parsing
# ============================================================================

class TestParseInt:
    """Tests for arbitrary-precision integer parsing."""

    def test_plain_int(self):
        assert parse_int(42) == 42

    def test_decimal_string(self):
        big = 2 ** 256 - 1
        assert parse_int(str(big)) == big

    def test_hex_string(self):
        assert parse_int("0xff") == 255
        assert parse_int("-0x10") == -16

    def test_none(self):
        assert parse_int(None) is None

    @pytest.mark.parametrize("value", [1.5, True, [1], "12abc"])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValueError):
            parse_int(value)


class TestFromDict:
    """Tests for building intents from producer payloads."""

    def test_camel_case_payload(self):
        """Test the producer's camelCase keys with string amounts."""
        intent = SwapIntent.from_dict({
            "zeroForOne": True,
            "amountSpecified": "-500000000000000000000",
            "sqrtPriceLimitX96": "0x1000276a4",
            "sender": "0x" + "12" * 20,
            "poolId": "0x" + "ab" * 32,
            "poolKey": {"token0": TOKEN_A, "token1": TOKEN_B, "fee": 500},
            "taskCreatedBlock": 17,
            "taskId": 3,
            "poolOutputAmount": str(2 ** 130),
            "poolInputAmount": None,
        })

        assert intent.direction is True
        assert intent.amount_specified == -500 * 10 ** 18
        assert intent.is_exact_input is False
        assert intent.price_limit == 4295128740
        assert intent.venue_key == AssetPairKey(TOKEN_A, TOKEN_B, 500)
        assert intent.intent_id == 3
        assert intent.estimated_pool_output == 2 ** 130
        assert intent.estimated_pool_input is None
        validate_intent(intent)

    def test_snake_case_payload(self):
        intent = SwapIntent.from_dict({
            "direction": False,
            "amount_specified": 10,
            "venue_key": AssetPairKey(TOKEN_A, TOKEN_B, 3000),
            "intent_id": 9,
        })

        assert intent.direction is False
        assert intent.price_limit == 0
        assert intent.estimated_pool_output is None
        assert intent.pool_output_or_zero == 0

    def test_missing_required_key(self):
        with pytest.raises(InvalidIntent) as exc_info:
            SwapIntent.from_dict({
                "zeroForOne": True,
                "amountSpecified": 1,
                "taskId": 4,
            })
        assert exc_info.value.field == "venue_key"
        assert exc_info.value.intent_id == 4

    def test_malformed_amount(self):
        with pytest.raises(InvalidIntent) as exc_info:
            SwapIntent.from_dict({
                "zeroForOne": True,
                "amountSpecified": "lots",
                "poolKey": {"token0": TOKEN_A, "token1": TOKEN_B},
                "taskId": 1,
            })
        assert exc_info.value.field == "amount_specified"

    @pytest.mark.parametrize("fee", ["500", "0x1f4", 500])
    def test_fee_tier_parsed_to_int(self, fee):
        intent = SwapIntent.from_dict(make_payload(1, fee=fee))

        assert intent.venue_key.fee == 500
        assert isinstance(intent.venue_key.fee, int)
        validate_intent(intent)

    @pytest.mark.parametrize("fee", ["low", 0.3, True])
    def test_malformed_fee_tier(self, fee):
        with pytest.raises(InvalidIntent) as exc_info:
            SwapIntent.from_dict(make_payload(6, fee=fee))

        assert exc_info.value.field == "venue_key"
        assert exc_info.value.intent_id == 6

    def test_string_fee_tier_matches_equal_int_tier(self):
        """Fee tiers from JSON strings compare equal to integer tiers."""
        intents = [
            SwapIntent.from_dict(make_payload(1, BUY, fee="500")),
            SwapIntent.from_dict(make_payload(2, SELL, fee=500)),
        ]

        result = CowMatcher(match_fee_tier=True).run(intents)

        assert result.intent_ids() == [1, 2]

    def test_serialization_keeps_big_amounts_exact(self):
        intent = make_intent(1, out=2 ** 200)

        data = intent.to_dict()

        assert data["estimated_pool_output"] == str(2 ** 200)
        assert SwapIntent.from_dict(data) == intent


# ============================================================================
# Test Validation
# ============================================================================

class TestValidateIntent:
    """Tests for single intent validation."""

    def test_valid_intent(self):
        validate_intent(make_intent(1, out=5))

    @pytest.mark.parametrize(
        "field,value",
        [
            ("direction", None),
            ("direction", 1),
            ("venue_key", None),
            ("venue_key", (TOKEN_A, TOKEN_B, 3000)),
            ("venue_key", AssetPairKey("", TOKEN_B, 3000)),
            ("venue_key", AssetPairKey(TOKEN_A, TOKEN_B, "500")),
            ("venue_key", AssetPairKey(TOKEN_A, TOKEN_B, -500)),
            ("venue_key", AssetPairKey(TOKEN_A, TOKEN_B, None)),
            ("amount_specified", 1.0),
            ("amount_specified", "100"),
            ("price_limit", -1),
            ("created_at_block", -5),
            ("estimated_pool_output", -1),
            ("estimated_pool_output", 2.5),
            ("estimated_pool_input", -3),
        ],
    )
    def test_malformed_fields(self, field, value):
        intent = make_intent(1, **{field: value})

        with pytest.raises(InvalidIntent) as exc_info:
            validate_intent(intent)

        assert exc_info.value.field == field
        assert exc_info.value.intent_id == 1

    @pytest.mark.parametrize("intent_id", [None, "1", True])
    def test_bad_intent_id(self, intent_id):
        intent = dataclasses.replace(make_intent(1), intent_id=intent_id)

        with pytest.raises(InvalidIntent) as exc_info:
            validate_intent(intent)

        assert exc_info.value.field == "intent_id"

    def test_invalid_intent_is_value_error(self):
        assert issubclass(InvalidIntent, ValueError)


class TestValidateBatch:
    """Tests for batch level validation."""

    def test_duplicate_ids_rejected(self):
        intents = [make_intent(1, BUY), make_intent(1, SELL)]

        with pytest.raises(InvalidIntent, match="duplicate"):
            validate_batch(intents)

    def test_whole_batch_fails(self, scenario_intents):
        """A single bad record fails the call, no partial matching."""
        bad = dataclasses.replace(scenario_intents[2], direction=None)
        intents = scenario_intents[:2] + [bad]

        with pytest.raises(InvalidIntent):
            match(intents)

        with pytest.raises(InvalidIntent):
            CowMatcher().run(intents)

    def test_empty_batch_is_valid(self):
        validate_batch([])
