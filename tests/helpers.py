"""
Test data generators shared by the test modules.
"""

from typing import Optional

from cowmatch.core.intent import AssetPairKey, SwapIntent


TOKEN_A = "0x" + "aa" * 20
TOKEN_B = "0x" + "bb" * 20
TOKEN_C = "0x" + "cc" * 20

BUY = True
SELL = False


def generate_test_address(index: int = 0) -> str:
    """Generate a deterministic test account address."""
    return f"0x{index:040x}"


def make_intent(
    intent_id: int,
    direction: bool = BUY,
    pair: tuple = (TOKEN_A, TOKEN_B),
    out: Optional[int] = None,
    fee: int = 3000,
    amount: int = 1_000_000,
    **overrides,
) -> SwapIntent:
    """Create an intent with sensible defaults."""
    values = dict(
        direction=direction,
        amount_specified=amount,
        price_limit=4295128740,
        originator=generate_test_address(intent_id),
        venue_id=f"0x{'ee' * 32}",
        venue_key=AssetPairKey(pair[0], pair[1], fee),
        created_at_block=100 + intent_id,
        intent_id=intent_id,
        estimated_pool_output=out,
        estimated_pool_input=None,
    )
    values.update(overrides)
    return SwapIntent(**values)


def make_payload(intent_id: int, direction: bool = BUY, fee=3000, **overrides) -> dict:
    """Create a producer payload with camelCase keys."""
    payload = {
        "zeroForOne": direction,
        "amountSpecified": "1000000",
        "sqrtPriceLimitX96": "4295128740",
        "sender": generate_test_address(intent_id),
        "poolId": f"0x{'ee' * 32}",
        "poolKey": {"token0": TOKEN_A, "token1": TOKEN_B, "fee": fee},
        "taskCreatedBlock": 100 + intent_id,
        "taskId": intent_id,
        "poolOutputAmount": None,
        "poolInputAmount": None,
    }
    payload.update(overrides)
    return payload
