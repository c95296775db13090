#!/usr/bin/env python3
"""
Run a local matching demo.

Demonstrates:
1. Loading intents from producer payloads
2. CoW matching of a mixed batch
3. Handing unmatched intents to fallback routing
"""

import argparse
import json
import random

import structlog

from cowmatch.config import MatcherConfig, set_config
from cowmatch.core.intent import SwapIntent
from cowmatch.engine.matcher import CowMatcher
from cowmatch.logs import setup_logging_from_config

logger = structlog.get_logger(__name__)

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
DAI = "0x6B175474E89094C44Da98b954EedeAC495271d0F"


def build_payloads(count: int, seed: int) -> list:
    """Create producer payloads for a random batch."""
    rng = random.Random(seed)
    pools = [
        {"token0": USDC, "token1": WETH, "fee": 500},
        {"token0": USDC, "token1": WETH, "fee": 3000},
        {"token0": DAI, "token1": WETH, "fee": 3000},
    ]

    payloads = []
    for task_id in range(count):
        pool = rng.choice(pools)
        payloads.append({
            "zeroForOne": rng.random() < 0.5,
            "amountSpecified": str(rng.randrange(1, 50) * 10 ** 18),
            "sqrtPriceLimitX96": "4295128740",
            "sender": f"0x{rng.getrandbits(160):040x}",
            "poolId": f"0x{rng.getrandbits(256):064x}",
            "poolKey": pool,
            "taskCreatedBlock": 19_000_000 + task_id,
            "taskId": task_id,
            "poolOutputAmount": (
                str(rng.randrange(1, 10 ** 6) * 10 ** 12) if rng.random() < 0.8 else None
            ),
            "poolInputAmount": None,
        })
    return payloads


def main() -> None:
    parser = argparse.ArgumentParser(description="CoW matcher demo")
    parser.add_argument("--count", type=int, default=12, help="Number of intents (default: 12)")
    parser.add_argument("--seed", type=int, default=7, help="Random seed (default: 7)")
    parser.add_argument("--match-fee-tier", action="store_true", help="Require equal fee tiers")
    parser.add_argument("--log-json", action="store_true", help="Output logs in JSON format")
    args = parser.parse_args()

    config = MatcherConfig(match_fee_tier=args.match_fee_tier, log_json=args.log_json)
    set_config(config)
    setup_logging_from_config(config)

    intents = [SwapIntent.from_dict(p) for p in build_payloads(args.count, args.seed)]
    logger.info("demo_batch_loaded", intent_count=len(intents))

    result = CowMatcher(config=config).run(intents)

    print("\n" + "=" * 70)
    print("CoW MATCHING RESULT")
    print("=" * 70)
    for pair in result.pairs:
        print(f"   {pair.first.intent_id:>3} <-> {pair.second.intent_id:<3}  weight={pair.weight}")
    print(f"\n   Routed to pool: {[i.intent_id for i in result.unmatched]}")
    print("\n" + json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
