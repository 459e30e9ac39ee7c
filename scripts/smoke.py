# scripts/smoke.py
"""
Smoke test script for the RecurViz recorder.

Usage
-----
1. Record every built-in algorithm on its default input:
    $ uv run python scripts/smoke.py

2. Record one algorithm with a paced run (watch the DEBUG commit log):
    $ uv run python scripts/smoke.py --algorithm fib --input 5 --speed 5
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from recurviz.algorithms.registry import all_algorithms
from recurviz.playback.controller import INSTANT_SPEED, PlaybackController

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


async def _record(controller: PlaybackController, name: str, raw: str | None) -> bool:
    outcome = await controller.run(name, raw)
    if outcome.is_err():
        print(f"❌ {name}: {outcome.unwrap_err()}")
        return False

    summary = outcome.unwrap()
    last = controller.history[-1]
    clean = not last.stack and not last.occupied_indices()
    mark = "✅" if clean else "⚠️ "
    print(
        f"{mark} {summary.algorithm.value.title()}({summary.argument}) = {summary.result}"
        f"  steps={summary.steps} frames={len(last.frames)}"
    )
    return clean


def main() -> int:
    parser = argparse.ArgumentParser(description="Record RecurViz runs end to end.")
    parser.add_argument("--algorithm", "-a", help="Only run this algorithm (name or alias).")
    parser.add_argument("--input", "-i", default=None, help="Input for --algorithm.")
    parser.add_argument("--speed", "-s", type=float, default=INSTANT_SPEED)
    args = parser.parse_args()

    controller = PlaybackController()
    controller.set_speed(args.speed)

    if args.algorithm:
        targets = [(args.algorithm, args.input)]
    else:
        targets = [(algo.kind.value, None) for algo in all_algorithms()]

    ok = True
    for name, raw in targets:
        ok = asyncio.run(_record(controller, name, raw)) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
