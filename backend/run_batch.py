import argparse
import concurrent.futures
import json
import logging
import os
import random
from typing import Any, Dict, List, Optional

import numpy as np

from main import run_simulation
from players import get_player_class, AVAILABLE_PLAYERS
from settings import LOG_LEVEL, LOG_FORMAT

logger = logging.getLogger(__name__)


def summarize_results(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Aggregate per-game summaries into score statistics.
    """
    if not results:
        return {"games": 0}

    scores = np.array([r["final_score"] for r in results])
    ticks = np.array([r["ticks"] for r in results])

    reasons: Dict[str, int] = {}
    for r in results:
        reason = r.get("game_over_reason") or "max_ticks"
        reasons[reason] = reasons.get(reason, 0) + 1

    return {
        "games": len(results),
        "mean_score": round(float(scores.mean()), 2),
        "median_score": float(np.median(scores)),
        "p90_score": float(np.percentile(scores, 90)),
        "best_score": int(scores.max()),
        "mean_ticks": round(float(ticks.mean()), 2),
        "end_reasons": reasons,
    }


def run_batch(
    player_key: str,
    num_games: int,
    max_ticks: int,
    max_workers: Optional[int] = None,
    seed: Optional[int] = None
) -> Dict[str, Any]:
    """
    Run num_games independent headless games in parallel.

    Each game gets its own engine and player; seeds derive from `seed`
    so a batch is reproducible.
    """
    if num_games <= 0:
        raise ValueError(f"num_games must be positive, got {num_games}")

    player_class = get_player_class(player_key)
    seeds = [None if seed is None else seed + i for i in range(num_games)]

    def play_one(game_seed: Optional[int]) -> Dict[str, Any]:
        params = argparse.Namespace(max_ticks=max_ticks, seed=game_seed)
        return run_simulation(player_class(rng=random.Random(game_seed)), params)

    results: List[Dict[str, Any]] = []
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(play_one, s): idx for idx, s in enumerate(seeds)}
        for future in concurrent.futures.as_completed(futures):
            idx = futures[future]
            try:
                result = future.result()
            except Exception as exc:
                logger.error(f"Game {idx} generated an exception: {exc}")
                continue
            logger.debug(f"Game {idx} finished with score {result['final_score']}")
            results.append(result)

    summary = summarize_results(results)
    summary["player"] = player_key
    return summary


def run_batch_simulations():
    parser = argparse.ArgumentParser(
        description="Run batch headless Snake games for an autoplay player."
    )
    parser.add_argument("--player", type=str, default="greedy", choices=AVAILABLE_PLAYERS,
                        help="Autoplay player to evaluate.")
    parser.add_argument("--num-games", type=int, default=100,
                        help="Number of games to run (default: 100).")
    parser.add_argument("--max-ticks", type=int, default=500,
                        help="Maximum number of ticks per game (default: 500).")
    parser.add_argument("--max-workers", type=int, default=os.cpu_count(),
                        help="Maximum number of parallel game workers (threads).")
    parser.add_argument("--seed", type=int, default=None,
                        help="Base seed; game i uses seed + i.")

    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    print(f"Running {args.num_games} games with player '{args.player}'...")
    summary = run_batch(
        player_key=args.player,
        num_games=args.num_games,
        max_ticks=args.max_ticks,
        max_workers=args.max_workers,
        seed=args.seed,
    )

    print("\nBatch Summary:")
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    run_batch_simulations()
