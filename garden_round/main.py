#!/usr/bin/env python3
"""
Garden Round - headless entry point.

Plays one full round with a greedy autoplayer, puts the result on the
leaderboard and prints the final snapshot. Useful for checking balance
changes without a renderer.

Usage:
    python -m garden_round --seed 7 --name Robo
    python -m garden_round --json
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

from garden_round.config import get_settings
from garden_round.game import GardenGame
from garden_round.constants import WATERED_THRESHOLDS
from garden_round.plants import PLANT_TYPES, PlantType, PowerUpKind

logger = logging.getLogger(__name__)


def _matures_in_time(game: GardenGame, plant: PlantType, tick_ms: int) -> bool:
    """Watered, will it be harvestable before the round ends?"""
    grow_ms = plant.growth_duration_ms * WATERED_THRESHOLDS[1] // 100
    return grow_ms + tick_ms < game.clock.remaining_ms


def autoplay_step(game: GardenGame, tick_ms: Optional[int] = None) -> None:
    """
    One round of greedy decisions between ticks:
    boost and harvest what is mature, fill empty cells with the most
    expensive seed we can pay for that will still mature before the
    round ends, then water everything.
    """
    if tick_ms is None:
        tick_ms = game.settings.tick_interval_ms

    if game.grid.mature_positions():
        for kind in (PowerUpKind.FROZEN, PowerUpKind.SUNLIGHT):
            if game.activate_power_up(kind):
                break
    game.harvest_all()

    by_cost = [
        plant for plant in sorted(PLANT_TYPES.values(), key=lambda p: p.cost, reverse=True)
        if _matures_in_time(game, plant, tick_ms)
    ]
    for row, col in game.grid.empty_positions():
        for plant in by_cost:
            if game.plant(row, col, plant.id):
                break
        else:
            # Nothing affordable; later cells won't do better
            break

    for cell in game.grid.iter_occupied():
        game.water(cell.row, cell.col)


def play_round(game: GardenGame, tick_ms: int) -> int:
    """Autoplay until the clock runs out. Returns the final money."""
    while not game.ended:
        autoplay_step(game, tick_ms)
        game.tick(tick_ms)
    return game.money


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Play one headless Garden Round with a greedy autoplayer",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for harvest rolls (default: random)",
    )
    parser.add_argument(
        "--name",
        default="Autoplayer",
        help="Leaderboard name (default: Autoplayer)",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=settings.tick_interval_ms,
        help=f"Tick length in ms (default: {settings.tick_interval_ms})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final snapshot as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})",
    )
    args = parser.parse_args(argv)

    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    game = GardenGame(settings=settings, rng=random.Random(args.seed))
    logger.info(f"Starting round ({settings.round_duration_ms}ms, tick {args.tick_ms}ms)")
    play_round(game, args.tick_ms)

    if not game.submit_score(args.name):
        logger.warning(f"Leaderboard rejected name {args.name!r}")

    snapshot = game.snapshot()
    if args.json:
        print(snapshot.model_dump_json(indent=2))
    else:
        print(f"Final money: ${snapshot.money:,}")
        for rank, entry in enumerate(snapshot.leaderboard, start=1):
            print(f"#{rank} {entry.name}: ${entry.score:,}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
