#!/usr/bin/env python3
"""Nebula - headless simulation driver.

Generates (or loads) a galaxy, applies optional construction orders for the
acting player, advances a number of cycles and prints each player's ledger.
"""

import argparse
import logging
import sys

from nebula.engine import EconomyEngine, EconomyError, new_game
from nebula.models import BuildingType, Game, MapConfig, Resource
from nebula.utils import PLAYER_IDS
from nebula.utils.serialization import load_game, save_game


def parse_build_order(text: str) -> tuple[str, BuildingType, int]:
    """Parse a STAR:BUILDING:COUNT order, e.g. 'start-Player 1:Mine:5'."""
    try:
        star_id, building, count = text.rsplit(":", 2)
        return star_id, BuildingType(building), int(count)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid build order '{text}': {e}") from e


def print_ledgers(game: Game) -> None:
    """Print every player's resource stock."""
    print(f"\n=== Day {game.day:04d} ===")
    for pid in PLAYER_IDS:
        ledger = game.ledgers[pid]
        stock = ", ".join(f"{r.value}={ledger[r]}" for r in Resource)
        alarm = " [!]" if ledger.over_display_cap() else ""
        print(f"{pid}: {stock}{alarm}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Nebula - galaxy generator and economy simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --seed test --cycles 10                      # New galaxy, 10 cycles
  %(prog)s --seed test --build "start-Player 1:Mine:5"  # Build 5 mines first
  %(prog)s --load saves/game.json --cycles 1            # Resume a saved game
  %(prog)s --seed test --save saves/game.json           # Save after running
        """,
    )

    parser.add_argument("--seed", type=str, default="", help="Map seed (default: random)")
    parser.add_argument("--common", type=int, default=8, help="Common stars per sector (default: 8)")
    parser.add_argument("--neutron", type=int, default=2, help="Neutron stars per sector (default: 2)")
    parser.add_argument(
        "--black-holes", type=int, default=1, help="Black holes per sector (default: 1)"
    )
    parser.add_argument(
        "--min-distance",
        type=float,
        default=12,
        help="Minimum distance between stars in light-years (default: 12)",
    )
    parser.add_argument("--cycles", type=int, default=1, help="Cycles to advance (default: 1)")
    parser.add_argument(
        "--player", choices=PLAYER_IDS, default=None, help="Acting player for build orders"
    )
    parser.add_argument(
        "--build",
        type=parse_build_order,
        action="append",
        default=[],
        metavar="STAR:BUILDING:COUNT",
        help="Construct buildings before advancing (repeatable)",
    )
    parser.add_argument("--load", type=str, metavar="FILE", help="Load game from JSON file")
    parser.add_argument("--save", type=str, metavar="FILE", help="Save game to JSON file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Initialize game
    if args.load:
        print(f"Loading game from {args.load}...")
        try:
            game = load_game(args.load)
            print(f"Game loaded successfully (Day {game.day}, {len(game.stars)} stars)")
        except FileNotFoundError:
            print(f"Error: File {args.load} not found.")
            sys.exit(1)
        except ValueError as e:
            print(f"Error loading game: {e}")
            sys.exit(1)
    else:
        config = MapConfig(
            seed=args.seed,
            common_count=args.common,
            neutron_count=args.neutron,
            black_hole_count=args.black_holes,
            min_star_distance=args.min_distance,
        )
        game = new_game(config)

    if args.player:
        game.set_acting_player(args.player)

    engine = EconomyEngine()
    for star_id, building, count in args.build:
        try:
            engine.construct(game, star_id, building, count)
        except (EconomyError, ValueError) as e:
            print(f"Build order rejected: {e}")

    for _ in range(args.cycles):
        engine.advance_cycle(game)

    print_ledgers(game)

    if args.save:
        save_game(game, args.save)
        print(f"\nGame saved to {args.save}")


if __name__ == "__main__":
    main()
