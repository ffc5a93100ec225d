"""Command-line entry point for the rules engine."""

import argparse
import sys
from pathlib import Path

from tycoon_rules.config import load_config
from tycoon_rules.game.engine import RulesEngine
from tycoon_rules.game.validator import last_meld
from tycoon_rules.utils.logger import RulesDisplay, setup_logging


def split_codes(text: str) -> list[str]:
    """Split a comma-separated list of card codes.

    An empty string is an empty meld (a pass).
    """
    return [code.strip() for code in text.split(",") if code.strip()]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Tycoon/President play validation engine"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check whether a play is legal")
    check.add_argument(
        "--play",
        required=True,
        help="Cards to play, comma-separated (e.g. 5H,5D,RJ)",
    )
    check.add_argument(
        "--pot",
        action="append",
        default=[],
        help="A meld on the pot, comma-separated; repeat in play order",
    )
    check.add_argument(
        "--revolution",
        action="store_true",
        help="Evaluate with revolution active",
    )

    sort = subparsers.add_parser("sort", help="Sort a hand by strength")
    sort.add_argument("hand", help="Hand, comma-separated")
    sort.add_argument(
        "--revolution",
        action="store_true",
        help="Sort with revolution active",
    )

    parse = subparsers.add_parser("parse", help="Show how card codes are read")
    parse.add_argument("codes", nargs="+", help="Card codes")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success or a legal play, 1 for a rejected play,
        2 for a missing config file)
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.verbose:
        config.logging.level = "DEBUG"
    setup_logging(config.logging.level)

    engine = RulesEngine(config)
    display = RulesDisplay()

    if args.command in ("check", "sort") and args.revolution:
        engine.set_revolution(True)

    if args.command == "check":
        proposed = split_codes(args.play)
        pot_last = last_meld([split_codes(meld) for meld in args.pot])
        result = engine.check_play(proposed, pot_last)
        display.print_check_result(proposed, pot_last, result, engine.revolution)
        return 0 if result.is_valid else 1

    if args.command == "sort":
        hand = engine.sort_hand(split_codes(args.hand))
        display.print_hand(hand, [engine.display_label(code) for code in hand])
        return 0

    display.print_parsed([engine.parse_card(code) for code in args.codes])
    return 0


if __name__ == "__main__":
    sys.exit(main())
