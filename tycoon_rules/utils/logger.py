"""Logging utilities and result display."""

import logging
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

from tycoon_rules.logging import format_card

if TYPE_CHECKING:
    from tycoon_rules.game.validator import ValidationResult
    from tycoon_rules.models.card import ParsedCard


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class RulesDisplay:
    """Display engine results to stdout."""

    def print_check_result(
        self,
        proposed: Sequence[str],
        pot_last: Sequence[str],
        result: "ValidationResult",
        revolution: bool,
    ) -> None:
        """Print the decision for one play."""
        mode = " [REVOLUTION]" if revolution else ""
        pot_str = ",".join(pot_last) if pot_last else "(empty)"
        print(f"Play: {','.join(proposed)}  Pot: {pot_str}{mode}")
        if result.is_valid:
            print("  -> LEGAL")
        else:
            print(f"  -> REJECTED ({result.error.name}): {result.error_message}")

    def print_hand(self, hand: Sequence[str], labels: Sequence[str]) -> None:
        """Print a sorted hand, raw codes and display labels."""
        print(" ".join(hand))
        print(" ".join(labels))

    def print_parsed(self, cards: Sequence["ParsedCard"]) -> None:
        """Print the normalized form of each code."""
        for card in cards:
            rank = card.rank.value if card.rank is not None else "UNPARSEABLE"
            suit = card.suit.name if card.suit is not None else "-"
            print(f"{card.raw!r:>16} -> {format_card(card):<4} rank={rank} suit={suit}")
