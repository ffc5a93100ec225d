"""Rules engine: the public entry point for play adjudication."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import Callable

from tycoon_rules.config import Config
from tycoon_rules.models.card import ParsedCard

from . import hand as hand_utils
from .analyzer import MeldAnalyzer
from .parser import CardParser
from .validator import PlayValidator, ValidationResult, last_meld

logger = logging.getLogger(__name__)


class RulesEngine:
    """Validates plays and orders hands under the current revolution state.

    Every operation is a pure computation over its arguments plus the
    revolution flag. The flag is the only mutable state; it is guarded by
    a lock and read once per call, so one evaluation never sees two
    different modes.
    """

    def __init__(self, config: Config | None = None):
        """Initialize rules engine.

        Args:
            config: Configuration (uses defaults if not provided)
        """
        self.config = config or Config()
        self.rules = self.config.rules

        self.parser = CardParser(
            one_means_ten=self.rules.one_means_ten,
            first_char_fallback=self.rules.first_char_fallback,
        )
        self.analyzer = MeldAnalyzer(self.parser)
        self.validator = PlayValidator(self.analyzer, spade3_joker=self.rules.spade3_joker)

        self._lock = threading.Lock()
        self._revolution = self.rules.revolution

        self._on_diagnostic: Callable[[ValidationResult], None] | None = None

    @property
    def revolution(self) -> bool:
        """Get the current revolution state."""
        with self._lock:
            return self._revolution

    def set_revolution(self, value: bool) -> None:
        """Switch the active rank table for all subsequent calls."""
        with self._lock:
            self._revolution = bool(value)
        logger.info(f"Revolution mode is now {'ON' if value else 'OFF'}.")

    def set_callbacks(
        self,
        on_diagnostic: Callable[[ValidationResult], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_diagnostic: Called with the result of every rejected play
        """
        self._on_diagnostic = on_diagnostic

    def check_play(
        self,
        proposed: Sequence[str],
        pot_last: Sequence[str],
    ) -> ValidationResult:
        """Validate a proposed play against the pot's last meld.

        Args:
            proposed: Card codes being played
            pot_last: Most recent meld on the pot (empty when opening)

        Returns:
            ValidationResult with a diagnostic message on rejection
        """
        revolution = self.revolution
        result = self.validator.validate(proposed, pot_last, revolution)

        if not result.is_valid:
            logger.debug(
                f"Rejected {list(proposed)} on {list(pot_last)}: "
                f"{result.error.name}: {result.error_message}"
            )
            if self._on_diagnostic:
                self._on_diagnostic(result)
        return result

    def is_valid_play(self, proposed: Sequence[str], pot_last: Sequence[str]) -> bool:
        """Check whether a proposed play beats or opens the pot."""
        return self.check_play(proposed, pot_last).is_valid

    def is_valid_play_against_pot_history(
        self,
        proposed: Sequence[str],
        pot: Sequence[Sequence[str]],
    ) -> bool:
        """Check a play against the most recent non-empty meld of the pot.

        Args:
            proposed: Card codes being played
            pot: Melds played this round, oldest first

        Returns:
            True if the play is legal; an empty pot is the opening case.
        """
        return self.is_valid_play(proposed, last_meld(pot))

    def sort_hand(self, hand: Sequence[str]) -> list[str]:
        """Sort a hand by strength under the current revolution state."""
        return hand_utils.sort_hand(hand, self.revolution, self.parser)

    def remove_played_cards(self, hand: list[str], played: Sequence[str]) -> None:
        """Remove one occurrence of each played card from the hand."""
        hand_utils.remove_played_cards(hand, played)

    def display_label(self, card_code: str) -> str:
        """Get the display label of a card code."""
        return hand_utils.display_label(card_code, self.parser, self.config.display.joker_label)

    def parse_card(self, card_code: str) -> ParsedCard:
        """Parse a card code to its rank and suit."""
        return self.parser.parse_card(card_code)
