"""Play validation against the pot."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from tycoon_rules.logging import format_meld
from tycoon_rules.models.card import ParsedCard, Rank, Suit

from .analyzer import MeldAnalyzer, MeldError, require_meld
from .parser import CardParser
from .strength import NOT_FOUND, beats, index_of


class PlayError(IntEnum):
    """Reason a play was rejected."""

    NONE = 0
    UNPARSEABLE_CARD = 1
    INCONSISTENT_MELD = 2
    CARDINALITY_MISMATCH = 3
    NOT_STRONGER = 4


_MELD_ERRORS = {
    MeldError.UNPARSEABLE_CARD: PlayError.UNPARSEABLE_CARD,
    MeldError.INCONSISTENT_MELD: PlayError.INCONSISTENT_MELD,
}


@dataclass
class ValidationResult:
    """Result of play validation."""

    is_valid: bool
    error: PlayError = PlayError.NONE
    error_message: str = ""


def last_meld(pot: Sequence[Sequence[str]]) -> list[str]:
    """Get the most recent non-empty meld of a pot history.

    Args:
        pot: Melds in the order they were played

    Returns:
        The last non-empty meld, or an empty list if there is none.

    Raises:
        TypeError: If pot is None or a bare string.
    """
    if pot is None or isinstance(pot, (str, bytes)):
        raise TypeError(f"pot must be a sequence of melds, got {pot!r}")
    for meld in reversed(pot):
        require_meld("pot meld", meld)
        if len(meld) > 0:
            return list(meld)
    return []


class PlayValidator:
    """Decides whether a proposed meld may be played on the pot."""

    def __init__(self, analyzer: MeldAnalyzer | None = None, spade3_joker: bool = True):
        """Initialize validator.

        Args:
            analyzer: MeldAnalyzer instance (creates one if not provided)
            spade3_joker: Whether the 3 of Spades beats a single Joker
        """
        self.analyzer = analyzer or MeldAnalyzer()
        self.spade3_joker = spade3_joker

    @property
    def parser(self) -> CardParser:
        """Get the parser shared with the analyzer."""
        return self.analyzer.parser

    def validate(
        self,
        proposed: Sequence[str],
        pot_last: Sequence[str],
        revolution: bool = False,
    ) -> ValidationResult:
        """Validate a proposed play.

        Args:
            proposed: Card codes being played
            pot_last: Most recent meld on the pot (empty when opening)
            revolution: Whether revolution is active

        Returns:
            ValidationResult
        """
        require_meld("proposed", proposed)
        require_meld("pot_last", pot_last)

        analysis = self.analyzer.analyze(proposed)
        if not analysis.ok:
            return ValidationResult(
                is_valid=False,
                error=_MELD_ERRORS[analysis.error],
                error_message=analysis.diagnostic,
            )

        # Any consistent meld may open an empty pot
        if len(pot_last) == 0:
            return ValidationResult(is_valid=True)

        if len(proposed) != len(pot_last):
            return ValidationResult(
                is_valid=False,
                error=PlayError.CARDINALITY_MISMATCH,
                error_message=f"Card count mismatch: {len(proposed)} vs {len(pot_last)}",
            )

        if len(proposed) == 1:
            return self._compare_single(analysis.cards[0], pot_last[0], revolution)

        return self._compare_melds(analysis.base_rank, pot_last, revolution)

    def _compare_single(
        self,
        card: ParsedCard,
        pot_card: str,
        revolution: bool,
    ) -> ValidationResult:
        """Compare two single cards.

        Args:
            card: Proposed card, already parsed by the analyzer
            pot_card: Card code on the pot
            revolution: Whether revolution is active

        Returns:
            ValidationResult
        """
        pot_rank = self.parser.parse(pot_card)

        # Special case: Spade 3 beats a single joker in either mode
        if (
            self.spade3_joker
            and card.rank == Rank.THREE
            and card.suit == Suit.SPADE
            and pot_rank == Rank.JOKER
        ):
            return ValidationResult(is_valid=True)

        return self._compare_ranks(card.rank, pot_rank, [pot_card], revolution)

    def _compare_melds(
        self,
        base_proposed: Rank | None,
        pot_last: Sequence[str],
        revolution: bool,
    ) -> ValidationResult:
        """Compare a multi-card meld with the pot meld by base rank."""
        base_pot = self.analyzer.pot_base_rank(pot_last)
        return self._compare_ranks(base_proposed, base_pot, pot_last, revolution)

    def _compare_ranks(
        self,
        proposed_rank: Rank | None,
        pot_rank: Rank | None,
        pot_last: Sequence[str],
        revolution: bool,
    ) -> ValidationResult:
        proposed_index = index_of(proposed_rank, revolution)
        pot_index = index_of(pot_rank, revolution)

        if pot_index == NOT_FOUND:
            pot_text = format_meld(self.parser.parse_card(c) for c in pot_last)
            return ValidationResult(
                is_valid=False,
                error=PlayError.UNPARSEABLE_CARD,
                error_message=f"Pot meld [{pot_text}] has a rank that could not be resolved",
            )
        if proposed_index == NOT_FOUND:
            return ValidationResult(
                is_valid=False,
                error=PlayError.UNPARSEABLE_CARD,
                error_message=f"Proposed rank {proposed_rank} could not be resolved",
            )

        if not beats(proposed_index, pot_index, revolution):
            mode = " (revolution)" if revolution else ""
            return ValidationResult(
                is_valid=False,
                error=PlayError.NOT_STRONGER,
                error_message=(
                    f"{proposed_rank.value} is not stronger than {pot_rank.value}{mode}"
                ),
            )

        return ValidationResult(is_valid=True)
