"""Meld analysis for proposed plays."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from tycoon_rules.models.card import ParsedCard, Rank

from .parser import CardParser


class MeldError(IntEnum):
    """Error codes from meld analysis."""

    NONE = 0
    UNPARSEABLE_CARD = 1
    INCONSISTENT_MELD = 2


@dataclass
class MeldAnalysis:
    """Result of analyzing a meld."""

    base_rank: Rank | None  # Shared rank of the non-joker cards, JOKER if none
    count: int
    error: MeldError = MeldError.NONE
    diagnostic: str = ""
    cards: list[ParsedCard] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Check if analysis found no errors."""
        return self.error == MeldError.NONE

    @property
    def is_pass(self) -> bool:
        """Check if this is a pass (no cards)."""
        return self.count == 0


def require_meld(name: str, meld: Sequence[str]) -> None:
    """Fail fast when a caller passes something that is not a meld.

    Raises:
        TypeError: If meld is None or a bare string.
    """
    if meld is None or isinstance(meld, (str, bytes)):
        raise TypeError(f"{name} must be a sequence of card codes, got {meld!r}")


class MeldAnalyzer:
    """Checks that a meld is internally consistent.

    All cards of a meld share one base rank; jokers are wild and match
    any base rank. The result does not depend on the revolution flag.
    """

    def __init__(self, parser: CardParser | None = None):
        """Initialize analyzer.

        Args:
            parser: CardParser instance (creates one if not provided)
        """
        self.parser = parser or CardParser()

    def analyze(self, meld: Sequence[str]) -> MeldAnalysis:
        """Analyze a meld.

        Args:
            meld: Raw card codes of the meld

        Returns:
            MeldAnalysis result
        """
        require_meld("meld", meld)
        cards = [self.parser.parse_card(code) for code in meld]

        for card in cards:
            if card.is_unparseable:
                return MeldAnalysis(
                    base_rank=None,
                    count=len(cards),
                    error=MeldError.UNPARSEABLE_CARD,
                    diagnostic=f"card {card.raw!r} could not be resolved to a rank",
                    cards=cards,
                )

        base_rank = next((c.rank for c in cards if not c.is_joker), Rank.JOKER)

        for card in cards:
            if card.is_joker or card.rank == base_rank:
                continue
            return MeldAnalysis(
                base_rank=base_rank,
                count=len(cards),
                error=MeldError.INCONSISTENT_MELD,
                diagnostic=f"card {card.raw} does not match base rank {base_rank.value}",
                cards=cards,
            )

        return MeldAnalysis(base_rank=base_rank, count=len(cards), cards=cards)

    def validate(self, meld: Sequence[str]) -> tuple[Rank | None, bool]:
        """Get a meld's base rank and whether it is consistent."""
        analysis = self.analyze(meld)
        return analysis.base_rank, analysis.ok

    def pot_base_rank(self, meld: Sequence[str]) -> Rank | None:
        """Get the base rank of a meld already on the pot.

        Scans from the end for the most recent non-joker card.

        Returns:
            That card's rank (None if unparseable), or JOKER if every card
            is a joker.
        """
        require_meld("pot meld", meld)
        for code in reversed(meld):
            rank = self.parser.parse(code)
            if rank != Rank.JOKER:
                return rank
        return Rank.JOKER
