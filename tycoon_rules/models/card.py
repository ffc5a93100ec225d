"""Rank, suit and parsed card models."""

from enum import Enum, IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit.

    The integer value doubles as the tie-break order among cards of equal
    rank when a hand is sorted.
    """

    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3


class Rank(str, Enum):
    """Rank class of a card.

    Exactly 14 members. The value is the canonical rank text, so
    ``Rank("10") is Rank.TEN``. Unparseable input is represented by
    ``None`` wherever a rank is expected, never by a member of this enum.
    """

    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"
    TWO = "2"
    JOKER = "Joker"


# Canonical rank text -> rank class
RANK_BY_NAME: dict[str, Rank] = {rank.value: rank for rank in Rank}

# Trailing suit letter -> suit
SUIT_BY_LETTER: dict[str, Suit] = {
    "S": Suit.SPADE,
    "H": Suit.HEART,
    "D": Suit.DIAMOND,
    "C": Suit.CLUB,
}

SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}


class ParsedCard(BaseModel, frozen=True):
    """A raw card code together with its normalized rank and suit."""

    raw: str
    rank: Rank | None = None  # None when the code could not be resolved
    suit: Suit | None = None  # None for jokers and suitless encodings

    @property
    def is_joker(self) -> bool:
        """Check if this card is a joker."""
        return self.rank == Rank.JOKER

    @property
    def is_unparseable(self) -> bool:
        """Check if the raw code did not resolve to any rank class."""
        return self.rank is None

    def __str__(self) -> str:
        if self.rank is None:
            return f"?({self.raw})"
        if self.is_joker:
            return "Joker"
        if self.suit is None:
            return self.rank.value
        return f"{SUIT_SYMBOLS[self.suit]}{self.rank.value}"

    def __repr__(self) -> str:
        return str(self)
