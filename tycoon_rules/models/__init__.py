"""Card models."""

from .card import RANK_BY_NAME, SUIT_BY_LETTER, ParsedCard, Rank, Suit

__all__ = [
    "ParsedCard",
    "Rank",
    "Suit",
    "RANK_BY_NAME",
    "SUIT_BY_LETTER",
]
