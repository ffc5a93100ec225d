"""Formatters for diagnostic output."""

from collections.abc import Iterable

from tycoon_rules.models.card import ParsedCard, Suit

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.SPADE: "S",
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
}


def format_card(card: ParsedCard) -> str:
    """Format a single parsed card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "S3" for Spade 3, "Jo" for Joker, "9" for
        a suitless nine, "??" for an unparseable code).
    """
    if card.rank is None:
        return "??"
    if card.is_joker:
        return "Jo"
    if card.suit is None:
        return card.rank.value
    return f"{SUIT_CODES[card.suit]}{card.rank.value}"


def format_meld(cards: Iterable[ParsedCard]) -> str:
    """Format parsed cards to a comma-separated string.

    Returns:
        Comma-separated card strings (e.g., "S8,H8,Jo").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)
