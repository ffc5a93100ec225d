"""Hand utilities used by the display layer."""

import logging
from collections.abc import Sequence

from .analyzer import require_meld
from .parser import CardParser
from .strength import NOT_FOUND, index_of

logger = logging.getLogger(__name__)

DEFAULT_JOKER_LABEL = "JOKER"

# Suitless cards (jokers, "9") sort after suited cards of the same rank
_NO_SUIT = 4


def sort_hand(
    hand: Sequence[str],
    revolution: bool = False,
    parser: CardParser | None = None,
) -> list[str]:
    """Sort card codes by strength.

    Cards are ordered by table index under the given mode, then by suit
    (Spade, Heart, Diamond, Club, none). Unparseable codes go last in
    their original order.

    Args:
        hand: Raw card codes
        revolution: Whether revolution is active
        parser: CardParser instance (creates one if not provided)

    Returns:
        A new sorted list. The input is not modified.
    """
    require_meld("hand", hand)
    parser = parser or CardParser()

    def sort_key(code: str) -> tuple[int, int, int]:
        card = parser.parse_card(code)
        index = index_of(card.rank, revolution)
        if index == NOT_FOUND:
            return (1, 0, 0)
        suit = _NO_SUIT if card.suit is None else int(card.suit)
        return (0, index, suit)

    return sorted(hand, key=sort_key)


def remove_played_cards(hand: list[str], played: Sequence[str]) -> None:
    """Remove played cards from a hand in place.

    One occurrence is removed per played code, so a duplicate code in the
    hand survives unless it was played as often as it appears.

    Args:
        hand: Mutable hand of raw card codes
        played: Codes of the meld just played
    """
    require_meld("hand", hand)
    require_meld("played", played)
    for code in played:
        if code in hand:
            hand.remove(code)
        else:
            logger.debug(f"Played card {code!r} is not in hand, skipped")


def display_label(
    card_code: str,
    parser: CardParser | None = None,
    joker_label: str = DEFAULT_JOKER_LABEL,
) -> str:
    """Map joker codes to a single display label.

    Returns:
        joker_label for any joker code, otherwise card_code unchanged.
    """
    parser = parser or CardParser()
    if parser.is_joker_code(card_code):
        return joker_label
    return card_code
