"""Rank strength ordering.

Both tables are written out literally. Revolution is not a reversal of
the normal table: Joker moves from the high end to the low end while
3..2 keep their relative order, and the comparison direction flips
instead (see ``beats``). Joker therefore stays the strongest card in
both modes.
"""

from tycoon_rules.models.card import Rank

NOT_FOUND = -1

NORMAL_ORDER: tuple[Rank, ...] = (
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
    Rank.TWO,
    Rank.JOKER,
)

REVOLUTION_ORDER: tuple[Rank, ...] = (
    Rank.JOKER,
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
    Rank.TWO,
)


def rank_order(revolution: bool = False) -> tuple[Rank, ...]:
    """Get the active rank table.

    Args:
        revolution: Whether revolution is active.

    Returns:
        The 14-entry table, index = position in the table.
    """
    return REVOLUTION_ORDER if revolution else NORMAL_ORDER


def index_of(rank: Rank | None, revolution: bool = False) -> int:
    """Look up a rank's position in the active table.

    Args:
        rank: Rank class, or None for an unparseable card.
        revolution: Whether revolution is active.

    Returns:
        Index in [0, 13], or NOT_FOUND if the rank is not in the table.
    """
    if rank is None:
        return NOT_FOUND
    try:
        return rank_order(revolution).index(rank)
    except ValueError:
        return NOT_FOUND


def beats(proposed_index: int, pot_index: int, revolution: bool = False) -> bool:
    """Compare two table indices.

    Normal mode requires a strictly greater index, revolution mode a
    strictly lesser one. Callers must rule out NOT_FOUND beforehand.
    """
    if revolution:
        return proposed_index < pot_index
    return proposed_index > pot_index
