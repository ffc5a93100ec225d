"""Card code parsing.

Card codes arrive from several sources with different spellings
("10H", "TH", "1h", "ten of hearts", "RJ", "Joker", "9"). The parser
normalizes all of them to a rank class and an optional suit without ever
raising on bad data: anything it cannot resolve becomes ``None``.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable

from tycoon_rules.models.card import RANK_BY_NAME, SUIT_BY_LETTER, ParsedCard, Rank, Suit

logger = logging.getLogger(__name__)

# Substrings that mark a joker anywhere in the code
JOKER_TOKENS = ("redjoker", "blackjoker", "joker", "jrj", "jbj", "rj", "bj", "nj")

_NON_ALNUM = re.compile(r"[^0-9a-z]")

# Full rank names, checked before single letters so that "jack" is not read as "a"
_WORD_NAMES = (
    ("ten", "10"),
    ("ace", "A"),
    ("jack", "J"),
    ("queen", "Q"),
    ("king", "K"),
)

_LETTER_NAMES = (
    ("10", "10"),
    ("a", "A"),
    ("j", "J"),
    ("q", "Q"),
    ("k", "K"),
)


@dataclass(frozen=True)
class RankRule:
    """One step of rank resolution.

    ``resolve`` receives the rank portion and the whole stripped token
    (both lowercase) and returns a rank token, or None to defer to the
    next rule.
    """

    name: str
    resolve: Callable[[str, str], str | None]


def _exact_t(portion: str, token: str) -> str | None:
    return "10" if portion == "t" else None


def _exact_face(portion: str, token: str) -> str | None:
    return portion.upper() if portion in ("a", "j", "q", "k") else None


def _numeric(portion: str, token: str) -> str | None:
    # Out-of-range numbers pass through and fail the rank lookup later.
    # Leading zeros are dropped as text; int() rejects very long digit strings.
    if not portion.isdigit():
        return None
    return portion.lstrip("0") or "0"


def _word_name(portion: str, token: str) -> str | None:
    for word, name in _WORD_NAMES:
        if word in portion:
            return name
    return None


def _letter_name(portion: str, token: str) -> str | None:
    for letter, name in _LETTER_NAMES:
        if letter in portion:
            return name
    return None


def _first_char(portion: str, token: str) -> str | None:
    source = portion or token
    return source[0].upper() if source else None


class CardParser:
    """Normalizes raw card codes.

    Args:
        one_means_ten: Read a bare "1" as ten. When False, "1" is
            unparseable.
        first_char_fallback: Guess the rank from the first character when
            no other rule matches. When False, such codes are unparseable.
    """

    def __init__(self, one_means_ten: bool = True, first_char_fallback: bool = True):
        self.one_means_ten = one_means_ten
        self.first_char_fallback = first_char_fallback

        rules = [
            RankRule("exact_t", _exact_t),
            RankRule("exact_face", _exact_face),
            RankRule("numeric", _numeric),
            RankRule("word_name", _word_name),
            RankRule("letter_name", _letter_name),
        ]
        if first_char_fallback:
            rules.append(RankRule("first_char", _first_char))
        self.rules: tuple[RankRule, ...] = tuple(rules)

    @staticmethod
    def _normalize(raw: str) -> str:
        if not isinstance(raw, str):
            raise TypeError(f"Card code must be a string, got {type(raw).__name__}")
        return raw.strip().lower()

    def is_joker_code(self, raw: str) -> bool:
        """Check if a raw code names a joker."""
        text = self._normalize(raw)
        return any(token in text for token in JOKER_TOKENS)

    def split(self, raw: str) -> tuple[str, str, Suit | None]:
        """Split a non-joker code into its parts.

        Returns:
            (stripped token, rank portion, suit) all lowercase. The suit
            is None when the last character is not a suit letter.
        """
        token = _NON_ALNUM.sub("", self._normalize(raw))
        if token and token[-1].upper() in SUIT_BY_LETTER:
            return token, token[:-1], SUIT_BY_LETTER[token[-1].upper()]
        return token, token, None

    def rank_token(self, raw: str) -> str | None:
        """Resolve the rank text of a code before rank class lookup.

        Args:
            raw: Raw card code.

        Returns:
            Rank text such as "10", "J" or "Joker". Out-of-range numbers
            (e.g. "15") are returned as-is. None if nothing matched.
        """
        text = self._normalize(raw)
        if not text:
            return None
        if any(token in text for token in JOKER_TOKENS):
            return Rank.JOKER.value

        token, portion, _ = self.split(raw)
        for rule in self.rules:
            result = rule.resolve(portion, token)
            if result is None:
                continue
            if rule.name == "first_char":
                logger.debug(f"Guessed rank {result!r} from first character of {raw!r}")
            return self._canonical(result)
        return None

    def _canonical(self, result: str) -> str:
        if result == "T":
            return "10"
        if result == "1" and self.one_means_ten:
            return "10"
        return result

    def parse(self, raw: str) -> Rank | None:
        """Parse a raw code to its rank class.

        Args:
            raw: Raw card code. Any string is accepted.

        Returns:
            The rank class, or None if the code is unparseable.
        """
        result = self.rank_token(raw)
        if result is None:
            return None
        return RANK_BY_NAME.get(result)

    def suit_of(self, raw: str) -> Suit | None:
        """Get the suit of a raw code.

        Returns:
            The suit, or None for jokers, suitless encodings and codes
            whose only character is a suit letter.
        """
        if not self._normalize(raw) or self.is_joker_code(raw):
            return None
        token, portion, suit = self.split(raw)
        if not portion:
            return None
        return suit

    def parse_card(self, raw: str) -> ParsedCard:
        """Parse a raw code to a ParsedCard."""
        return ParsedCard(raw=raw, rank=self.parse(raw), suit=self.suit_of(raw))
