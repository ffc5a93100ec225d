"""Tests for card models."""

from tycoon_rules.logging import format_card, format_meld
from tycoon_rules.models.card import RANK_BY_NAME, ParsedCard, Rank, Suit


class TestRank:
    """Tests for Rank enum."""

    def test_fourteen_rank_classes(self):
        """Test that there are exactly 14 rank classes."""
        assert len(Rank) == 14

    def test_lookup_by_canonical_text(self):
        """Test looking up ranks by canonical text."""
        assert Rank("10") is Rank.TEN
        assert Rank("Joker") is Rank.JOKER
        assert RANK_BY_NAME["J"] is Rank.JACK

    def test_unknown_text_not_in_table(self):
        """Test that unknown rank text has no entry."""
        assert "1" not in RANK_BY_NAME
        assert "T" not in RANK_BY_NAME
        assert "15" not in RANK_BY_NAME


class TestParsedCard:
    """Tests for ParsedCard model."""

    def test_normal_card(self):
        """Test a suited card."""
        card = ParsedCard(raw="AS", rank=Rank.ACE, suit=Suit.SPADE)
        assert not card.is_joker
        assert not card.is_unparseable
        assert "A" in str(card)

    def test_joker(self):
        """Test a joker card."""
        card = ParsedCard(raw="RJ", rank=Rank.JOKER)
        assert card.is_joker
        assert card.suit is None
        assert str(card) == "Joker"

    def test_unparseable(self):
        """Test an unparseable card."""
        card = ParsedCard(raw="??")
        assert card.is_unparseable
        assert not card.is_joker
        assert "??" in str(card)

    def test_card_hashable(self):
        """Test that parsed cards can be used in sets."""
        card1 = ParsedCard(raw="5H", rank=Rank.FIVE, suit=Suit.HEART)
        card2 = ParsedCard(raw="5H", rank=Rank.FIVE, suit=Suit.HEART)

        assert card1 == card2
        assert len({card1, card2}) == 1


class TestFormatters:
    """Tests for diagnostic formatters."""

    def test_format_card(self):
        """Test formatting single cards."""
        assert format_card(ParsedCard(raw="3s", rank=Rank.THREE, suit=Suit.SPADE)) == "S3"
        assert format_card(ParsedCard(raw="th", rank=Rank.TEN, suit=Suit.HEART)) == "H10"
        assert format_card(ParsedCard(raw="BJ", rank=Rank.JOKER)) == "Jo"
        assert format_card(ParsedCard(raw="9", rank=Rank.NINE)) == "9"
        assert format_card(ParsedCard(raw="??")) == "??"

    def test_format_meld(self):
        """Test formatting a meld."""
        cards = [
            ParsedCard(raw="5H", rank=Rank.FIVE, suit=Suit.HEART),
            ParsedCard(raw="5D", rank=Rank.FIVE, suit=Suit.DIAMOND),
            ParsedCard(raw="RJ", rank=Rank.JOKER),
        ]
        assert format_meld(cards) == "H5,D5,Jo"
        assert format_meld([]) == ""
