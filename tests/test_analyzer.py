"""Tests for meld analysis."""

import pytest

from tycoon_rules.game.analyzer import MeldAnalyzer, MeldError
from tycoon_rules.models.card import Rank


@pytest.fixture
def analyzer():
    return MeldAnalyzer()


class TestMeldAnalyzer:
    """Tests for MeldAnalyzer class."""

    def test_analyze_empty(self, analyzer):
        """Test analyzing an empty meld (pass)."""
        result = analyzer.analyze([])

        assert result.is_pass
        assert result.ok
        assert result.base_rank == Rank.JOKER

    def test_analyze_single(self, analyzer):
        """Test a single card is trivially consistent."""
        result = analyzer.analyze(["7S"])

        assert result.ok
        assert result.count == 1
        assert result.base_rank == Rank.SEVEN
        assert [card.raw for card in result.cards] == ["7S"]
        assert not result.is_pass

    def test_joker_is_wild(self, analyzer):
        """Test jokers match any base rank."""
        assert analyzer.validate(["5H", "5D", "RJ"]) == (Rank.FIVE, True)

    def test_base_rank_skips_leading_joker(self, analyzer):
        """Test the base rank comes from the first non-joker card."""
        assert analyzer.validate(["RJ", "QH", "QS"]) == (Rank.QUEEN, True)

    def test_all_jokers(self, analyzer):
        """Test an all-joker meld has base rank Joker."""
        assert analyzer.validate(["RJ", "BJ"]) == (Rank.JOKER, True)

    def test_mixed_spellings_same_rank(self, analyzer):
        """Test different spellings of one rank form a valid meld."""
        assert analyzer.validate(["10H", "TD", "1c"]) == (Rank.TEN, True)

    def test_inconsistent_meld(self, analyzer):
        """Test a meld with two different ranks."""
        result = analyzer.analyze(["5H", "6D"])

        assert not result.ok
        assert result.error == MeldError.INCONSISTENT_MELD
        assert result.base_rank == Rank.FIVE
        assert "6D" in result.diagnostic
        assert "base rank 5" in result.diagnostic

    def test_unparseable_card(self, analyzer):
        """Test a meld containing an unresolvable code."""
        result = analyzer.analyze(["??"])

        assert not result.ok
        assert result.error == MeldError.UNPARSEABLE_CARD
        assert "could not be resolved" in result.diagnostic

    def test_unparseable_checked_before_consistency(self, analyzer):
        """Test unresolved cards are reported ahead of rank mismatches."""
        result = analyzer.analyze(["5H", "6D", "??"])

        assert result.error == MeldError.UNPARSEABLE_CARD

    def test_rejects_none(self, analyzer):
        """Test that None is a caller error."""
        with pytest.raises(TypeError):
            analyzer.analyze(None)

    def test_rejects_bare_string(self, analyzer):
        """Test that a bare code instead of a list is a caller error."""
        with pytest.raises(TypeError):
            analyzer.analyze("5H")


class TestPotBaseRank:
    """Tests for MeldAnalyzer.pot_base_rank."""

    def test_trailing_joker(self, analyzer):
        """Test the base rank skips trailing jokers."""
        assert analyzer.pot_base_rank(["4H", "4C", "BJ"]) == Rank.FOUR

    def test_scans_from_end(self, analyzer):
        """Test the last non-joker card wins."""
        assert analyzer.pot_base_rank(["5H", "RJ", "6D"]) == Rank.SIX

    def test_all_jokers(self, analyzer):
        """Test an all-joker pot meld."""
        assert analyzer.pot_base_rank(["BJ", "RJ"]) == Rank.JOKER

    def test_unparseable(self, analyzer):
        """Test an unresolvable pot card yields None."""
        assert analyzer.pot_base_rank(["7S", "??"]) is None
