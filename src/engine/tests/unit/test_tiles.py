"""
Unit tests for tile representation utilities.

Covers suit/rank queries at suit boundaries, the short-form codec and the
digit-string hand builder.
"""

import pytest

from engine.logic.enums import Suit, WindName
from engine.logic.tiles import (
    EAST,
    WHITE,
    is_bonus,
    is_honour,
    is_numeral,
    position_wind,
    rank_position,
    short_to_tile,
    sort_tiles,
    string_to_tiles,
    suit_of,
    tile_to_short,
    tiles_of_suit,
    tiles_to_counts,
    tiles_to_string,
)


class TestSuitOf:
    def test_suit_boundaries(self):
        assert suit_of(0) == Suit.BAMBOO  # 1b
        assert suit_of(8) == Suit.BAMBOO  # 9b
        assert suit_of(9) == Suit.CHARACTERS  # 1c
        assert suit_of(17) == Suit.CHARACTERS  # 9c
        assert suit_of(18) == Suit.DOTS  # 1d
        assert suit_of(26) == Suit.DOTS  # 9d
        assert suit_of(27) == Suit.HONOURS  # east
        assert suit_of(33) == Suit.HONOURS  # white dragon
        assert suit_of(34) == Suit.BONUS  # flower 1
        assert suit_of(41) == Suit.BONUS  # season 4

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError, match="tile must be in"):
            suit_of(-1)
        with pytest.raises(ValueError, match="tile must be in"):
            suit_of(42)


class TestTileClassification:
    def test_numeral_tiles(self):
        assert is_numeral(0) is True
        assert is_numeral(26) is True
        assert is_numeral(27) is False

    def test_honour_tiles(self):
        assert is_honour(EAST) is True
        assert is_honour(WHITE) is True
        assert is_honour(26) is False
        assert is_honour(34) is False

    def test_bonus_tiles(self):
        assert is_bonus(34) is True
        assert is_bonus(41) is True
        assert is_bonus(33) is False


class TestRankPosition:
    def test_position_restarts_in_each_suit(self):
        assert rank_position(0) == 0
        assert rank_position(8) == 8
        assert rank_position(9) == 0  # 1c, not 9
        assert rank_position(26) == 8
        assert rank_position(EAST) == 0

    def test_top_of_suit_plus_two_is_another_suit(self):
        # 8b + 2 is 1c: raw arithmetic crosses the suit boundary
        assert suit_of(7 + 2) != suit_of(7)
        assert rank_position(7) + 2 >= 9


class TestTilesOfSuit:
    def test_numeral_suit_in_rank_order(self):
        assert tiles_of_suit(Suit.CHARACTERS) == list(range(9, 18))

    def test_honours(self):
        assert tiles_of_suit(Suit.HONOURS) == list(range(27, 34))


class TestShortForms:
    @pytest.mark.parametrize(
        ("tile", "text"),
        [(0, "1b"), (8, "9b"), (13, "5c"), (18, "1d"), (27, "E"), (29, "W"), (33, "Wh"), (35, "f2"), (41, "s4")],
    )
    def test_tile_to_short(self, tile, text):
        assert tile_to_short(tile) == text

    def test_short_to_tile_reverses_every_tile(self):
        for tile in range(42):
            assert short_to_tile(tile_to_short(tile)) == tile

    @pytest.mark.parametrize("text", ["", "0b", "1x", "10b", "X", "f5"])
    def test_unknown_short_form_rejected(self, text):
        with pytest.raises(ValueError, match="unknown tile short form"):
            short_to_tile(text)

    def test_tiles_to_string_sorts(self):
        assert tiles_to_string([27, 9, 0, 1]) == "1b 2b 1c E"


class TestStringToTiles:
    def test_mixed_suits(self):
        assert string_to_tiles(bamboo="19", characters="5", dots="1", honours="17", bonus="8") == [
            0,
            8,
            13,
            18,
            27,
            33,
            41,
        ]

    def test_rank_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            string_to_tiles(honours="8")
        with pytest.raises(ValueError, match="out of range"):
            string_to_tiles(bamboo="0")


class TestHelpers:
    def test_sort_tiles_is_suit_major(self):
        assert sort_tiles([27, 18, 9, 0]) == [0, 9, 18, 27]

    def test_tiles_to_counts(self):
        counts = tiles_to_counts([0, 0, 27])
        assert counts[0] == 2
        assert counts[27] == 1
        assert sum(counts) == 3
        assert len(counts) == 42

    def test_position_wind_wraps(self):
        assert position_wind(0) == WindName.EAST
        assert position_wind(3) == WindName.NORTH
        assert position_wind(5) == WindName.SOUTH
