"""
Unit tests for hand state mutations and the tile conservation invariant.
"""

from collections import Counter

import pytest

from engine.logic.exceptions import TileNotHeldError
from engine.logic.hand import (
    add_tile,
    all_tiles,
    copy_hand,
    count_tile,
    discard_tile,
    extract_bonus_tiles,
    move_to_bonus,
    remove_tiles,
    reveal_meld,
)
from engine.logic.melds import form_set
from engine.tests.helpers import create_hand, tiles


class TestRemoveTiles:
    def test_removes_one_instance_per_request(self):
        hand = create_hand([4, 4, 4, 5])
        remove_tiles(hand, [4, 4])
        assert sorted(hand.tiles) == [4, 5]

    def test_missing_tile_raises(self):
        hand = create_hand([4, 5])
        with pytest.raises(TileNotHeldError) as exc_info:
            remove_tiles(hand, [6])
        assert exc_info.value.tile == 6
        assert exc_info.value.held == 0

    def test_more_copies_than_held_raises(self):
        hand = create_hand([4, 4, 5])
        with pytest.raises(TileNotHeldError) as exc_info:
            remove_tiles(hand, [4, 4, 4])
        assert exc_info.value.held == 2
        assert exc_info.value.requested == 3

    def test_failed_removal_leaves_hand_unchanged(self):
        hand = create_hand([4, 5])
        with pytest.raises(TileNotHeldError):
            remove_tiles(hand, [4, 6])
        assert hand.tiles == [4, 5]


class TestRevealMeld:
    def test_keeps_claim_order(self):
        hand = create_hand()
        first = form_set(4, 3)
        second = form_set(27, 3)
        reveal_meld(hand, first)
        reveal_meld(hand, second)
        assert hand.revealed == [first, second]


class TestBonusTiles:
    def test_move_to_bonus(self):
        hand = create_hand([4, 34, 40])
        move_to_bonus(hand, [34])
        assert hand.tiles == [4, 40]
        assert hand.bonus == [34]

    def test_move_non_bonus_tile_rejected(self):
        hand = create_hand([4])
        with pytest.raises(ValueError, match="not a bonus tile"):
            move_to_bonus(hand, [4])
        assert hand.tiles == [4]

    def test_move_unheld_bonus_tile_raises(self):
        hand = create_hand([4])
        with pytest.raises(TileNotHeldError):
            move_to_bonus(hand, [34])

    def test_extract_returns_moved_tiles(self):
        hand = create_hand([34, 4, 41, 5])
        moved = extract_bonus_tiles(hand)
        assert moved == [34, 41]
        assert hand.tiles == [4, 5]
        assert hand.bonus == [34, 41]

    def test_extract_without_bonus_tiles(self):
        hand = create_hand([4, 5])
        assert extract_bonus_tiles(hand) == []
        assert hand.bonus == []


class TestDrawAndDiscard:
    def test_add_and_discard(self):
        hand = create_hand([4])
        add_tile(hand, 27)
        assert count_tile(hand, 27) == 1
        discard_tile(hand, 4)
        assert hand.tiles == [27]

    def test_discard_unheld_raises(self):
        hand = create_hand([4])
        with pytest.raises(TileNotHeldError):
            discard_tile(hand, 5)


class TestCopyHand:
    def test_copy_is_independent(self):
        hand = create_hand([4, 4], revealed=[form_set(27, 3)], bonus=[34])
        copy = copy_hand(hand)
        copy.tiles.append(9)
        copy.revealed.append(form_set(9, 3))
        copy.bonus.clear()
        assert hand.tiles == [4, 4]
        assert len(hand.revealed) == 1
        assert hand.bonus == [34]


class TestConservation:
    def test_all_tiles_counts_every_container(self):
        hand = create_hand([4, 5], revealed=[form_set(27, 3)], bonus=[34])
        assert Counter(all_tiles(hand)) == Counter([4, 5, 27, 27, 27, 34])

    def test_mutations_conserve_tiles(self):
        dealt = [*tiles(bamboo="1123"), 34]
        hand = create_hand(dealt)
        extract_bonus_tiles(hand)
        remove_tiles(hand, [0, 0])
        reveal_meld(hand, form_set(0, 2))
        assert Counter(all_tiles(hand)) == Counter(dealt)
