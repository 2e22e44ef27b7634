"""
Claim legality checks (pair, chow, pung, kong, win) and claim application.

Every can_* function is a pure query: it never mutates the hand it is given.
Win checks apply the claim to a deep copy of the hand and run the coverage
solver on the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from engine.logic.coverage import check_coverage
from engine.logic.enums import CHOW_CLAIMS, WIN_TYPES, ClaimType
from engine.logic.hand import copy_hand, count_tile, remove_tiles, reveal_meld
from engine.logic.melds import TILES_FOR_KONG, chow_tiles, form_claim_meld

if TYPE_CHECKING:
    from engine.logic.hand import HandState
    from engine.logic.melds import Meld
    from engine.logic.settings import RulesetSettings

logger = structlog.get_logger()

# tiles the hand must already hold for each set claim
TILES_IN_HAND_FOR_PAIR = 1
TILES_IN_HAND_FOR_PUNG = 2
TILES_IN_HAND_FOR_KONG = 3


def can_claim(
    hand: HandState,
    tile: int,
    claim_type: ClaimType,
    win_type: ClaimType | None = None,
    settings: RulesetSettings | None = None,
) -> bool:
    """
    Check if a player can claim `tile` for the purpose they indicated.

    Unknown or non-forming claim types are rejected, not raised.
    """
    if claim_type == ClaimType.PAIR:
        # a pair is only ever claimed to win
        return win_type == ClaimType.PAIR and can_claim_set(hand, tile, TILES_IN_HAND_FOR_PAIR)
    if claim_type in CHOW_CLAIMS:
        return can_claim_chow(hand, tile, claim_type)
    if claim_type == ClaimType.PUNG:
        return can_claim_set(hand, tile, TILES_IN_HAND_FOR_PUNG)
    if claim_type == ClaimType.KONG:
        return can_claim_set(hand, tile, TILES_IN_HAND_FOR_KONG)
    if claim_type == ClaimType.WIN:
        return can_claim_win(hand, tile, win_type, settings)
    return False


def can_claim_chow(hand: HandState, tile: int, claim_type: ClaimType) -> bool:
    """
    Check if the player holds the two other tiles of the requested chow.

    Honour and bonus tiles never form a chow, and runs that would spill
    into a neighbouring suit are never considered.
    """
    run = chow_tiles(tile, claim_type)
    if run is None:
        return False
    others = [t for t in run if t != tile]
    return all(count_tile(hand, t) > 0 for t in others)


def can_claim_set(hand: HandState, tile: int, in_hand_count: int) -> bool:
    """
    Check if the player can form a set of in_hand_count + 1 identical tiles.
    """
    return count_tile(hand, tile) >= in_hand_count


def can_declare_concealed_kong(hand: HandState, tile: int) -> bool:
    """A concealed kong is declared from four tiles already in hand, no discard involved."""
    return count_tile(hand, tile) >= TILES_FOR_KONG


def can_claim_win(
    hand: HandState,
    tile: int,
    win_type: ClaimType | None,
    settings: RulesetSettings | None = None,
) -> bool:
    """
    Check if claiming `tile` completes a winning hand.

    First the implied meld must be claimable at all; only then is the claim
    applied to a copy of the hand and the remainder checked for coverage.
    """
    if win_type not in WIN_TYPES:
        return False
    if not can_claim(hand, tile, win_type, win_type, settings):
        return False

    speculative = copy_hand(hand)
    apply_claim(speculative, tile, ClaimType.WIN, win_type)
    covered = check_coverage(speculative.tiles, speculative.bonus, speculative.revealed, settings)
    logger.debug("win claim evaluated", tile=tile, win_type=win_type, covered=covered)
    return covered


def can_claim_self_drawn_win(hand: HandState, settings: RulesetSettings | None = None) -> bool:
    """
    Check if the hand is complete as it stands.

    The self-drawn winning tile is already among the concealed tiles.
    """
    return check_coverage(hand.tiles, hand.bonus, hand.revealed, settings)


def apply_claim(
    hand: HandState,
    tile: int,
    claim_type: ClaimType,
    win_type: ClaimType | None = None,
) -> Meld:
    """
    Form the claimed meld from the hand's tiles and reveal it.

    The claimed tile itself comes from the discard, so the hand supplies
    every other meld tile. A concealed kong takes all four tiles from hand.
    Raises TileNotHeldError if the hand lacks a required tile.
    """
    meld = form_claim_meld(tile, claim_type, win_type)
    from_hand = list(meld.tiles)
    if claim_type != ClaimType.CONCEALED_KONG:
        from_hand.remove(tile)
    remove_tiles(hand, from_hand)
    reveal_meld(hand, meld)
    return meld
