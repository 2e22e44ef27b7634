"""
Coverage solver: can a concealed tile multiset be partitioned into melds and a pair?

The search is a depth-first backtrack over the lowest remaining tile. Every
valid partition must place that tile in some group, so trying each group
shape that can start at it (pair, pung, low-anchor chow) and recursing on
the rest is complete. The first successful branch ends the search.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

import structlog

from engine.logic.hand import count_tile
from engine.logic.melds import TILES_FOR_KONG, TILES_FOR_PAIR, TILES_FOR_PUNG
from engine.logic.settings import RulesetSettings
from engine.logic.tiles import NUM_TILE_KINDS, NUMMOD, is_bonus, is_numeral, rank_position, tiles_to_counts

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from engine.logic.hand import HandState
    from engine.logic.melds import Meld

logger = structlog.get_logger()

_DEFAULT_SETTINGS = RulesetSettings()


def check(tiles: Iterable[int], needed_pair: int, needed_melds: int) -> bool:
    """
    Check if tiles split exactly into `needed_melds` melds and `needed_pair` pairs.

    Melds may be pungs or chows. No tile may be left over.
    """
    if needed_pair < 0 or needed_melds < 0:
        raise ValueError(f"needed counts must not be negative, got pair={needed_pair} melds={needed_melds}")
    counts = tiles_to_counts(tiles)
    if sum(counts) != TILES_FOR_PUNG * needed_melds + TILES_FOR_PAIR * needed_pair:
        return False
    return _covers(tuple(counts), needed_pair, needed_melds)


@lru_cache(maxsize=4096)
def _covers(counts: tuple[int, ...], needed_pair: int, needed_melds: int) -> bool:
    lowest = next((t for t in range(NUM_TILE_KINDS) if counts[t]), None)
    if lowest is None:
        return needed_pair == 0 and needed_melds == 0

    remaining = list(counts)
    available = remaining[lowest]

    if needed_pair > 0 and available >= TILES_FOR_PAIR:
        remaining[lowest] -= TILES_FOR_PAIR
        if _covers(tuple(remaining), needed_pair - 1, needed_melds):
            return True
        remaining[lowest] += TILES_FOR_PAIR

    # a fourth copy left over after a pung cannot be covered here
    if needed_melds > 0 and available >= TILES_FOR_PUNG:
        remaining[lowest] -= TILES_FOR_PUNG
        if _covers(tuple(remaining), needed_pair, needed_melds - 1):
            return True
        remaining[lowest] += TILES_FOR_PUNG

    if (
        needed_melds > 0
        and is_numeral(lowest)
        and rank_position(lowest) + 2 < NUMMOD
        and remaining[lowest + 1]
        and remaining[lowest + 2]
    ):
        for tile in (lowest, lowest + 1, lowest + 2):
            remaining[tile] -= 1
        if _covers(tuple(remaining), needed_pair, needed_melds - 1):
            return True

    return False


def remaining_requirements(revealed: Sequence[Meld], settings: RulesetSettings | None = None) -> tuple[int, int]:
    """
    Return (needed_pair, needed_melds) left after counting revealed melds.

    Either value may be negative when the revealed melds over-claim the hand.
    """
    settings = settings or _DEFAULT_SETTINGS
    sets = settings.required_sets
    pairs = settings.required_pairs
    for meld in revealed:
        if meld.counts_as_set:
            sets -= 1
        if meld.is_pair:
            pairs -= 1
    return pairs, sets


def check_coverage(
    tiles: Sequence[int],
    bonus: Sequence[int],  # noqa: ARG001
    revealed: Sequence[Meld],
    settings: RulesetSettings | None = None,
) -> bool:
    """
    Check whether a tiles + bonus + revealed situation is a complete hand.

    Bonus tiles never take part in melds; they are accepted only so callers
    can pass a whole hand's containers through.
    """
    needed_pair, needed_melds = remaining_requirements(revealed, settings)
    if needed_pair < 0 or needed_melds < 0:
        logger.debug("over-claimed hand", revealed=len(revealed))
        return False
    return check(tiles, needed_pair, needed_melds)


def get_waiting_tiles(hand: HandState, settings: RulesetSettings | None = None) -> set[int]:
    """
    Find all tile kinds that would complete the hand if added to it.

    Kinds the player already holds four of are skipped.
    """
    waiting = set()
    for tile in range(NUM_TILE_KINDS):
        if is_bonus(tile) or count_tile(hand, tile) >= TILES_FOR_KONG:
            continue
        if check_coverage([*hand.tiles, tile], hand.bonus, hand.revealed, settings):
            waiting.add(tile)
    return waiting
