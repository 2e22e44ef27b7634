"""
Hand state for a single player during one hand of play.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, Field

from engine.logic.exceptions import TileNotHeldError
from engine.logic.melds import Meld  # noqa: TC001
from engine.logic.tiles import is_bonus

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = structlog.get_logger()


class HandState(BaseModel):
    """
    A player's concealed tiles, revealed melds and bonus tiles.

    Every tile the player holds lives in exactly one of the three containers.
    The order of `tiles` is irrelevant except for display; `revealed` keeps
    claim order.
    """

    tiles: list[int] = Field(default_factory=list)
    revealed: list[Meld] = Field(default_factory=list)
    bonus: list[int] = Field(default_factory=list)


def copy_hand(hand: HandState) -> HandState:
    """Return an independent structural copy of a hand, for speculative evaluation."""
    return hand.model_copy(deep=True)


def count_tile(hand: HandState, tile: int) -> int:
    """Count the concealed instances of a tile."""
    return hand.tiles.count(tile)


def all_tiles(hand: HandState) -> list[int]:
    """
    Flatten every tile the player holds (concealed, revealed and bonus).
    """
    result = list(hand.tiles)
    for meld in hand.revealed:
        result.extend(meld.tiles)
    result.extend(hand.bonus)
    return result


def _require_held(hand: HandState, tiles: Iterable[int]) -> list[int]:
    requested = list(tiles)
    held = Counter(hand.tiles)
    for tile, needed in Counter(requested).items():
        if held[tile] < needed:
            raise TileNotHeldError(tile=tile, held=held[tile], requested=needed)
    return requested


def remove_tiles(hand: HandState, tiles: Iterable[int]) -> None:
    """
    Remove one concealed instance per listed tile.

    The whole request is checked before anything is removed, so a failed
    call leaves the hand unchanged.
    """
    for tile in _require_held(hand, tiles):
        hand.tiles.remove(tile)


def reveal_meld(hand: HandState, meld: Meld) -> None:
    hand.revealed.append(meld)


def add_tile(hand: HandState, tile: int) -> None:
    """Add a drawn or dealt tile to the concealed tiles."""
    hand.tiles.append(tile)


def discard_tile(hand: HandState, tile: int) -> None:
    remove_tiles(hand, [tile])


def move_to_bonus(hand: HandState, tiles: Iterable[int]) -> None:
    """
    Move bonus tiles from the concealed tiles to the bonus area.

    The dealer owes the player one replacement draw per moved tile.
    """
    requested = _require_held(hand, tiles)
    for tile in requested:
        if not is_bonus(tile):
            raise ValueError(f"tile {tile} is not a bonus tile")
    for tile in requested:
        hand.tiles.remove(tile)
        hand.bonus.append(tile)


def extract_bonus_tiles(hand: HandState) -> list[int]:
    """
    Move every concealed bonus tile to the bonus area and return them.
    """
    found = [t for t in hand.tiles if is_bonus(t)]
    if found:
        move_to_bonus(hand, found)
        logger.debug("bonus tiles set aside", tiles=found)
    return found
