"""Hand builders shared by the unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from engine.logic.hand import HandState
from engine.logic.tiles import string_to_tiles

if TYPE_CHECKING:
    from collections.abc import Sequence

    from engine.logic.melds import Meld


def create_hand(
    tiles: Sequence[int] | None = None,
    *,
    revealed: Sequence[Meld] | None = None,
    bonus: Sequence[int] | None = None,
) -> HandState:
    """Create a HandState with sensible defaults for testing."""
    return HandState(
        tiles=list(tiles) if tiles is not None else [],
        revealed=list(revealed) if revealed is not None else [],
        bonus=list(bonus) if bonus is not None else [],
    )


def tiles(**suits: str) -> list[int]:
    """Shorthand for string_to_tiles, e.g. tiles(bamboo="123", honours="11")."""
    return string_to_tiles(**suits)


def tile(**suit: str) -> int:
    """Single tile shorthand, e.g. tile(dots="5")."""
    (result,) = string_to_tiles(**suit)
    return result
