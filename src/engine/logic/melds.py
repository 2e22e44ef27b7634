"""
Immutable meld representation and meld builders (pair, chow, pung, kong).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from engine.logic.enums import CHOW_CLAIMS, ClaimType, MeldKind
from engine.logic.exceptions import InvalidClaimError
from engine.logic.tiles import NUMMOD, is_numeral, rank_position, suit_of

# meld size constants
TILES_FOR_PAIR = 2
TILES_FOR_PUNG = 3
TILES_FOR_KONG = 4

_SIZE_FOR_KIND: dict[MeldKind, int] = {
    MeldKind.PAIR: TILES_FOR_PAIR,
    MeldKind.CHOW: TILES_FOR_PUNG,
    MeldKind.PUNG: TILES_FOR_PUNG,
    MeldKind.KONG: TILES_FOR_KONG,
}


class Meld(BaseModel):
    """
    Immutable representation of a meld.

    A meld is a pair, pung or kong of identical tiles, or a chow of three
    consecutive numeral tiles of one suit. Only a self-declared kong is
    concealed; every claimed meld is revealed.
    """

    model_config = ConfigDict(frozen=True)

    tiles: tuple[int, ...]
    kind: MeldKind
    concealed: bool = False

    @model_validator(mode="after")
    def _check_shape(self) -> Meld:
        if len(self.tiles) != _SIZE_FOR_KIND[self.kind]:
            raise ValueError(f"{self.kind.value} needs {_SIZE_FOR_KIND[self.kind]} tiles, got {len(self.tiles)}")
        if self.kind == MeldKind.CHOW:
            if not is_run(self.tiles):
                raise ValueError(f"chow tiles must be a same-suit numeral run, got {self.tiles}")
        elif len(set(self.tiles)) != 1:
            raise ValueError(f"{self.kind.value} tiles must be identical, got {self.tiles}")
        if self.concealed and self.kind != MeldKind.KONG:
            raise ValueError("only a kong can be concealed")
        return self

    @property
    def counts_as_set(self) -> bool:
        """Chows, pungs and kongs count towards the required sets."""
        return len(self.tiles) >= TILES_FOR_PUNG

    @property
    def is_pair(self) -> bool:
        return len(self.tiles) == TILES_FOR_PAIR


def is_run(tiles: tuple[int, ...] | list[int]) -> bool:
    """
    Check if tiles form three consecutive numeral tiles of one suit.
    """
    if len(tiles) != TILES_FOR_PUNG:
        return False
    low, mid, high = sorted(tiles)
    if not all(is_numeral(t) for t in (low, mid, high)):
        return False
    if not suit_of(low) == suit_of(mid) == suit_of(high):
        return False
    return mid == low + 1 and high == low + 2


def form_set(tile: int, howmany: int, *, concealed: bool = False) -> Meld:
    """
    Build a meld of identical tiles: 2 = pair, 3 = pung, 4 = kong.
    """
    kinds = {TILES_FOR_PAIR: MeldKind.PAIR, TILES_FOR_PUNG: MeldKind.PUNG, TILES_FOR_KONG: MeldKind.KONG}
    return Meld(tiles=(tile,) * howmany, kind=kinds[howmany], concealed=concealed)


def chow_tiles(tile: int, chow_type: ClaimType) -> tuple[int, int, int] | None:
    """
    Return the run of three tiles a chow claim on `tile` would form.

    Returns None when the run would fall outside the tile's suit, including
    honour and bonus tiles, which never form a chow.
    """
    if not is_numeral(tile):
        return None
    position = rank_position(tile)
    if chow_type == ClaimType.CHOW1 and position + 2 < NUMMOD:
        return (tile, tile + 1, tile + 2)
    if chow_type == ClaimType.CHOW2 and position > 0 and position + 1 < NUMMOD:
        return (tile - 1, tile, tile + 1)
    if chow_type == ClaimType.CHOW3 and position > 1:
        return (tile - 2, tile - 1, tile)
    return None


def form_chow(tile: int, chow_type: ClaimType) -> Meld:
    """
    Build the chow a claim of the given variant forms around `tile`.
    """
    run = chow_tiles(tile, chow_type)
    if run is None:
        raise InvalidClaimError(f"tile {tile} cannot anchor a {chow_type.value}")
    return Meld(tiles=run, kind=MeldKind.CHOW)


def form_claim_meld(tile: int, claim_type: ClaimType, win_type: ClaimType | None = None) -> Meld:
    """
    Build the meld a claim forms with `tile`.

    For a win claim, the meld shape is given by `win_type`.
    """
    shape = win_type if claim_type == ClaimType.WIN else claim_type
    if claim_type == ClaimType.WIN and shape == ClaimType.PAIR:
        return form_set(tile, TILES_FOR_PAIR)
    if shape in CHOW_CLAIMS:
        return form_chow(tile, shape)
    if shape == ClaimType.PUNG:
        return form_set(tile, TILES_FOR_PUNG)
    if claim_type == ClaimType.KONG:
        return form_set(tile, TILES_FOR_KONG)
    if claim_type == ClaimType.CONCEALED_KONG:
        return form_set(tile, TILES_FOR_KONG, concealed=True)
    raise InvalidClaimError(f"claim {claim_type.value} with win type {win_type} forms no meld")
