"""
Tile representation utilities.

Tiles are plain ints identifying a tile kind; duplicates share the same value.
"""

from collections.abc import Iterable

from engine.logic.enums import NUMERAL_SUITS, Suit, WindName

# tile ranges (one index per tile kind)
# bamboo: 0-8 (1-9)
# characters: 9-17 (1-9)
# dots: 18-26 (1-9)
# honours: 27-33 (E, S, W, N, red, green, white)
# bonus: 34-41 (flowers 1-4, seasons 1-4)

BAMBOO_START = 0
BAMBOO_END = 8
CHARACTERS_START = 9
CHARACTERS_END = 17
DOTS_START = 18
DOTS_END = 26
HONOUR_START = 27
HONOUR_END = 33
BONUS_START = 34
BONUS_END = 41

TILE_MIN = BAMBOO_START
TILE_MAX = BONUS_END
NUM_TILE_KINDS = TILE_MAX + 1

# ranks per numeral suit
NUMMOD = 9

EAST = 27
SOUTH = 28
WEST = 29
NORTH = 30
RED = 31
GREEN = 32
WHITE = 33

WINDS = [EAST, SOUTH, WEST, NORTH]
DRAGONS = [RED, GREEN, WHITE]

FLOWERS = [34, 35, 36, 37]
SEASONS = [38, 39, 40, 41]

_SUIT_RANGES: dict[Suit, tuple[int, int]] = {
    Suit.BAMBOO: (BAMBOO_START, BAMBOO_END),
    Suit.CHARACTERS: (CHARACTERS_START, CHARACTERS_END),
    Suit.DOTS: (DOTS_START, DOTS_END),
    Suit.HONOURS: (HONOUR_START, HONOUR_END),
    Suit.BONUS: (BONUS_START, BONUS_END),
}

_NUMERAL_LETTERS: dict[Suit, str] = {
    Suit.BAMBOO: "b",
    Suit.CHARACTERS: "c",
    Suit.DOTS: "d",
}

_HONOUR_SHORT_FORMS = ["E", "S", "W", "N", "R", "G", "Wh"]
_BONUS_SHORT_FORMS = ["f1", "f2", "f3", "f4", "s1", "s2", "s3", "s4"]
_NUMERAL_SHORT_FORM_LENGTH = 2

_POSITION_WINDS = [WindName.EAST, WindName.SOUTH, WindName.WEST, WindName.NORTH]


def _check_tile(tile: int) -> None:
    if not (TILE_MIN <= tile <= TILE_MAX):
        raise ValueError(f"tile must be in [{TILE_MIN}, {TILE_MAX}], got {tile}")


def suit_of(tile: int) -> Suit:
    """
    Return the suit a tile belongs to.
    """
    _check_tile(tile)
    for suit, (start, end) in _SUIT_RANGES.items():
        if start <= tile <= end:
            return suit
    raise AssertionError(f"unreachable: tile {tile} has no suit")


def is_numeral(tile: int) -> bool:
    _check_tile(tile)
    return tile < HONOUR_START


def is_honour(tile: int) -> bool:
    """
    Check if tile is an honour (wind or dragon).
    """
    _check_tile(tile)
    return HONOUR_START <= tile <= HONOUR_END


def is_bonus(tile: int) -> bool:
    """
    Check if tile is a bonus tile (flower or season).
    """
    _check_tile(tile)
    return BONUS_START <= tile <= BONUS_END


def rank_position(tile: int) -> int:
    """
    Return the 0-based position of a tile within its own suit.

    For numeral suits this is rank - 1, and is the value callers must
    bound-check against NUMMOD before treating tile + 1 or tile + 2 as
    the same suit.
    """
    start, _ = _SUIT_RANGES[suit_of(tile)]
    return tile - start


def tiles_of_suit(suit: Suit) -> list[int]:
    """
    Return every tile of a suit in rank order.
    """
    start, end = _SUIT_RANGES[suit]
    return list(range(start, end + 1))


def sort_tiles(tiles: Iterable[int]) -> list[int]:
    """Sort tiles suit-major, rank-minor."""
    return sorted(tiles)


def tiles_to_counts(tiles: Iterable[int]) -> list[int]:
    """
    Convert a list of tiles to a count array indexed by tile value.
    """
    counts = [0] * NUM_TILE_KINDS
    for tile in tiles:
        _check_tile(tile)
        counts[tile] += 1
    return counts


def tile_to_short(tile: int) -> str:
    """
    Return the short text form of a tile, e.g. "3b", "7c", "E", "f2".
    """
    suit = suit_of(tile)
    position = rank_position(tile)
    if suit in NUMERAL_SUITS:
        return f"{position + 1}{_NUMERAL_LETTERS[suit]}"
    if suit == Suit.HONOURS:
        return _HONOUR_SHORT_FORMS[position]
    return _BONUS_SHORT_FORMS[position]


def short_to_tile(text: str) -> int:
    """
    Parse the short text form of a tile back into its value.
    """
    if text in _HONOUR_SHORT_FORMS:
        return HONOUR_START + _HONOUR_SHORT_FORMS.index(text)
    if text in _BONUS_SHORT_FORMS:
        return BONUS_START + _BONUS_SHORT_FORMS.index(text)
    if len(text) == _NUMERAL_SHORT_FORM_LENGTH and text[0] in "123456789":
        for suit, letter in _NUMERAL_LETTERS.items():
            if text[1] == letter:
                return tiles_of_suit(suit)[int(text[0]) - 1]
    raise ValueError(f"unknown tile short form: {text!r}")


def tiles_to_string(tiles: Iterable[int]) -> str:
    """Render tiles as space-separated short forms, sorted."""
    return " ".join(tile_to_short(t) for t in sort_tiles(tiles))


def string_to_tiles(
    bamboo: str = "",
    characters: str = "",
    dots: str = "",
    honours: str = "",
    bonus: str = "",
) -> list[int]:
    """
    Build a tile list from rank digits per suit.

    Honours use 1-7 (E, S, W, N, red, green, white) and bonus uses 1-8
    (flowers 1-4, seasons 1-4).
    """
    result: list[int] = []
    for digits, start, end in (
        (bamboo, BAMBOO_START, BAMBOO_END),
        (characters, CHARACTERS_START, CHARACTERS_END),
        (dots, DOTS_START, DOTS_END),
        (honours, HONOUR_START, HONOUR_END),
        (bonus, BONUS_START, BONUS_END),
    ):
        for digit in digits:
            tile = start + int(digit) - 1
            if not (start <= tile <= end):
                raise ValueError(f"rank {digit} out of range for tiles {start}-{end}")
            result.append(tile)
    return result


def position_wind(seat_offset: int) -> WindName:
    """
    Return the seat wind for a position relative to the starting seat.
    """
    return _POSITION_WINDS[seat_offset % len(_POSITION_WINDS)]
