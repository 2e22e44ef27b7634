"""
String enum definitions for tile, meld and claim concepts.
"""

from enum import Enum


class Suit(str, Enum):
    """Tile suits. The first three are numeral suits."""

    BAMBOO = "bamboo"
    CHARACTERS = "characters"
    DOTS = "dots"
    HONOURS = "honours"
    BONUS = "bonus"


NUMERAL_SUITS: tuple[Suit, ...] = (Suit.BAMBOO, Suit.CHARACTERS, Suit.DOTS)


class ClaimType(str, Enum):
    """Claims a player can make on a discarded tile (and the shapes a win completes)."""

    PAIR = "pair"
    CHOW1 = "chow1"  # claimed tile is the lowest of the run (e.g. 3 in 345)
    CHOW2 = "chow2"  # claimed tile is the middle of the run
    CHOW3 = "chow3"  # claimed tile is the highest of the run
    PUNG = "pung"
    KONG = "kong"
    CONCEALED_KONG = "concealed_kong"
    WIN = "win"
    NOTHING = "nothing"


CHOW_CLAIMS: frozenset[ClaimType] = frozenset({ClaimType.CHOW1, ClaimType.CHOW2, ClaimType.CHOW3})

# shapes a winning tile may complete
WIN_TYPES: frozenset[ClaimType] = frozenset(
    {ClaimType.PAIR, ClaimType.CHOW1, ClaimType.CHOW2, ClaimType.CHOW3, ClaimType.PUNG},
)

# priority order for contested discards: win > kong/pung > chow
CLAIM_PRIORITY: dict[ClaimType, int] = {
    ClaimType.WIN: 0,
    ClaimType.KONG: 1,
    ClaimType.PUNG: 1,
    ClaimType.CHOW1: 2,
    ClaimType.CHOW2: 2,
    ClaimType.CHOW3: 2,
}

class MeldKind(str, Enum):
    """Shapes a revealed meld can take."""

    PAIR = "pair"
    CHOW = "chow"
    PUNG = "pung"
    KONG = "kong"


class WindName(str, Enum):
    """Wind direction names."""

    EAST = "East"
    SOUTH = "South"
    WEST = "West"
    NORTH = "North"
