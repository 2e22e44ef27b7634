"""Typed domain exceptions for rule engine contract violations.

Expected "not legal" outcomes are plain boolean verdicts and never raise.
Subclasses of GameRuleError signal that a caller mutated a hand in a way
that is inconsistent with its tracked state, and should surface loudly.
"""


class GameRuleError(Exception):
    """Base exception for rule engine contract violations."""


class TileNotHeldError(GameRuleError):
    """A mutation asked to remove a tile instance the hand does not hold.

    Attributes:
        tile: The tile that could not be removed.
        held: How many instances of the tile the hand held when the request was made.
        requested: How many instances the request needed.

    """

    def __init__(self, *, tile: int, held: int, requested: int) -> None:
        self.tile = tile
        self.held = held
        self.requested = requested
        super().__init__(f"tile {tile} not held: requested {requested}, held {held}")


class InvalidClaimError(GameRuleError):
    """A claim type that forms no meld was asked to be applied to a hand."""


class UnsupportedSettingsError(GameRuleError):
    """Ruleset settings contain values the engine cannot honour."""
