"""
Ruleset facade: the contract the transport layer consumes, and the minimal ruleset.

A ruleset composes claim legality, coverage checking and hand rotation, and
delegates scoring and AI decisions to injected collaborators instead of
subclassing them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import structlog

from engine.logic import claims, coverage
from engine.logic.enums import WIN_TYPES, ClaimType
from engine.logic.exceptions import InvalidClaimError, UnsupportedSettingsError
from engine.logic.hand import copy_hand
from engine.logic.settings import RulesetSettings, validate_settings
from engine.logic.types import ClaimRequest, ClaimVerdict

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from engine.logic.hand import HandState
    from engine.logic.melds import Meld

logger = structlog.get_logger()


class Scoring(Protocol):
    """External scoring collaborator. Returns one point delta per player."""

    def score(self, players: Sequence[HandState], wind_offset: int, wind_of_the_round: int) -> list[int]: ...

    def process_illegal_win(self, players: Sequence[HandState], seat: int) -> list[int]: ...


class AIPlayer(Protocol):
    """External AI collaborator. The engine only hands it the ruleset."""

    def choose_discard(self, ruleset: Ruleset, hand: HandState) -> int: ...

    def choose_claim(self, ruleset: Ruleset, hand: HandState, tile: int) -> ClaimRequest: ...


class Ruleset(Protocol):
    """Contract every ruleset implements."""

    settings: RulesetSettings

    def get_start_wind(self) -> int: ...

    def get_ai(self) -> AIPlayer | None: ...

    def can_claim(
        self,
        hand: HandState,
        tile: int,
        claim_type: ClaimType,
        win_type: ClaimType | None = None,
    ) -> bool: ...

    def can_claim_self_drawn_win(self, hand: HandState) -> bool: ...

    def evaluate_claim(self, hand: HandState, request: ClaimRequest) -> ClaimVerdict: ...

    def process_claim(
        self,
        hand: HandState,
        tile: int,
        claim_type: ClaimType,
        win_type: ClaimType | None = None,
    ) -> Meld: ...

    def award_winning_claim(self, hand: HandState, tile: int, win_type: ClaimType) -> Meld: ...

    def check_coverage(self, tiles: Sequence[int], bonus: Sequence[int], revealed: Sequence[Meld]) -> bool: ...

    def score(self, players: Sequence[HandState], wind_offset: int, wind_of_the_round: int) -> list[int]: ...

    def rotate(self, won: bool) -> int: ...  # noqa: FBT001

    def resolve_illegal_win(self, players: Sequence[HandState], seat: int) -> list[int]: ...


_REGISTRY: dict[str, type] = {}


def register_ruleset(name: str) -> Callable[[type], type]:
    """Register a ruleset class under a name for lookup from configuration."""

    def decorator(cls: type) -> type:
        _REGISTRY[name] = cls
        return cls

    return decorator


def get_ruleset_class(name: str) -> type:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnsupportedSettingsError(
            f"unknown ruleset {name!r} (available: {', '.join(available_rulesets())})",
        ) from None


def available_rulesets() -> list[str]:
    return sorted(_REGISTRY)


@register_ruleset("minimal")
class MinimalRuleset:
    """
    The simplest verification possible: a hand wins if it forms four sets and a pair.

    Rotation always advances one seat, whether the hand was won or drawn.
    """

    def __init__(
        self,
        scoring: Scoring,
        ai: AIPlayer | None = None,
        settings: RulesetSettings | None = None,
    ) -> None:
        self.settings = settings or RulesetSettings()
        validate_settings(self.settings)
        self._scoring = scoring
        self._ai = ai

    def get_start_wind(self) -> int:
        return self.settings.start_wind

    def get_ai(self) -> AIPlayer | None:
        return self._ai

    def can_claim(
        self,
        hand: HandState,
        tile: int,
        claim_type: ClaimType,
        win_type: ClaimType | None = None,
    ) -> bool:
        return claims.can_claim(hand, tile, claim_type, win_type, self.settings)

    def can_claim_self_drawn_win(self, hand: HandState) -> bool:
        return claims.can_claim_self_drawn_win(hand, self.settings)

    def evaluate_claim(self, hand: HandState, request: ClaimRequest) -> ClaimVerdict:
        """
        Check a claim request and report the meld it would form.
        """
        legal = self.can_claim(hand, request.tile, request.claim_type, request.win_type)
        if not legal:
            logger.debug("claim rejected", tile=request.tile, claim_type=request.claim_type)
            return ClaimVerdict(legal=False, request=request)
        speculative = copy_hand(hand)
        meld = claims.apply_claim(speculative, request.tile, request.claim_type, request.win_type)
        return ClaimVerdict(legal=True, request=request, meld=meld)

    def process_claim(
        self,
        hand: HandState,
        tile: int,
        claim_type: ClaimType,
        win_type: ClaimType | None = None,
    ) -> Meld:
        """
        Move the claimed meld's tiles from the live hand into a revealed meld.

        The claim must already have been validated; a hand that lacks the
        tiles raises TileNotHeldError.
        """
        meld = claims.apply_claim(hand, tile, claim_type, win_type)
        logger.info("claim processed", tile=tile, claim_type=claim_type, meld=list(meld.tiles))
        return meld

    def award_winning_claim(self, hand: HandState, tile: int, win_type: ClaimType) -> Meld:
        if win_type not in WIN_TYPES:
            raise InvalidClaimError(f"{win_type} is not a winning meld shape")
        return self.process_claim(hand, tile, ClaimType.WIN, win_type)

    def check_coverage(self, tiles: Sequence[int], bonus: Sequence[int], revealed: Sequence[Meld]) -> bool:
        return coverage.check_coverage(tiles, bonus, revealed, self.settings)

    def score(self, players: Sequence[HandState], wind_offset: int, wind_of_the_round: int) -> list[int]:
        return self._scoring.score(players, wind_offset, wind_of_the_round)

    def rotate(self, won: bool) -> int:  # noqa: FBT001, ARG002
        """Seats to rotate after a hand; the minimal ruleset also rotates on a draw."""
        return self.settings.rotation

    def resolve_illegal_win(self, players: Sequence[HandState], seat: int) -> list[int]:
        logger.warning("illegal win declared", seat=seat)
        return self._scoring.process_illegal_win(players, seat)
