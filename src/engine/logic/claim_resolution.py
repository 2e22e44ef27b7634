"""Claim arbitration -- pick the one claim that takes a contested discard.

Only one discard is contested at a time, and it must be resolved before play
continues. When several players claim it, the highest-priority claim type
wins (win > kong/pung > chow); equal priorities go to the claimant nearest
the discarder in turn order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from engine.logic.enums import CHOW_CLAIMS, CLAIM_PRIORITY
from engine.logic.settings import NUM_PLAYERS
from engine.logic.types import ClaimResolution

if TYPE_CHECKING:
    from collections.abc import Mapping

    from engine.logic.hand import HandState
    from engine.logic.ruleset import Ruleset
    from engine.logic.types import ClaimRequest

logger = structlog.get_logger()


def seat_distance(discarder_seat: int, seat: int) -> int:
    """Turn-order distance from the discarder: 1 for the next player, 3 for the previous one."""
    return (seat - discarder_seat) % NUM_PLAYERS


def _is_eligible(
    ruleset: Ruleset,
    hand: HandState,
    discarder_seat: int,
    seat: int,
    request: ClaimRequest,
) -> bool:
    # only claims that take the discard into a meld are contested
    if request.claim_type not in CLAIM_PRIORITY or seat == discarder_seat:
        return False
    if (
        request.claim_type in CHOW_CLAIMS
        and ruleset.settings.chow_only_from_next_seat
        and seat_distance(discarder_seat, seat) != 1
    ):
        return False
    return ruleset.can_claim(hand, request.tile, request.claim_type, request.win_type)


def resolve_claims(
    ruleset: Ruleset,
    hands: Mapping[int, HandState],
    discarder_seat: int,
    tile: int,
    requests: Mapping[int, ClaimRequest],
) -> ClaimResolution | None:
    """
    Pick the winning claim on a discard, or None when nobody may take it.

    Requests for a different tile than the discard, from the discarder, or
    that the ruleset rejects are dropped before priorities are compared.
    """
    best: ClaimResolution | None = None
    best_key: tuple[int, int] | None = None

    for seat, request in requests.items():
        if request.tile != tile or not _is_eligible(ruleset, hands[seat], discarder_seat, seat, request):
            logger.debug("claim dropped from arbitration", seat=seat, claim_type=request.claim_type)
            continue
        key = (CLAIM_PRIORITY[request.claim_type], seat_distance(discarder_seat, seat))
        if best_key is None or key < best_key:
            best = ClaimResolution(seat=seat, request=request)
            best_key = key

    if best is not None:
        logger.info("claim awarded", seat=best.seat, claim_type=best.request.claim_type, tile=tile)
    return best
