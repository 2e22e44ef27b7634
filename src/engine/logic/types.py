"""
Pydantic models for claim data that crosses the engine boundary.

Contains the claim request handed in by the transport layer, the structured
verdict returned by the ruleset, and the outcome of claim arbitration.
"""

from pydantic import BaseModel, ConfigDict

from engine.logic.enums import ClaimType
from engine.logic.melds import Meld


class ClaimRequest(BaseModel):
    """An attempted claim on a contested tile."""

    model_config = ConfigDict(frozen=True)

    tile: int
    claim_type: ClaimType
    win_type: ClaimType | None = None  # meld shape the winning tile completes


class ClaimVerdict(BaseModel):
    """Result of evaluating a claim request against a hand."""

    model_config = ConfigDict(frozen=True)

    legal: bool
    request: ClaimRequest
    meld: Meld | None = None  # meld the claim would form, when legal


class ClaimResolution(BaseModel):
    """The claim that wins arbitration over a discard."""

    model_config = ConfigDict(frozen=True)

    seat: int
    request: ClaimRequest
