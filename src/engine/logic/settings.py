"""Ruleset settings and runtime engine configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

from engine.logic.exceptions import UnsupportedSettingsError

NUM_PLAYERS = 4


class RulesetSettings(BaseModel):
    """
    Configurable rules for the claim-and-completion engine.

    All fields default to the minimal ruleset's behaviour.
    """

    model_config = ConfigDict(frozen=True)

    # --- Hand Structure ---
    required_sets: int = 4
    required_pairs: int = 1

    # --- Hand Flow ---
    start_wind: int = 0
    rotation: int = 1  # seats to advance after a win or a draw
    starting_points: int = 0
    end_hand_on_illegal_win: bool = True

    # --- Claim Arbitration ---
    chow_only_from_next_seat: bool = True


class EngineSettings(BaseSettings):
    """Runtime configuration read from ENGINE_* environment variables."""

    model_config = {"env_prefix": "ENGINE_"}

    ruleset: str = Field(default="minimal", min_length=1)
    log_dir: str | None = None


def validate_settings(settings: RulesetSettings) -> None:
    """Validate that all settings values are supported by the engine.

    Raises UnsupportedSettingsError listing every unsupported value.
    """
    errors: list[str] = []

    if settings.required_sets < 0:
        errors.append(f"required_sets={settings.required_sets} must not be negative")

    if settings.required_pairs not in (0, 1):
        errors.append(f"required_pairs={settings.required_pairs} is not supported (0 or 1 pair only)")

    if not (0 <= settings.start_wind < NUM_PLAYERS):
        errors.append(f"start_wind={settings.start_wind} must be a seat index 0-{NUM_PLAYERS - 1}")

    if not (0 <= settings.rotation < NUM_PLAYERS):
        errors.append(f"rotation={settings.rotation} must be within 0-{NUM_PLAYERS - 1}")

    if errors:
        raise UnsupportedSettingsError("; ".join(errors))
