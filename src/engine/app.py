"""Engine bootstrap: logging setup and ruleset construction from configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from engine.logic.ruleset import get_ruleset_class
from engine.logic.settings import EngineSettings
from shared.logging import setup_logging

if TYPE_CHECKING:
    from engine.logic.ruleset import AIPlayer, Ruleset, Scoring
    from engine.logic.settings import RulesetSettings

logger = structlog.get_logger()


def configure(engine_settings: EngineSettings | None = None) -> Path | None:
    """Set up logging for the engine. Returns the log file path, if one was created."""
    engine_settings = engine_settings or EngineSettings()
    log_dir = Path(engine_settings.log_dir) if engine_settings.log_dir else None
    return setup_logging(log_dir=log_dir)


def create_ruleset(
    scoring: Scoring,
    ai: AIPlayer | None = None,
    settings: RulesetSettings | None = None,
    engine_settings: EngineSettings | None = None,
) -> Ruleset:
    """
    Build the configured ruleset with its collaborators injected.

    Raises UnsupportedSettingsError for an unknown ruleset name or
    unsupported ruleset settings.
    """
    engine_settings = engine_settings or EngineSettings()
    ruleset_cls = get_ruleset_class(engine_settings.ruleset)
    ruleset = ruleset_cls(scoring=scoring, ai=ai, settings=settings)
    logger.info("ruleset created", ruleset=engine_settings.ruleset)
    return ruleset
