"""Startup setup for the process-wide spell corrector.

The corrector is built by one explicit ``initialize_speller`` call before any
query is served and is only read afterwards. ``get_speller`` never builds
lazily, so a missing startup call fails loudly instead of paying the index
construction cost inside the first request.
"""

from __future__ import annotations

from smart_speller.config import Settings
from smart_speller.config import settings as default_settings
from smart_speller.error_handling import raise_initialization_failed
from smart_speller.logging_utils import create_service_logger
from smart_speller.metrics import get_metrics
from smart_speller.spelling.speller import SmartSpeller

logger = create_service_logger("smart_speller.startup_setup")

_speller: SmartSpeller | None = None


def initialize_speller(settings: Settings | None = None) -> SmartSpeller:
    """Build the shared spell corrector.

    Args:
        settings: Settings to build from; the module level settings by default.

    Returns:
        The shared SmartSpeller. A second call returns the existing instance
        without rebuilding it.
    """
    global _speller

    if _speller is not None:
        logger.warning("Spell corrector already initialized, reusing existing instance")
        return _speller

    settings = settings or default_settings
    logger.info(
        "Initializing spell corrector",
        corpus=settings.effective_corpus_path,
        max_distance=settings.MAX_EDIT_DISTANCE,
    )

    metrics = get_metrics() if settings.ENABLE_METRICS else None
    _speller = SmartSpeller.from_settings(settings, metrics=metrics)

    logger.info("Spell corrector initialization complete")
    return _speller


def get_speller() -> SmartSpeller:
    """Return the shared spell corrector built by ``initialize_speller``."""
    if _speller is None:
        raise_initialization_failed(
            service="smart_speller",
            operation="get_speller",
            component="speller",
            message="Spell corrector requested before initialize_speller() was called",
        )
    return _speller


def reset_speller() -> None:
    """Drop the shared spell corrector (tests and reconfiguration only)."""
    global _speller
    _speller = None
