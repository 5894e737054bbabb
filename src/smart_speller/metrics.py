"""Shared metrics module for smart_speller.

Metrics are created once per process and shared by every speller instance,
preventing duplicate registration errors when the index is rebuilt (tests, CLI).
"""

from __future__ import annotations

from typing import Any

from prometheus_client import REGISTRY, Counter, Gauge, Histogram

from smart_speller.logging_utils import create_service_logger

logger = create_service_logger("smart_speller.metrics")

# Global metrics instances (created once, shared by every speller)
_metrics: dict[str, Any] | None = None

_METRIC_NAMES: dict[str, str] = {
    "index_build_duration_seconds": "smart_speller_index_build_duration_seconds",
    "vocabulary_size": "smart_speller_vocabulary_size",
    "deletion_variants": "smart_speller_deletion_variants",
    "lookups_total": "smart_speller_lookups_total",
    "sentence_expansions_total": "smart_speller_sentence_expansions_total",
    "sentence_candidates": "smart_speller_sentence_candidates",
}


def get_metrics() -> dict[str, Any]:
    """Get or create shared metrics instances.

    Returns:
        Dictionary of metric instances keyed by metric name
    """
    global _metrics

    if _metrics is None:
        _metrics = _create_metrics()
        logger.debug("Shared metrics initialized", metrics=list(_metrics.keys()))

    return _metrics


def _create_metrics() -> dict[str, Any]:
    """Create Prometheus metrics for smart_speller.

    Returns:
        Dictionary of metric instances keyed by metric name
    """
    try:
        return {
            "index_build_duration_seconds": Histogram(
                _METRIC_NAMES["index_build_duration_seconds"],
                "Time spent loading the corpus and building the deletion index",
                buckets=(0.01, 0.05, 0.1, 0.5, 1, 2, 5, 10, 30, 60),
                registry=REGISTRY,
            ),
            "vocabulary_size": Gauge(
                _METRIC_NAMES["vocabulary_size"],
                "Number of distinct words in the loaded frequency table",
                registry=REGISTRY,
            ),
            "deletion_variants": Gauge(
                _METRIC_NAMES["deletion_variants"],
                "Number of distinct deletion variants in the index",
                registry=REGISTRY,
            ),
            "lookups_total": Counter(
                _METRIC_NAMES["lookups_total"],
                "Total single word lookups by outcome",
                ["outcome"],
                registry=REGISTRY,
            ),
            "sentence_expansions_total": Counter(
                _METRIC_NAMES["sentence_expansions_total"],
                "Total sentence expansions performed",
                registry=REGISTRY,
            ),
            "sentence_candidates": Histogram(
                _METRIC_NAMES["sentence_candidates"],
                "Distribution of candidate sentences produced per expansion",
                buckets=(1, 2, 4, 8, 12, 16, 24, 32, 64),
                registry=REGISTRY,
            ),
        }
    except ValueError as e:
        if "Duplicated timeseries" in str(e):
            logger.warning(f"Metrics already exist in registry: {e} - reusing existing collectors.")
            return _get_existing_metrics()
        raise


def _get_existing_metrics() -> dict[str, Any]:
    """Return already-registered collectors from the global Prometheus REGISTRY."""
    existing: dict[str, Any] = {}
    registry_collectors = getattr(REGISTRY, "_names_to_collectors", {})

    for logical_key, metric_name in _METRIC_NAMES.items():
        collector = registry_collectors.get(metric_name)
        if collector is None:
            # Counters register under the "_total"-stripped name
            collector = registry_collectors.get(metric_name.removesuffix("_total"))
        if collector is not None:
            existing[logical_key] = collector
        else:
            logger.warning(f"Metric '{metric_name}' not found in registry")

    return existing
