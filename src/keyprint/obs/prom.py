"""Prometheus instrumentation for key parsing.

One counter, labelled by technology (``unknown`` when nothing matched) and
result (``valid`` / ``invalid``). Labels are bounded by the registry size.
"""
from __future__ import annotations
from prometheus_client import (
    CollectorRegistry,
    Counter,
    generate_latest,
)

from ..config import load_settings

# Registry must be created before metric objects reference it.
REGISTRY = CollectorRegistry()

KEYS_PARSED = Counter(
    "keyprint_keys_parsed_total",
    "Public keys run through parse_and_validate.",
    ["technology", "result"],
    registry=REGISTRY,
)


def record_parse(technology: str | None, valid: bool) -> None:
    if not load_settings().metrics_enabled:
        return
    KEYS_PARSED.labels(
        technology=technology or "unknown",
        result="valid" if valid else "invalid",
    ).inc()


def render_metrics() -> bytes:
    return generate_latest(REGISTRY)


__all__ = ["REGISTRY", "KEYS_PARSED", "record_parse", "render_metrics"]
