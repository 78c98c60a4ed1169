"""
SLO spec loader.

Reads SLO definitions in the Sloth ``prometheus/v1`` format:

    version: "prometheus/v1"
    service: "checkout"
    labels:
      owner: "payments"
    slos:
      - name: "availability"
        objective: 99.9
        labels:
          category: "availability"
        sli:
          events:
            error_query: sum(rate(http_requests_total{code=~"5.."}[{{.window}}]))
            total_query: sum(rate(http_requests_total[{{.window}}]))
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any

import structlog
import yaml

from slirules.config.settings import get_settings
from slirules.core.errors import SpecLoadError
from slirules.prometheus.durations import parse_prom_duration
from slirules.recording_rules.labels import merge_labels
from slirules.slos.models import SLI, SLO

logger = structlog.get_logger()

SUPPORTED_VERSION = "prometheus/v1"


def load_slo_spec(file_path: str | Path, time_window: timedelta | None = None) -> list[SLO]:
    """
    Load the SLOs of a spec file.

    Args:
        file_path: Path to spec YAML file
        time_window: SLO compliance period (default: settings.default_time_window)

    Returns:
        List of SLOs in file order

    Raises:
        SpecLoadError: If the file is missing, not YAML, or malformed
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise SpecLoadError(f"Spec file not found: {file_path}", details={"path": str(file_path)})

    try:
        with open(file_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SpecLoadError(f"Invalid YAML in {file_path}: {e}") from e

    if time_window is None:
        time_window = parse_prom_duration(get_settings().default_time_window)

    slos = parse_slo_spec(data, time_window)
    logger.debug("slo_spec_loaded", path=str(file_path), slos=len(slos))
    return slos


def parse_slo_spec(data: Any, time_window: timedelta) -> list[SLO]:
    """Build SLOs from an already parsed spec document."""
    if not isinstance(data, dict):
        raise SpecLoadError("Spec must be a mapping")

    version = data.get("version")
    if version != SUPPORTED_VERSION:
        raise SpecLoadError(
            f"Unsupported spec version: {version!r}",
            details={"expected": SUPPORTED_VERSION},
        )

    service = data.get("service")
    if not service or not isinstance(service, str):
        raise SpecLoadError("Missing required field: service")

    spec_labels = _string_map(data.get("labels"), "labels")

    slo_entries = data.get("slos")
    if not slo_entries or not isinstance(slo_entries, list):
        raise SpecLoadError("At least one SLO must be defined", details={"service": service})

    return [
        _parse_slo(entry, service, spec_labels, time_window)
        for entry in slo_entries
    ]


def _parse_slo(
    entry: Any,
    service: str,
    spec_labels: dict[str, str],
    time_window: timedelta,
) -> SLO:
    if not isinstance(entry, dict):
        raise SpecLoadError("SLO entry must be a mapping", details={"service": service})

    name = entry.get("name")
    if not name:
        raise SpecLoadError("SLO entry missing required field: name", details={"service": service})

    sli = entry.get("sli")
    events = sli.get("events") if isinstance(sli, dict) else None
    if not isinstance(events, dict):
        events = {}
    error_query = events.get("error_query")
    total_query = events.get("total_query")
    if not error_query or not total_query:
        raise SpecLoadError(
            f"SLO {name!r} needs sli.events.error_query and sli.events.total_query",
            details={"service": service, "slo": name},
        )

    try:
        objective = float(entry.get("objective", 99.9))
    except (TypeError, ValueError) as e:
        raise SpecLoadError(
            f"SLO {name!r} has a non-numeric objective",
            details={"service": service, "slo": name},
        ) from e

    if not 0 < objective <= 100:
        raise SpecLoadError(
            f"SLO {name!r} objective must be in (0, 100], got {objective}",
            details={"service": service, "slo": name},
        )

    return SLO(
        id=f"{service}-{name}",
        name=name,
        service=service,
        time_window=time_window,
        objective=objective,
        sli=SLI(error_query=error_query, total_query=total_query),
        labels=merge_labels(spec_labels, _string_map(entry.get("labels"), f"slos.{name}.labels")),
    )


def _string_map(value: Any, field_name: str) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SpecLoadError(f"{field_name} must be a mapping")
    labels = {}
    for key, label_value in value.items():
        if not isinstance(label_value, str):
            raise SpecLoadError(
                f"{field_name}.{key} must be a string, got {type(label_value).__name__}",
                details={"label": str(key)},
            )
        labels[str(key)] = label_value
    return labels
