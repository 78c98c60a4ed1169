"""Prometheus duration literals and query templates."""

from slirules.prometheus.durations import duration_to_prom_str, parse_prom_duration
from slirules.prometheus.templating import QueryTemplate, render_template

__all__ = [
    "QueryTemplate",
    "duration_to_prom_str",
    "parse_prom_duration",
    "render_template",
]
