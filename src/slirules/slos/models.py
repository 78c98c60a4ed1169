"""
SLO data models.

Shapes follow the Sloth ``prometheus/v1`` SLO definition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta


@dataclass(frozen=True)
class SLI:
    """Event-based SLI: a ratio of error events to total events."""

    error_query: str
    total_query: str


@dataclass(frozen=True)
class SLO:
    """
    Service Level Objective.

    ``labels`` are user supplied and copied onto every generated rule.
    ``time_window`` is the full compliance period (e.g. 30 days).
    """

    id: str
    service: str
    time_window: timedelta
    sli: SLI
    name: str = ""
    objective: float = 99.9  # Target percentage (e.g., 99.9)
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def error_budget(self) -> float:
        """Error budget as a percentage (100 - objective)."""
        return 100.0 - self.objective
