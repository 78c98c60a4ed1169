"""
Multi-window, multi-burn-rate (MWMB) alert model.

An alert fires when the error budget burns faster than ``burn_rate_factor``
over both its long and its short window. The default group follows the
Google SRE workbook table for a 30-day SLO:

- page quick:   1h long / 5m short,  14.4x (2% of budget in 1h)
- page slow:    6h long / 30m short, 6x    (5% of budget in 6h)
- ticket quick: 1d long / 2h short,  3x    (10% of budget in 1d)
- ticket slow:  3d long / 6h short,  1x    (10% of budget in 3d)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Iterator

from slirules.slos.models import SLO


class AlertSeverity(str, Enum):
    """Severity of an MWMB alert."""

    PAGE = "page"
    TICKET = "ticket"


@dataclass(frozen=True)
class MWMBAlert:
    """A single burn-rate alert with its two windows."""

    id: str
    short_window: timedelta
    long_window: timedelta
    burn_rate_factor: float
    error_budget: float
    severity: AlertSeverity


@dataclass(frozen=True)
class MWMBAlertGroup:
    """The page and ticket alerts of one SLO."""

    page_quick: MWMBAlert | None = None
    page_slow: MWMBAlert | None = None
    ticket_quick: MWMBAlert | None = None
    ticket_slow: MWMBAlert | None = None

    def alerts(self) -> Iterator[MWMBAlert]:
        """Yield the alerts present in the group."""
        for alert in (self.page_quick, self.page_slow, self.ticket_quick, self.ticket_slow):
            if alert is not None:
                yield alert


# (id suffix, short window, long window, burn rate factor, severity)
_DEFAULT_ALERTS = {
    "page_quick": ("page-quick", timedelta(minutes=5), timedelta(hours=1), 14.4, AlertSeverity.PAGE),
    "page_slow": ("page-slow", timedelta(minutes=30), timedelta(hours=6), 6.0, AlertSeverity.PAGE),
    "ticket_quick": ("ticket-quick", timedelta(hours=2), timedelta(days=1), 3.0, AlertSeverity.TICKET),
    "ticket_slow": ("ticket-slow", timedelta(hours=6), timedelta(days=3), 1.0, AlertSeverity.TICKET),
}


def build_alert_group(slo: SLO) -> MWMBAlertGroup:
    """Build the default MWMB alert group for an SLO.

    Args:
        slo: SLO the alerts protect

    Returns:
        MWMBAlertGroup with all four alerts set
    """
    alerts = {
        attr: MWMBAlert(
            id=f"{slo.id}-{suffix}",
            short_window=short,
            long_window=long,
            burn_rate_factor=factor,
            error_budget=slo.error_budget,
            severity=severity,
        )
        for attr, (suffix, short, long, factor, severity) in _DEFAULT_ALERTS.items()
    }
    return MWMBAlertGroup(**alerts)
