"""Window collection for SLI recording rules."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slirules.alerts.mwmb import MWMBAlertGroup


def get_alert_group_windows(alert_group: MWMBAlertGroup) -> list[timedelta]:
    """Return every distinct window used by the alert group.

    Both the short and the long window of each alert are collected. The result
    is sorted ascending so generated rules come out in a stable order.
    """
    windows: set[timedelta] = set()
    for alert in alert_group.alerts():
        windows.add(alert.short_window)
        windows.add(alert.long_window)

    return sorted(windows)
