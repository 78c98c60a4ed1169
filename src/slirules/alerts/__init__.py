"""Multi-window, multi-burn-rate alert definitions."""

from slirules.alerts.mwmb import AlertSeverity, MWMBAlert, MWMBAlertGroup, build_alert_group

__all__ = [
    "AlertSeverity",
    "MWMBAlert",
    "MWMBAlertGroup",
    "build_alert_group",
]
