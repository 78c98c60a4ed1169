"""SLO models and window collection."""

from slirules.slos.models import SLI, SLO
from slirules.slos.windows import get_alert_group_windows

__all__ = ["SLI", "SLO", "get_alert_group_windows"]
