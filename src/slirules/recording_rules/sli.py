"""SLI error-ratio recording rules.

For every window an SLO's alerts need (plus the SLO's full time window) one
rule records the error ratio of the SLI::

    record: slo:sli_error:ratio_rate5m
    expr: (sum(rate(http_errors[5m])))/(sum(rate(http_total[5m])))
    labels:
      window: 5m
      sloth_slo: checkout-availability
      sloth_service: checkout

The rule for a single window is produced by a pluggable ``SLIRuleBuilder``;
``SLIRecordingRulesGenerator`` handles window selection and identity labels.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol

import structlog

from slirules.alerts.mwmb import MWMBAlertGroup
from slirules.core.context import GenerationContext, background
from slirules.core.errors import SLIRuleBuildError, SLIRuleGenerationError, TemplateError
from slirules.prometheus.durations import duration_to_prom_str
from slirules.prometheus.templating import QueryTemplate
from slirules.recording_rules.labels import merge_labels
from slirules.recording_rules.models import RecordingRule
from slirules.slos.models import SLO
from slirules.slos.windows import get_alert_group_windows

logger = structlog.get_logger()

SLI_METRIC_NAME = "slo:sli_error:ratio_rate{window}"

TPL_KEY_WINDOW = "window"
WINDOW_LABEL = "window"
SLO_ID_LABEL = "sloth_slo"
SERVICE_LABEL = "sloth_service"


class SLIRuleBuilder(Protocol):
    """Builds the SLI recording rule of one SLO for one window."""

    def build_rule(self, slo: SLO, window: timedelta) -> RecordingRule:
        ...


def sli_record_name(window: str) -> str:
    """Metric name of the SLI rule for a rendered window (e.g. ``5m``)."""
    return SLI_METRIC_NAME.format(window=window)


class RatioSLIRuleBuilder:
    """Builds ``(error_query)/(total_query)`` ratio rules.

    Both queries may reference ``{{.window}}``; it is replaced by the window
    as a Prometheus duration literal. Any other placeholder is an error.
    """

    def build_rule(self, slo: SLO, window: timedelta) -> RecordingRule:
        str_window = duration_to_prom_str(window)

        expr_tpl = f"({slo.sli.error_query})/({slo.sli.total_query})"
        try:
            tpl = QueryTemplate.parse("sli_expr", expr_tpl)
            expr = tpl.render({TPL_KEY_WINDOW: str_window})
        except TemplateError as e:
            raise SLIRuleBuildError(
                f"could not render SLI expression of {slo.id!r} for window {str_window}: "
                f"{e.message}",
                details={"slo_id": slo.id, "window": str_window, **e.details},
            ) from e

        return RecordingRule(
            record=sli_record_name(str_window),
            expr=expr,
            labels=merge_labels(slo.labels, {WINDOW_LABEL: str_window}),
        )


class SLIRecordingRulesGenerator:
    """Generates the SLI recording rules of an SLO.

    Args:
        rule_builder: Strategy producing the rule for one window
            (default: RatioSLIRuleBuilder)
        dedupe_total_window: If True, skip the SLO time window when one of
            the alert windows already equals it
    """

    def __init__(
        self,
        rule_builder: SLIRuleBuilder | None = None,
        dedupe_total_window: bool = False,
    ):
        self.rule_builder = rule_builder or RatioSLIRuleBuilder()
        self.dedupe_total_window = dedupe_total_window

    def windows(self, slo: SLO, alert_group: MWMBAlertGroup) -> list[timedelta]:
        """Windows that get an SLI rule, in generation order."""
        windows = get_alert_group_windows(alert_group)
        if not (self.dedupe_total_window and slo.time_window in windows):
            windows.append(slo.time_window)
        return windows

    def generate(
        self,
        ctx: GenerationContext | None,
        slo: SLO,
        alert_group: MWMBAlertGroup,
    ) -> list[RecordingRule]:
        """Generate one SLI rule per window.

        Raises:
            GenerationCancelledError: If ``ctx`` is cancelled between windows
            SLIRuleGenerationError: If the rule for any window fails to build
        """
        ctx = ctx or background()
        extra_labels = {
            SLO_ID_LABEL: slo.id,
            SERVICE_LABEL: slo.service,
        }

        rules: list[RecordingRule] = []
        for window in self.windows(slo, alert_group):
            ctx.check()

            try:
                rule = self.rule_builder.build_rule(slo, window)
            except Exception as e:
                str_window = duration_to_prom_str(window)
                raise SLIRuleGenerationError(
                    f"could not create {slo.id!r} SLO rule for window {str_window}: {e}",
                    details={"slo_id": slo.id, "window": str_window},
                ) from e

            rule.labels = merge_labels(rule.labels, extra_labels)
            rules.append(rule)

        logger.debug("sli_rules_generated", slo_id=slo.id, rules=len(rules))
        return rules


def generate_sli_recording_rules(
    slo: SLO,
    alert_group: MWMBAlertGroup,
    ctx: GenerationContext | None = None,
    dedupe_total_window: bool = False,
) -> list[RecordingRule]:
    """Convenience function to generate the SLI rules of one SLO.

    Example:
        >>> slo = SLO(
        ...     id="checkout-availability",
        ...     service="checkout",
        ...     time_window=timedelta(days=30),
        ...     sli=SLI(error_query="http_errors", total_query="http_total"),
        ... )
        >>> rules = generate_sli_recording_rules(slo, build_alert_group(slo))
        >>> rules[-1].record
        'slo:sli_error:ratio_rate30d'
    """
    generator = SLIRecordingRulesGenerator(dedupe_total_window=dedupe_total_window)
    return generator.generate(ctx, slo, alert_group)
