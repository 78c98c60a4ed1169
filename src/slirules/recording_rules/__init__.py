"""Prometheus recording rules generation.

Generate SLI error-ratio recording rules for SLOs.
"""

from slirules.recording_rules.labels import merge_labels
from slirules.recording_rules.models import RecordingRule, RecordingRuleGroup, create_rule_groups
from slirules.recording_rules.sli import (
    RatioSLIRuleBuilder,
    SLIRecordingRulesGenerator,
    SLIRuleBuilder,
    generate_sli_recording_rules,
    sli_record_name,
)

__all__ = [
    "RatioSLIRuleBuilder",
    "RecordingRule",
    "RecordingRuleGroup",
    "SLIRecordingRulesGenerator",
    "SLIRuleBuilder",
    "create_rule_groups",
    "generate_sli_recording_rules",
    "merge_labels",
    "sli_record_name",
]
