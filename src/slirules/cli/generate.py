"""CLI command for generating SLI recording rules."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from slirules.alerts.mwmb import build_alert_group
from slirules.cli.ux import console, header, print_table, success, warning
from slirules.config.settings import get_settings
from slirules.core.context import GenerationContext
from slirules.core.errors import ConfigurationError, ExitCode, main_with_error_handling
from slirules.logging import bind_context
from slirules.prometheus.durations import parse_prom_duration
from slirules.recording_rules.models import RecordingRuleGroup, create_rule_groups
from slirules.recording_rules.sli import SLIRecordingRulesGenerator
from slirules.specs.loader import load_slo_spec

GROUP_NAME_PREFIX = "sloth-slo-sli-recordings-"


@main_with_error_handling()
def generate_sli_rules_command(
    spec_file: str,
    output: Optional[str] = None,
    window: Optional[str] = None,
    dedupe_total_window: Optional[bool] = None,
    interval: Optional[str] = None,
    dry_run: bool = False,
    ctx: Optional[GenerationContext] = None,
) -> int:
    """Generate SLI recording rules from an SLO spec file.

    Args:
        spec_file: Path to SLO spec YAML file
        output: Output file path (default: <output_dir>/<service>.yaml)
        window: SLO time window, e.g. "30d" (default: settings)
        dedupe_total_window: Skip the time-window rule when an alert window
            equals it (default: settings)
        interval: Rule group evaluation interval (default: settings)
        dry_run: If True, print YAML to stdout instead of writing file
        ctx: Cancellation context checked between windows

    Returns:
        Exit code
    """
    settings = get_settings()
    if dedupe_total_window is None:
        dedupe_total_window = settings.dedupe_total_window
    interval = interval or settings.rule_group_interval

    try:
        time_window = parse_prom_duration(window or settings.default_time_window)
    except ValueError as e:
        raise ConfigurationError(f"Invalid SLO time window: {e}") from e

    header("Generate SLI Recording Rules")
    console.print(f"[info]Spec:[/info] {spec_file}")
    console.print(f"[info]Time window:[/info] {window or settings.default_time_window}")
    if dry_run:
        console.print("[muted]Mode: Dry run (preview only)[/muted]")
    console.print()

    log = bind_context(spec=spec_file)
    slos = load_slo_spec(spec_file, time_window=time_window)
    generator = SLIRecordingRulesGenerator(dedupe_total_window=dedupe_total_window)

    groups = []
    for slo in slos:
        group = RecordingRuleGroup(name=f"{GROUP_NAME_PREFIX}{slo.id}", interval=interval)
        for rule in generator.generate(ctx, slo, build_alert_group(slo)):
            group.add_rule(rule)
        groups.append(group)

    print_table(
        "SLI recording rules",
        ["SLO", "Rules", "Windows"],
        [
            [slo.id, str(len(group.rules)), ", ".join(r.labels["window"] for r in group.rules)]
            for slo, group in zip(slos, groups)
        ],
    )

    yaml_output = create_rule_groups(groups)

    if dry_run:
        print(yaml_output)
        return ExitCode.SUCCESS

    if not output:
        output = str(Path(settings.output_dir) / f"{slos[0].service}.yaml")

    output_path = Path(output)
    if output_path.exists():
        warning(f"Overwriting {output_path}")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(yaml_output)

    log.info("sli_rules_written", path=str(output_path), groups=len(groups))
    success(f"Recording rules written to {output_path}")
    return ExitCode.SUCCESS
