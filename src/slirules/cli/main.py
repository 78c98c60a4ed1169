"""slirules command line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from slirules.config.settings import get_settings
from slirules.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slirules", description="Generate SLI recording rules for SLOs"
    )
    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser(
        "generate", help="Generate SLI recording rules from an SLO spec file"
    )
    generate_parser.add_argument("spec_file", help="Path to SLO spec YAML file")
    generate_parser.add_argument("--output", "-o", help="Output file path")
    generate_parser.add_argument("--window", help="SLO time window (e.g. 30d, 28d)")
    generate_parser.add_argument(
        "--dedupe-total-window",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Skip the time-window rule when a burn-rate window already equals it",
    )
    generate_parser.add_argument("--interval", help="Rule group evaluation interval")
    generate_parser.add_argument("--dry-run", action="store_true", help="Print YAML without writing file")

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)

    if args.command == "generate":
        from slirules.cli.generate import generate_sli_rules_command

        sys.exit(
            generate_sli_rules_command(
                args.spec_file,
                output=args.output,
                window=args.window,
                dedupe_total_window=args.dedupe_total_window,
                interval=args.interval,
                dry_run=args.dry_run,
            )
        )

    parser.print_help()
    sys.exit(1)


if __name__ == "__main__":
    main()
