"""Command-line entrypoint for running the ONC registration checks."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from .config import create_config_source, parse_bool
from .core import build_dashboard_report
from .errors import ConfigError
from .log import setup_logging
from .report import has_failures, validate_report
from .summary import render_summary
from .validators import IdentifierValidator

WARN_ONLY_ENV_VAR = "ONC_REGISTRATION_WARN_ONLY"
EXIT_FAILURES = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for JSON log lines written to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Run all checks and print the report")
    check.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Path to the JSON settings file (default: $ONC_REGISTRATION_SETTINGS or settings.json)",
    )
    check.add_argument("--format", choices=["json", "markdown"], default="json")
    check.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip fetching the published URLs page",
    )
    check.add_argument(
        "--warn-only",
        action="store_true",
        help="Exit 0 even when settings fail or the NPI is invalid",
    )

    npi = subparsers.add_parser("validate-npi", help="Validate a single NPI")
    npi.add_argument("npi")

    return parser.parse_args(argv)


def _run_check(args: argparse.Namespace) -> int:
    try:
        source = create_config_source(args.settings)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    report = build_dashboard_report(source, verify=not args.no_verify)
    validate_report(report)

    if args.format == "markdown":
        sys.stdout.write(render_summary(report))
    else:
        print(json.dumps(report, indent=2))

    if has_failures(report) and not args.warn_only:
        if parse_bool(os.getenv(WARN_ONLY_ENV_VAR, "")):
            return 0
        return EXIT_FAILURES

    return 0


def _run_validate_npi(args: argparse.Namespace) -> int:
    result = IdentifierValidator().validate(args.npi)
    print(json.dumps(result.to_dict()))
    return 0 if result.valid else 1


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "validate-npi":
        return _run_validate_npi(args)
    return _run_check(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
