#!/usr/bin/env python3
"""Local CLI entrypoint to run the ONC registration checks outside the host.

Usage:
  python scripts/check.py check --settings settings.json [--format markdown] [--warn-only]
  python scripts/check.py validate-npi 1234567893

This calls the same entrypoint as the installed ``onc-registration`` command.
"""

from __future__ import annotations

from onc_registration.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
