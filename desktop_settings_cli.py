#!/usr/bin/env python3
"""Convenience entry point.

The implementation lives in `desktop_settings.cli`.
"""

from desktop_settings.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
