#!/usr/bin/env python3
"""
REAPER Icon Forge - command-line entry point.
"""

import sys


def main():
    """Main application entry point."""
    # Lazy import keeps `python -m reaper_icon_forge --help` fast
    from reaper_icon_forge.cli import main as cli_main

    sys.exit(cli_main())


if __name__ == "__main__":
    main()
