"""
Application defaults and environment discovery for REAPER Icon Forge.
Nothing here is persisted; sessions start from these values every launch.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

# Export naming
DEFAULT_ICON_NAME = "my_icon"
FALLBACK_ICON_NAME = "icon"
ON_STATE_SUFFIX = "_on"
TOOLBAR_FOLDER = "toolbar_icons"
TRACK_FOLDER = "track_icons"
REAPER_DATA_FOLDER = "Data"

# Padding is a fraction of the tile width on each side
MAX_PADDING = 0.35
DEFAULT_PADDING = 0.0

# Default selections (values match IconScale / TrackIconSize)
DEFAULT_SCALES = (100, 150, 200)
DEFAULT_TRACK_SIZES = (128,)

PREVIEW_SIZE = 64

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Set up root logging for the command-line entry point."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def reaper_resource_path(home: Optional[Path] = None) -> Optional[Path]:
    """
    Locate the REAPER resource folder for the current user.

    Args:
        home: Home directory override (used by tests)

    Returns:
        Path to the resource folder if it exists, otherwise None
    """
    home = Path(home) if home is not None else Path.home()

    if sys.platform == 'darwin':
        candidate = home / "Library" / "Application Support" / "REAPER"
    elif sys.platform == 'win32':
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
        candidate = base / "REAPER"
    else:
        candidate = home / ".config" / "REAPER"

    if candidate.is_dir():
        return candidate
    return None


def reaper_data_path(home: Optional[Path] = None) -> Optional[Path]:
    """The `Data` folder REAPER loads toolbar and track icons from."""
    resource = reaper_resource_path(home)
    if resource is None:
        return None
    return resource / REAPER_DATA_FOLDER
