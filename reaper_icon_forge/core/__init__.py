"""
Core image pipeline and export logic for REAPER Icon Forge.
"""

from reaper_icon_forge.core.raster import RasterBuffer
from reaper_icon_forge.core.models import (
    ExportRequest,
    HSBAdjustment,
    IconScale,
    ManualSlot,
    StateImageMode,
    StateTriple,
    TrackIconSize,
)
from reaper_icon_forge.core.errors import (
    DirectoryCreateFailed,
    ExportError,
    FileWriteFailed,
    ImageLoadError,
    IncompleteManualStates,
    InvalidIconName,
    NoScalesSelected,
    NoSizesSelected,
    NoSourceImage,
    NothingToExport,
)
from reaper_icon_forge.core.geometry import GeometryOps
from reaper_icon_forge.core.color import ColorAdjuster
from reaper_icon_forge.core.compositor import Compositor
from reaper_icon_forge.core.icon_generator import IconGenerator
from reaper_icon_forge.core.exporter import ExportPhase, ExportResult, IconExporter, PlannedFile
from reaper_icon_forge.core.image_loader import load_image, load_image_bytes
from reaper_icon_forge.core.session import IconSession, ManualSlots

__all__ = [
    "RasterBuffer",
    "ExportRequest", "HSBAdjustment", "IconScale", "ManualSlot",
    "StateImageMode", "StateTriple", "TrackIconSize",
    "ExportError", "NothingToExport", "NoSourceImage", "IncompleteManualStates",
    "InvalidIconName", "NoScalesSelected", "NoSizesSelected",
    "DirectoryCreateFailed", "FileWriteFailed", "ImageLoadError",
    "GeometryOps", "ColorAdjuster", "Compositor", "IconGenerator",
    "ExportPhase", "ExportResult", "IconExporter", "PlannedFile",
    "load_image", "load_image_bytes",
    "IconSession", "ManualSlots",
]
