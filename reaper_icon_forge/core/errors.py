"""
Export error hierarchy.
Every error is terminal for the export call that raised it.
"""

from typing import Iterable


class ExportError(Exception):
    """Base class for all export failures."""

    message = "Export failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class NothingToExport(ExportError):
    message = "Neither toolbar nor track icons are enabled"


class NoSourceImage(ExportError):
    message = "No source image loaded"


class IncompleteManualStates(ExportError):
    message = "Load all three state images (Normal, Hover, Active) to enable export"

    def __init__(self, missing: Iterable[str] = ()):
        self.missing = tuple(missing)
        text = self.message
        if self.missing:
            text = f"{text} (missing: {', '.join(self.missing)})"
        super().__init__(text)


class InvalidIconName(ExportError):
    message = "Invalid icon name"


class NoScalesSelected(ExportError):
    message = "No toolbar icon scales selected"


class NoSizesSelected(ExportError):
    message = "No track icon sizes selected"


class DirectoryCreateFailed(ExportError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Failed to create directory: {self.path}")


class FileWriteFailed(ExportError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Failed to save image: {self.path}")


class ImageLoadError(ValueError):
    """Input file or bytes could not be decoded as a raster image."""
