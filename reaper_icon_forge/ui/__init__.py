"""
Qt integration for REAPER Icon Forge.
"""

from reaper_icon_forge.ui.export_worker import ExportWorker
from reaper_icon_forge.ui.qt_image import buffer_to_pixmap, buffer_to_qimage, qimage_to_buffer

__all__ = ["ExportWorker", "buffer_to_pixmap", "buffer_to_qimage", "qimage_to_buffer"]
