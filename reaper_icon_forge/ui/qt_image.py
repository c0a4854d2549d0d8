"""
Conversion helpers between pipeline buffers and Qt images.
"""

from PyQt6.QtGui import QImage, QPixmap

from reaper_icon_forge.core.raster import RasterBuffer


def buffer_to_qimage(buffer: RasterBuffer) -> QImage:
    """Wrap a buffer as an RGBA8888 QImage that owns its own copy of the data."""
    qimage = QImage(buffer.pixels, buffer.width, buffer.height,
                    buffer.width * 4, QImage.Format.Format_RGBA8888)
    # QImage only borrows the bytes; copy so it outlives the buffer
    return qimage.copy()


def buffer_to_pixmap(buffer: RasterBuffer) -> QPixmap:
    """Pixmap for preview labels. Requires a running QApplication."""
    return QPixmap.fromImage(buffer_to_qimage(buffer))


def qimage_to_buffer(qimage: QImage) -> RasterBuffer:
    """Snapshot a QImage (e.g. pasted from the clipboard) as a buffer."""
    converted = qimage.convertToFormat(QImage.Format.Format_RGBA8888)
    width, height = converted.width(), converted.height()
    row_bytes = width * 4
    stride = converted.bytesPerLine()
    data = converted.constBits().asstring(converted.sizeInBytes())
    # Drop per-row padding so the buffer is tightly packed
    pixels = b"".join(data[y * stride:y * stride + row_bytes] for y in range(height))
    return RasterBuffer(width, height, pixels)
