"""
Export orchestration for REAPER Icon Forge.
Plans the toolbar/track icon file layout and writes PNG files.
"""

import contextlib
import logging
import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache, partial
from io import BytesIO
from pathlib import Path
from typing import Callable, List, Optional

from reaper_icon_forge import config
from reaper_icon_forge.core.errors import (
    DirectoryCreateFailed,
    FileWriteFailed,
    IncompleteManualStates,
    InvalidIconName,
    NoScalesSelected,
    NoSizesSelected,
    NoSourceImage,
    NothingToExport,
)
from reaper_icon_forge.core.icon_generator import IconGenerator
from reaper_icon_forge.core.models import (
    ExportRequest,
    IconScale,
    ManualSlot,
    StateImageMode,
    StateTriple,
)
from reaper_icon_forge.core.raster import RasterBuffer

logger = logging.getLogger(__name__)


class ExportPhase(Enum):
    IDLE = "idle"
    PLANNING = "planning"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PlannedFile:
    """One output file and the deferred render that produces it."""
    path: Path
    kind: str  # "toolbar" | "track"
    label: str
    render: Callable[[], RasterBuffer] = field(repr=False, compare=False)


@dataclass
class ExportResult:
    written: List[Path] = field(default_factory=list)


# progress(phase, index, total); index counts files finished so far
ProgressCallback = Callable[[ExportPhase, int, int], None]


class IconExporter:
    """Validates export requests, builds the file plan and writes it."""

    ALLOWED_PUNCTUATION = "_-"

    @staticmethod
    def sanitize_icon_name(name: str) -> str:
        """
        Strip everything except letters, digits, combining marks, '_' and '-'.

        Returns:
            Sanitized name, or the fallback name if nothing survives
        """
        cleaned = "".join(
            ch for ch in (name or "")
            if ch.isalnum()
            or ch in IconExporter.ALLOWED_PUNCTUATION
            # combining accents of decomposed letters (e.g. "e" + U+0301)
            or unicodedata.category(ch).startswith("M")
        )
        return cleaned or config.FALLBACK_ICON_NAME

    @staticmethod
    def validate(request: ExportRequest) -> None:
        """
        Check the request before any file I/O.

        Raises:
            NothingToExport, NoSourceImage, IncompleteManualStates,
            NoScalesSelected, NoSizesSelected
        """
        if not request.generate_toolbar and not request.generate_track:
            raise NothingToExport()

        if request.mode is StateImageMode.AUTOMATIC:
            if request.source is None:
                raise NoSourceImage()
        else:
            missing = [
                slot.value
                for slot, image in zip(ManualSlot.section(True), request.off_images)
                if image is None
            ]
            if request.toggle:
                missing += [
                    slot.value
                    for slot, image in zip(ManualSlot.section(False), request.on_images)
                    if image is None
                ]
            if missing:
                raise IncompleteManualStates(missing)

        if request.generate_toolbar and not request.scales:
            raise NoScalesSelected()
        if request.generate_track and not request.sizes:
            raise NoSizesSelected()

    @staticmethod
    def build_plan(request: ExportRequest) -> List[PlannedFile]:
        """
        Validate the request and list every file it will produce, in
        write order. Nothing is rendered or written here.
        """
        IconExporter.validate(request)

        name = IconExporter.sanitize_icon_name(request.icon_name)
        if not name:
            raise InvalidIconName()

        root = request.destination
        plan: List[PlannedFile] = []

        if request.generate_toolbar:
            passes = [(name, request.adjustments, request.off_images)]
            if request.toggle:
                passes.append((name + config.ON_STATE_SUFFIX, request.on_adjustments, request.on_images))

            for pass_name, adjustments, images in passes:
                # Full-resolution adjusted states are shared by every scale of a padded pass
                adjusted_states = None
                if request.mode is StateImageMode.AUTOMATIC and request.padding > 0:
                    adjusted_states = lru_cache(maxsize=None)(
                        partial(IconGenerator.adjust_states, request.source, adjustments)
                    )

                for scale in sorted(request.scales, key=lambda s: s.value):
                    folder = root / config.TOOLBAR_FOLDER
                    if scale.folder_name:
                        folder = folder / scale.folder_name

                    if adjusted_states is not None:
                        render = partial(
                            IconExporter._render_padded, adjusted_states, scale, request.padding,
                        )
                    elif request.mode is StateImageMode.AUTOMATIC:
                        render = partial(
                            IconGenerator.generate_toolbar_icon,
                            request.source, scale, adjustments, request.padding,
                        )
                    else:
                        render = partial(
                            IconGenerator.generate_toolbar_icon_manual,
                            images, scale, request.padding,
                        )

                    plan.append(PlannedFile(
                        path=folder / f"{pass_name}.png",
                        kind="toolbar",
                        label=f"{pass_name} @ {scale.display_name}",
                        render=render,
                    ))

        if request.generate_track:
            # Manual mode has no single source; the off-normal image stands in
            track_source = request.source
            if request.mode is StateImageMode.MANUAL:
                track_source = request.off_images.normal

            sizes = sorted(request.sizes, key=lambda s: s.value)
            for size in sizes:
                file_name = f"{name}_{size.value}.png" if len(sizes) > 1 else f"{name}.png"
                plan.append(PlannedFile(
                    path=root / config.TRACK_FOLDER / file_name,
                    kind="track",
                    label=f"{name} @ {size.display_name}",
                    render=partial(IconGenerator.generate_track_icon, track_source, size),
                ))

        return plan

    @staticmethod
    def _render_padded(adjusted_states: Callable[[], StateTriple], scale: IconScale,
                       padding: float) -> RasterBuffer:
        return IconGenerator.generate_toolbar_icon_padded(adjusted_states(), scale, padding)

    @staticmethod
    def ensure_directory(path: Path) -> None:
        """Create path (and parents) unless it already exists as a directory."""
        if path.is_dir():
            return
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            # Another writer may have created it in the meantime
            if not path.is_dir():
                raise DirectoryCreateFailed(path) from exc

    @staticmethod
    def encode_png(buffer: RasterBuffer) -> bytes:
        """RGBA PNG at the buffer's exact pixel size, without DPI metadata."""
        out = BytesIO()
        buffer.to_image().save(out, format='PNG', optimize=True)
        return out.getvalue()

    @staticmethod
    def write_png(buffer: RasterBuffer, path: Path) -> None:
        """
        Write a PNG so the destination never holds a half-written file.

        Raises:
            FileWriteFailed: On any I/O error
        """
        data = IconExporter.encode_png(buffer)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            tmp_path.write_bytes(data)
            tmp_path.replace(path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise FileWriteFailed(path) from exc

    @staticmethod
    def export(request: ExportRequest,
               progress: Optional[ProgressCallback] = None) -> ExportResult:
        """
        Run a complete export: plan, then write files one by one.

        Writing stops at the first failure; files already written stay
        on disk.

        Args:
            request: Export parameters
            progress: Optional callback receiving (phase, done, total)

        Returns:
            ExportResult listing written files in order

        Raises:
            ExportError: Validation or I/O failure
        """
        def report(phase: ExportPhase, done: int, total: int) -> None:
            if progress is not None:
                progress(phase, done, total)

        report(ExportPhase.PLANNING, 0, 0)
        try:
            plan = IconExporter.build_plan(request)
        except Exception:
            report(ExportPhase.FAILED, 0, 0)
            raise

        total = len(plan)
        logger.info("Exporting %d icon file(s) to %s", total, request.destination)

        result = ExportResult()
        for index, planned in enumerate(plan):
            report(ExportPhase.WRITING, index, total)
            try:
                IconExporter.ensure_directory(planned.path.parent)
                IconExporter.write_png(planned.render(), planned.path)
            except Exception:
                logger.error("Export stopped at %s (%d of %d written)", planned.path, index, total)
                report(ExportPhase.FAILED, index, total)
                raise
            result.written.append(planned.path)
            logger.debug("Wrote %s (%s)", planned.path, planned.label)

        report(ExportPhase.DONE, total, total)
        return result
