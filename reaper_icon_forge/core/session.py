"""
In-memory editing session: the state a front end keeps between
previews and exports. Nothing here is persisted.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set

from reaper_icon_forge import config
from reaper_icon_forge.core.models import (
    OFF_ADJUSTMENTS,
    ON_ADJUSTMENTS,
    ExportRequest,
    IconScale,
    ManualSlot,
    StateImageMode,
    StateTriple,
    TrackIconSize,
)
from reaper_icon_forge.core.raster import RasterBuffer


class ManualSlots:
    """Six optional state images, one per ManualSlot."""

    def __init__(self):
        self._images: Dict[ManualSlot, Optional[RasterBuffer]] = {slot: None for slot in ManualSlot}

    def get(self, slot: ManualSlot) -> Optional[RasterBuffer]:
        return self._images[slot]

    def set(self, slot: ManualSlot, image: Optional[RasterBuffer]) -> None:
        self._images[slot] = image

    def clear(self, slot: ManualSlot) -> None:
        self._images[slot] = None

    def move(self, source: ManualSlot, destination: ManualSlot) -> None:
        """
        Drag an image from one slot onto another.

        Within the same section (off/on) the two slots swap contents.
        Across sections the image is copied and the source keeps it.
        """
        if source is destination:
            return

        image = self._images[source]
        if source.is_off == destination.is_off:
            self._images[source] = self._images[destination]
        self._images[destination] = image

    def off_images(self) -> StateTriple:
        return StateTriple(*(self._images[slot] for slot in ManualSlot.section(True)))

    def on_images(self) -> StateTriple:
        return StateTriple(*(self._images[slot] for slot in ManualSlot.section(False)))

    def missing(self, include_on: bool = False) -> List[ManualSlot]:
        slots = list(ManualSlot.section(True))
        if include_on:
            slots += ManualSlot.section(False)
        return [slot for slot in slots if self._images[slot] is None]


def _default_scales() -> Set[IconScale]:
    return {IconScale(value) for value in config.DEFAULT_SCALES}


def _default_sizes() -> Set[TrackIconSize]:
    return {TrackIconSize(value) for value in config.DEFAULT_TRACK_SIZES}


@dataclass
class IconSession:
    """Everything the user has set up for the icon being built."""

    icon_name: str = config.DEFAULT_ICON_NAME
    mode: StateImageMode = StateImageMode.AUTOMATIC
    source: Optional[RasterBuffer] = None
    slots: ManualSlots = field(default_factory=ManualSlots)

    adjustments: StateTriple = OFF_ADJUSTMENTS
    on_adjustments: StateTriple = ON_ADJUSTMENTS
    toggle: bool = False
    padding: float = config.DEFAULT_PADDING

    scales: Set[IconScale] = field(default_factory=_default_scales)
    sizes: Set[TrackIconSize] = field(default_factory=_default_sizes)
    generate_toolbar: bool = True
    generate_track: bool = True

    selected_slot: Optional[ManualSlot] = None

    @property
    def has_valid_image(self) -> bool:
        return self.source is not None

    @property
    def has_valid_manual_states(self) -> bool:
        return not self.slots.missing(include_on=self.toggle)

    @property
    def can_export(self) -> bool:
        return self.export_blocker() is None

    def export_blocker(self) -> Optional[str]:
        """Reason export is unavailable, or None when it can proceed."""
        if self.mode is StateImageMode.AUTOMATIC and not self.has_valid_image:
            return "Load an image to enable export"
        if self.mode is StateImageMode.MANUAL and not self.has_valid_manual_states:
            if self.slots.missing():
                return "Load all three state images (Normal, Hover, Active) to enable export"
            return "Load all three ON state images to export a toggle icon"
        if not self.icon_name:
            return "Enter an icon name to enable export"
        if not (self.generate_toolbar or self.generate_track):
            return "Enable toolbar or track icons to export"
        return None

    def effective_image(self, slot: ManualSlot) -> Optional[RasterBuffer]:
        """Image shown for a state: the slot in manual mode, else the source."""
        if self.mode is StateImageMode.MANUAL:
            return self.slots.get(slot)
        return self.source

    def delete_selected_image(self) -> None:
        if self.selected_slot is None:
            return
        self.slots.clear(self.selected_slot)
        self.selected_slot = None

    def to_request(self, destination: Path) -> ExportRequest:
        """Snapshot the session as an immutable export request."""
        return ExportRequest(
            icon_name=self.icon_name,
            destination=destination,
            mode=self.mode,
            scales=frozenset(self.scales),
            sizes=frozenset(self.sizes),
            generate_toolbar=self.generate_toolbar,
            generate_track=self.generate_track,
            toggle=self.toggle,
            adjustments=self.adjustments,
            on_adjustments=self.on_adjustments,
            source=self.source if self.mode is StateImageMode.AUTOMATIC else None,
            off_images=self.slots.off_images(),
            on_images=self.slots.on_images(),
            padding=self.padding,
        )
