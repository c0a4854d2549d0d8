"""Value types for icon generation and export requests."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, NamedTuple, Optional, Tuple

from reaper_icon_forge.config import MAX_PADDING
from reaper_icon_forge.core.raster import RasterBuffer


@dataclass(frozen=True)
class HSBAdjustment:
    """Hue/saturation/brightness perturbation, each component in [-1, 1].

    hue is a fraction of a half turn (applied as hue * pi radians),
    saturation is added to a saturation factor of 1.0 and
    brightness is an additive shift.
    """
    hue: float = 0.0
    saturation: float = 0.0
    brightness: float = 0.0

    def __post_init__(self):
        for name in ('hue', 'saturation', 'brightness'):
            value = getattr(self, name)
            if not -1.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [-1, 1], got {value}")

    @property
    def is_identity(self) -> bool:
        return self.hue == 0 and self.saturation == 0 and self.brightness == 0


# Off-state defaults
HSBAdjustment.NORMAL = HSBAdjustment(0, 0, -0.10)
HSBAdjustment.HOVER = HSBAdjustment(0, 0, 0.15)
HSBAdjustment.ACTIVE = HSBAdjustment(0, -0.20, -0.25)

# On-state defaults, brighter and more saturated to read as "engaged"
HSBAdjustment.ON_NORMAL = HSBAdjustment(0, 0.15, 0.10)
HSBAdjustment.ON_HOVER = HSBAdjustment(0, 0.15, 0.25)
HSBAdjustment.ON_ACTIVE = HSBAdjustment(0, 0, -0.10)


class StateTriple(NamedTuple):
    """One value per button state, in sprite-sheet order."""
    normal: object
    hover: object
    active: object


OFF_ADJUSTMENTS = StateTriple(HSBAdjustment.NORMAL, HSBAdjustment.HOVER, HSBAdjustment.ACTIVE)
ON_ADJUSTMENTS = StateTriple(HSBAdjustment.ON_NORMAL, HSBAdjustment.ON_HOVER, HSBAdjustment.ON_ACTIVE)


class IconScale(Enum):
    """Toolbar icon scale (percent). Each state tile is square."""

    SCALE_100 = 100
    SCALE_150 = 150
    SCALE_200 = 200

    @property
    def tile_size(self) -> int:
        return {100: 30, 150: 45, 200: 60}[self.value]

    @property
    def sheet_size(self) -> Tuple[int, int]:
        return self.tile_size * 3, self.tile_size

    @property
    def folder_name(self) -> Optional[str]:
        """Subfolder under toolbar_icons, None for the 100% set."""
        if self is IconScale.SCALE_100:
            return None
        return str(self.value)

    @property
    def display_name(self) -> str:
        return f"{self.value}%"


class TrackIconSize(Enum):
    """Square track icon edge length in pixels."""

    SIZE_64 = 64
    SIZE_128 = 128
    SIZE_256 = 256

    @property
    def display_name(self) -> str:
        return f"{self.value}px"


class StateImageMode(Enum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"


class ManualSlot(Enum):
    """The six user-fillable image slots of manual mode."""

    OFF_NORMAL = "off_normal"
    OFF_HOVER = "off_hover"
    OFF_ACTIVE = "off_active"
    ON_NORMAL = "on_normal"
    ON_HOVER = "on_hover"
    ON_ACTIVE = "on_active"

    @property
    def is_off(self) -> bool:
        return self.value.startswith("off_")

    @property
    def state(self) -> str:
        """'normal', 'hover' or 'active'."""
        return self.value.split("_", 1)[1]

    @classmethod
    def section(cls, off: bool) -> Tuple["ManualSlot", "ManualSlot", "ManualSlot"]:
        if off:
            return cls.OFF_NORMAL, cls.OFF_HOVER, cls.OFF_ACTIVE
        return cls.ON_NORMAL, cls.ON_HOVER, cls.ON_ACTIVE


@dataclass(frozen=True)
class ExportRequest:
    """Everything an export needs, detached from any UI state.

    In automatic mode `source` drives every state and the adjustment
    triples derive them. In manual mode `off_images` (and `on_images`
    when `toggle` is set) supply each state directly; missing entries
    are None and are reported at planning time.
    """
    icon_name: str
    destination: Path
    mode: StateImageMode = StateImageMode.AUTOMATIC
    scales: FrozenSet[IconScale] = frozenset(IconScale)
    sizes: FrozenSet[TrackIconSize] = frozenset({TrackIconSize.SIZE_128})
    generate_toolbar: bool = True
    generate_track: bool = True
    toggle: bool = False
    adjustments: StateTriple = OFF_ADJUSTMENTS
    on_adjustments: StateTriple = ON_ADJUSTMENTS
    source: Optional[RasterBuffer] = None
    off_images: StateTriple = field(default_factory=lambda: StateTriple(None, None, None))
    on_images: StateTriple = field(default_factory=lambda: StateTriple(None, None, None))
    padding: float = 0.0

    def __post_init__(self):
        if not 0.0 <= self.padding <= MAX_PADDING:
            raise ValueError(f"padding must be within [0, {MAX_PADDING}], got {self.padding}")
        # Accept plain iterables from callers; keep the stored value hashable.
        object.__setattr__(self, 'destination', Path(self.destination))
        object.__setattr__(self, 'scales', frozenset(IconScale(s) for s in self.scales))
        object.__setattr__(self, 'sizes', frozenset(TrackIconSize(s) for s in self.sizes))
        object.__setattr__(self, 'adjustments', StateTriple(*self.adjustments))
        object.__setattr__(self, 'on_adjustments', StateTriple(*self.on_adjustments))
        object.__setattr__(self, 'off_images', StateTriple(*self.off_images))
        object.__setattr__(self, 'on_images', StateTriple(*self.on_images))
