import enum
from dataclasses import dataclass
from typing import Tuple

from data.schema import ScreenUnits, FPoint


class ScalingMode(enum.Enum):
    WINDOW_SIZE = "window_size"
    FIXED_VERTICAL = "fixed_vertical"
    FIXED_HORIZONTAL = "fixed_horizontal"


@dataclass(frozen=True)
class BarGeometry:
    size: FPoint
    position: FPoint


@dataclass(frozen=True)
class ViewportFit:
    """Result of fitting the virtual viewport into a window.

    `bars[0]` is the right (or top) bar, `bars[1]` the left (or bottom) one.
    """
    mode: ScalingMode
    scale: float
    units_per_pixel: float
    pad: float
    bars: Tuple[BarGeometry, BarGeometry]


def choose_scaling_mode(units: ScreenUnits, window_w: float, window_h: float) -> ScalingMode:
    # equal aspect counts as "wider" -> no bars, fixed vertical
    if window_w / window_h < units.aspect:
        return ScalingMode.FIXED_HORIZONTAL
    return ScalingMode.FIXED_VERTICAL


def letterboxes_vertical(units: ScreenUnits, window_w: float, window_h: float) -> Tuple[float, float, Tuple[BarGeometry, BarGeometry]]:
    """Bars to the left and right when the viewport height fills the window."""
    units_per_pixel = window_h / units.height
    window_unit_width = window_w / units_per_pixel

    pad = (window_unit_width - units.width) / 2.0
    pos_x = (pad + units.width) / 2.0

    bars = (
        BarGeometry(size=(pad, units.height), position=(pos_x, 0.0)),
        BarGeometry(size=(pad, units.height), position=(-pos_x, 0.0)),
    )
    return units_per_pixel, pad, bars


def letterboxes_horizontal(units: ScreenUnits, window_w: float, window_h: float) -> Tuple[float, float, Tuple[BarGeometry, BarGeometry]]:
    """Bars above and below when the viewport width fills the window."""
    units_per_pixel = window_w / units.width
    window_unit_height = window_h / units_per_pixel

    pad = (window_unit_height - units.height) / 2.0
    pos_y = (pad + units.height) / 2.0

    bars = (
        BarGeometry(size=(units.width, pad), position=(0.0, pos_y)),
        BarGeometry(size=(units.width, pad), position=(0.0, -pos_y)),
    )
    return units_per_pixel, pad, bars


def fit_viewport(units: ScreenUnits, window_w: float, window_h: float) -> ViewportFit:
    if window_w <= 0 or window_h <= 0:
        raise ValueError(f"window size must be positive, got {window_w}x{window_h}")
    mode = choose_scaling_mode(units, window_w, window_h)
    if mode is ScalingMode.FIXED_VERTICAL:
        upp, pad, bars = letterboxes_vertical(units, window_w, window_h)
        scale = units.height / 2.0
    else:
        upp, pad, bars = letterboxes_horizontal(units, window_w, window_h)
        scale = units.width / 2.0
    return ViewportFit(mode=mode, scale=scale, units_per_pixel=upp, pad=pad, bars=bars)
