from dataclasses import dataclass
from typing import Tuple

import pygame

from .geometry import ScalingMode

Size = Tuple[int, int]


@dataclass
class OrthographicProjection:
    """2D camera projection centred on the world origin, y pointing up.

    `scale` is the visible half-extent along the fixed axis; in
    WINDOW_SIZE mode it is world units per pixel instead.
    """
    scaling_mode: ScalingMode = ScalingMode.WINDOW_SIZE
    scale: float = 1.0

    def half_extents(self, window_w: float, window_h: float) -> Tuple[float, float]:
        if self.scaling_mode is ScalingMode.FIXED_VERTICAL:
            return (self.scale * window_w / window_h, self.scale)
        if self.scaling_mode is ScalingMode.FIXED_HORIZONTAL:
            return (self.scale, self.scale * window_h / window_w)
        return (window_w / 2.0 * self.scale, window_h / 2.0 * self.scale)

    def pixels_per_unit(self, window_w: float, window_h: float) -> float:
        _, hy = self.half_extents(window_w, window_h)
        return window_h / (2.0 * hy)

    def world_to_screen(self, x: float, y: float, window_size: Size) -> Tuple[float, float]:
        W, H = window_size
        ppu = self.pixels_per_unit(W, H)
        return (W / 2.0 + x * ppu, H / 2.0 - y * ppu)

    def world_rect(self, translation, size, window_size: Size) -> pygame.Rect:
        """Pixel rect covering a sprite of `size` centred on `translation`."""
        W, H = window_size
        ppu = self.pixels_per_unit(W, H)
        cx, cy = self.world_to_screen(translation[0], translation[1], window_size)
        w = abs(size[0]) * ppu
        h = abs(size[1]) * ppu
        # round edges, not width, so neighbouring rects meet without gaps
        left = round(cx - w / 2.0)
        top = round(cy - h / 2.0)
        right = round(cx + w / 2.0)
        bottom = round(cy + h / 2.0)
        return pygame.Rect(left, top, right - left, bottom - top)
