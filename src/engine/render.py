import pygame
from typing import Tuple

CREAM = (244, 244, 236)
UI_BG = (18, 22, 26)


def draw_scene(surf, scene, clear_color: Tuple[int, int, int]):
    surf.fill(clear_color)
    size = surf.get_size()
    projection = scene.camera().projection
    # painter's order: low z first, letterboxes (z=999) last
    for ent in scene.drawables():
        t = ent.transform
        rect = projection.world_rect(t.translation, t.scale, size)
        if rect.width <= 0 or rect.height <= 0:
            continue
        pygame.draw.rect(surf, ent.sprite.color, rect)


def draw_debug(surf, font, scene, fps: float):
    projection = scene.camera().projection
    lines = [
        f"mode: {projection.scaling_mode.value}",
        f"scale: {projection.scale:.2f}",
        f"fps: {fps:.0f}",
    ]
    texts = [font.render(s, True, CREAM) for s in lines]
    w = max(t.get_width() for t in texts) + 16
    h = sum(t.get_height() for t in texts) + 12
    pygame.draw.rect(surf, UI_BG, (0, 0, w, h))
    y = 6
    for t in texts:
        surf.blit(t, (8, y))
        y += t.get_height()
