"""
Startup and per-tick systems. Each system is a plain function over a Scene;
`startup` and `tick` compose them in the order the game runs them.
"""
import logging
from typing import Iterable, Optional

from data.schema import (
    ScreenUnits, Transform, Sprite, MovingObject, Letterbox, ResizeEvent, WHITE, BLACK
)
from .camera import OrthographicProjection
from .geometry import ViewportFit, fit_viewport
from .scene import Scene, SceneError

log = logging.getLogger("letterbox.systems")

SAMPLE_Z = 10.0
LETTERBOX_Z = 999.0
# how far past the viewport edge (total, both sides) the sample may travel
SAFE_MARGIN = 4.0
STEP = 1.0 / 6.0


# ---------- Startup ----------
def setup_camera(scene: Scene):
    return scene.spawn(projection=OrthographicProjection())


def spawn_sample_object(scene: Scene, direction: int = 1):
    return scene.spawn(
        transform=Transform(translation=(0.0, 0.0, SAMPLE_Z), scale=(1.0, 1.0, 1.0)),
        sprite=Sprite(color=WHITE),
        moving=MovingObject(direction=direction),
    )


def spawn_letterbox(scene: Scene, id: int, color=BLACK):
    # zero size until the first resize event places it
    return scene.spawn(
        transform=Transform(translation=(0.0, 0.0, LETTERBOX_Z), scale=(0.0, 0.0, 1.0)),
        sprite=Sprite(color=color),
        letterbox=Letterbox(id=id),
    )


def spawn_letterboxes(scene: Scene):
    spawn_letterbox(scene, 0, BLACK)
    spawn_letterbox(scene, 1, BLACK)


def startup(scene: Scene) -> Scene:
    setup_camera(scene)
    spawn_sample_object(scene)
    spawn_letterboxes(scene)
    return scene


# ---------- Per tick ----------
def set_letterbox(transform: Transform, width: float, height: float, x_pos: float, y_pos: float):
    transform.scale = (width, height, 1.0)
    transform.translation = (x_pos, y_pos, LETTERBOX_Z)


def apply_fit(scene: Scene, fit: ViewportFit):
    projection = scene.camera().projection
    boxes = scene.letterboxes()
    if sorted(e.letterbox.id for e in boxes) != [0, 1]:
        raise SceneError(f"expected letterboxes 0 and 1, found {[e.letterbox.id for e in boxes]}")
    for ent in boxes:
        bar = fit.bars[ent.letterbox.id]
        set_letterbox(ent.transform, bar.size[0], bar.size[1], bar.position[0], bar.position[1])

    projection.scaling_mode = fit.mode
    projection.scale = fit.scale


def change_camera_scaling(scene: Scene, resize_events: Iterable[ResizeEvent], units: ScreenUnits) -> Optional[ViewportFit]:
    """Refit camera and letterboxes to the first primary-window resize in the batch."""
    for window in resize_events:
        if not window.is_primary:
            continue
        if window.width <= 0 or window.height <= 0:
            log.debug("skipping zero-sized window %sx%s", window.width, window.height)
            continue
        fit = fit_viewport(units, window.width, window.height)
        apply_fit(scene, fit)
        log.debug("window %sx%s -> %s scale=%.3f pad=%.3f",
                  window.width, window.height, fit.mode.value, fit.scale, fit.pad)
        return fit
    return None


def move_sample_object(scene: Scene, units: ScreenUnits):
    """Bounce every moving object left and right, past the edges and under the bars."""
    limit = (units.width + SAFE_MARGIN) / 2.0
    for ent in scene.moving_objects():
        x, y, z = ent.transform.translation
        if x > limit or x < -limit:
            ent.moving.flip()
        ent.transform.translation = (x + ent.moving.direction * STEP, y, z)


def tick(scene: Scene, resize_events: Iterable[ResizeEvent], units: ScreenUnits) -> Scene:
    change_camera_scaling(scene, resize_events, units)
    move_sample_object(scene, units)
    return scene
