import logging
from engine.state import State
from engine.scene import Scene
from engine.systems import startup, tick, change_camera_scaling
from engine.render import draw_scene, draw_debug
from engine.input import is_quit, is_toggle_debug, to_resize_event
from data.schema import ResizeEvent

log = logging.getLogger("letterbox.gameplay")

# ticks run per frame at most; the rest of a long stall is dropped
MAX_TICKS_PER_FRAME = 5


class GameplayState(State):
    def enter(self, **kwargs):
        self.units = self.app.screen_units
        self.tick_dt = 1.0 / float(self.app.config.tick_rate)
        self.accumulator = 0.0
        self.ticks = 0
        self.debug = bool(kwargs.get("debug", False))

        self.scene = startup(Scene())

        # pygame posts no resize when the window opens; fit to the initial size now
        W, H = self.app.screen.get_size()
        change_camera_scaling(self.scene, [ResizeEvent(float(W), float(H))], self.units)
        self.pending = []

    def handle_event(self, e):
        if is_quit(e):
            self.app.running = False
        elif is_toggle_debug(e):
            self.debug = not self.debug
        else:
            ev = to_resize_event(e)
            if ev is not None:
                self.pending.append(ev)

    def update(self, dt):
        # resizes are applied every frame, whether or not a tick runs
        events, self.pending = self.pending, []
        change_camera_scaling(self.scene, events, self.units)

        self.accumulator += dt
        steps = 0
        while self.accumulator >= self.tick_dt and steps < MAX_TICKS_PER_FRAME:
            self.step()
            self.accumulator -= self.tick_dt
            steps += 1
        if steps == MAX_TICKS_PER_FRAME and self.accumulator >= self.tick_dt:
            log.debug("dropping %.3fs of simulation", self.accumulator)
            self.accumulator = 0.0

    def step(self):
        tick(self.scene, [], self.units)
        self.ticks += 1

    def draw(self, screen):
        draw_scene(screen, self.scene, self.app.config.clear_color)
        if self.debug and self.app.font:
            draw_debug(screen, self.app.font, self.scene, self.app.clock.get_fps())
