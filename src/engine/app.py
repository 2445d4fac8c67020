import logging
import pygame

from data.loader import Loader
from data.schema import ScreenUnits
from .log import setup_logging
from .state import State
from states.boot import BootState

log = logging.getLogger("letterbox.app")

# world size of the visible play area; fixed for the whole run
SCREEN_UNITS = ScreenUnits(width=20.0, height=15.0)


class GameApp:
    def __init__(self, base_dir):
        self.base_dir = base_dir
        self.loader = Loader(base_dir)
        self.config = self.loader.load_game_config()
        setup_logging(self.config.log_level)

        pygame.init()
        self.screen_units = SCREEN_UNITS

        ##! WINDOW
        W, H = self.config.resolution
        self.screen = pygame.display.set_mode((W, H), pygame.RESIZABLE)
        pygame.display.set_caption(self.config.title)

        self.clock = pygame.time.Clock()
        self.fps = self.config.target_fps
        self.font = None

        self.state_stack = []
        self.running = True
        log.info("window %sx%s, viewport %sx%s units", W, H,
                 self.screen_units.width, self.screen_units.height)

        self.push_state(BootState(self))

    def push_state(self, st: State, **kwargs):
        log.debug("enter %s", st.name)
        self.state_stack.append(st)
        st.enter(**kwargs)

    def pop_state(self):
        if self.state_stack:
            top = self.state_stack.pop()
            log.debug("exit %s", top.name)
            top.exit()

    def switch_state(self, st: State, **kwargs):
        self.pop_state()
        self.push_state(st, **kwargs)

    def current_state(self):
        return self.state_stack[-1] if self.state_stack else None

    def run(self):
        while self.running and self.current_state():
            dt = self.clock.tick(self.fps) / 1000.0
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.running = False
                else:
                    self.current_state().handle_event(e)
            state = self.current_state()
            if state is None:
                break
            state.update(dt)
            # the display surface can change on resize
            self.screen = pygame.display.get_surface()
            state.draw(self.screen)
            pygame.display.flip()
        log.info("shutting down")
        pygame.quit()
