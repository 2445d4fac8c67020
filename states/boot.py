import pygame
from engine.state import State
from .gameplay import GameplayState

class BootState(State):
    def enter(self, **kwargs):
        # Fonts are only needed by the debug overlay
        self.app.font = pygame.font.SysFont("consolas,dejavusansmono,monospace", 18)
        # Go straight to the scene
        self.app.switch_state(GameplayState(self.app), debug=self.app.config.debug_overlay)

    def draw(self, screen):
        screen.fill((20,20,24))
