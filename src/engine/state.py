class State:
    """One screen of the game on the app's state stack.

    Lifecycle: enter() when pushed, then handle_event/update/draw every
    frame while on top, exit() when popped.
    """
    def __init__(self, app):
        self.app = app

    @property
    def name(self) -> str:
        return type(self).__name__

    def enter(self, **kwargs): pass
    def handle_event(self, e): pass
    def update(self, dt: float): pass
    def draw(self, screen): pass
    def exit(self): pass
