import os

# keep pygame headless in tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from data.schema import ScreenUnits
from engine.scene import Scene
from engine.systems import startup

@pytest.fixture
def units():
    return ScreenUnits(20.0, 15.0)

@pytest.fixture
def scene():
    return startup(Scene())
