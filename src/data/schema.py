from dataclasses import dataclass
from typing import Tuple

FPoint = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Color = Tuple[int, int, int]

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@dataclass(frozen=True)
class ScreenUnits:
    """Size of the visible play area in world units."""
    width: float = 20.0
    height: float = 15.0

    @property
    def aspect(self) -> float:
        return self.width / self.height


@dataclass
class Transform:
    translation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)


@dataclass
class Sprite:
    color: Color = WHITE


@dataclass
class MovingObject:
    direction: int = 1

    def __post_init__(self):
        if self.direction not in (-1, 1):
            raise ValueError(f"direction must be +1 or -1, got {self.direction!r}")

    def flip(self):
        self.direction *= -1


@dataclass
class Letterbox:
    # 0 -> right/top bar, 1 -> left/bottom bar
    id: int

    def __post_init__(self):
        if self.id not in (0, 1):
            raise ValueError(f"letterbox id must be 0 or 1, got {self.id!r}")


@dataclass
class ResizeEvent:
    width: float
    height: float
    window_id: int = 0
    is_primary: bool = True


@dataclass
class GameConfig:
    title: str = "Letterbox Bounce"
    resolution: Tuple[int, int] = (1280, 720)
    target_fps: int = 60
    tick_rate: int = 60
    clear_color: Color = (102, 102, 102)
    debug_overlay: bool = False
    log_level: str = "INFO"
