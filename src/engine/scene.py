import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from data.schema import Transform, Sprite, MovingObject, Letterbox
from .camera import OrthographicProjection


class SceneError(RuntimeError):
    """Broken scene invariant (no camera, wrong letterbox count). Not recoverable."""


@dataclass
class Entity:
    id: int
    transform: Transform = field(default_factory=Transform)
    sprite: Optional[Sprite] = None
    moving: Optional[MovingObject] = None
    letterbox: Optional[Letterbox] = None
    projection: Optional[OrthographicProjection] = None


class Scene:
    """Entity store keyed by stable integer ids. Ids are never reused."""

    def __init__(self):
        self._entities: Dict[int, Entity] = {}
        self._ids = itertools.count()

    def spawn(self, **components) -> Entity:
        ent = Entity(id=next(self._ids), **components)
        self._entities[ent.id] = ent
        return ent

    def get(self, entity_id: int) -> Optional[Entity]:
        return self._entities.get(entity_id)

    def despawn(self, entity_id: int) -> bool:
        return self._entities.pop(entity_id, None) is not None

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    def __len__(self):
        return len(self._entities)

    # ---------- Queries ----------
    def camera(self) -> Entity:
        for e in self._entities.values():
            if e.projection is not None:
                return e
        raise SceneError("scene has no camera")

    def letterboxes(self) -> List[Entity]:
        boxes = [e for e in self._entities.values() if e.letterbox is not None]
        return sorted(boxes, key=lambda e: e.letterbox.id)

    def moving_objects(self) -> List[Entity]:
        return [e for e in self._entities.values() if e.moving is not None]

    def drawables(self) -> List[Entity]:
        items = [e for e in self._entities.values() if e.sprite is not None]
        return sorted(items, key=lambda e: (e.transform.translation[2], e.id))
