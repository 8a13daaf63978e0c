from dataclasses import dataclass
import typing
from game_components.trace import Trace, info
from game_components.component import PhysicsComponent

if typing.TYPE_CHECKING:
    from game_components.entity import Entity


@dataclass
class ObjectPhysicsComponent(PhysicsComponent):
    trace: Trace = info

    def update(self, entity: "Entity"):
        entity.update_position()
        self.trace(f"{entity.name} position updated to {entity.position}")
