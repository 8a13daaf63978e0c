from dataclasses import dataclass
import typing
from game_components.trace import Trace, info
from game_components.component import GraphicsComponent

if typing.TYPE_CHECKING:
    from game_components.entity import Entity


@dataclass
class ObjectGraphicsComponent(GraphicsComponent):
    trace: Trace = info

    def update(self, entity: "Entity"):
        self.trace(
            f"{entity.name} drawn at position {entity.position}, velocity {entity.velocity}"
        )
