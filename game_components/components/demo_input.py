from dataclasses import dataclass
import typing
from game_components import config
from game_components.trace import Trace, info
from game_components.component import InputComponent

if typing.TYPE_CHECKING:
    from game_components.entity import Entity


@dataclass
class DemoInputComponent(InputComponent):
    """Drives an entity without a user, e.g. an NPC or an idle player in demo mode."""

    walk_acceleration: int = config.NPC_WALK_ACCELERATION
    trace: Trace = info

    def update(self, entity: "Entity", event: int):
        # Key events do not steer a demo entity
        pass

    def update_autonomous(self, entity: "Entity"):
        entity.update_velocity(self.walk_acceleration)
        self.trace(f"{entity.name} walked right on its own, velocity {entity.velocity}")
