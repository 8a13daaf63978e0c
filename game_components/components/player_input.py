from dataclasses import dataclass
import typing
from game_components import config
from game_components.trace import Trace, info
from game_components.component import InputComponent

if typing.TYPE_CHECKING:
    from game_components.entity import Entity


@dataclass
class PlayerInputComponent(InputComponent):
    walk_acceleration: int = config.PLAYER_WALK_ACCELERATION
    trace: Trace = info

    def update(self, entity: "Entity", event: int):
        match event:
            case config.MOVE_LEFT:
                entity.update_velocity(-self.walk_acceleration)
                self.trace(f"{entity.name} moved left, velocity {entity.velocity}")
            case config.MOVE_RIGHT:
                entity.update_velocity(self.walk_acceleration)
                self.trace(f"{entity.name} moved right, velocity {entity.velocity}")
            case _:
                entity.reset()
                self.trace(f"{entity.name} got invalid input {event!r}, velocity and position reset")

    def update_autonomous(self, entity: "Entity"):
        # Players only move on key events
        pass
