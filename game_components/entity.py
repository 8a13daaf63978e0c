from game_components import config
from game_components.trace import Trace, info
from game_components.component import InputComponent, PhysicsComponent, GraphicsComponent
from game_components.components.player_input import PlayerInputComponent
from game_components.components.demo_input import DemoInputComponent
from game_components.components.object_physics import ObjectPhysicsComponent
from game_components.components.object_graphics import ObjectGraphicsComponent


class Entity:
    """A game object made of one input, one physics and one graphics component.

    Components are fixed at construction. Each frame they run in order
    input, physics, graphics, and read or write ``velocity`` and ``position``
    directly.
    """

    velocity: int
    position: int

    def __init__(
        self,
        name: str,
        input_component: InputComponent,
        physics: PhysicsComponent,
        graphics: GraphicsComponent,
    ):
        for component, kind in (
            (input_component, InputComponent),
            (physics, PhysicsComponent),
            (graphics, GraphicsComponent),
        ):
            if not isinstance(component, kind):
                raise TypeError(f"{name}: expected {kind.__name__}, got {component!r}")

        self._name = name
        self._input = input_component
        self._physics = physics
        self._graphics = graphics

        self.velocity = 0
        self.position = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def input(self) -> InputComponent:
        return self._input

    @property
    def physics(self) -> PhysicsComponent:
        return self._physics

    @property
    def graphics(self) -> GraphicsComponent:
        return self._graphics

    def update(self, event: int):
        self._input.update(self, event)
        self._physics.update(self)
        self._graphics.update(self)

    def update_autonomous(self):
        self._input.update_autonomous(self)
        self._physics.update(self)
        self._graphics.update(self)

    def update_velocity(self, acceleration: int):
        self.velocity += acceleration

    def update_position(self):
        self.position += self.velocity

    def reset(self):
        self.velocity = 0
        self.position = 0

    def __repr__(self) -> str:
        return f"Entity(name={self._name!r}, velocity={self.velocity}, position={self.position})"


def create_player(trace: Trace = info) -> Entity:
    return Entity(
        config.PLAYER_NAME,
        PlayerInputComponent(trace=trace),
        ObjectPhysicsComponent(trace=trace),
        ObjectGraphicsComponent(trace=trace),
    )


def create_npc(trace: Trace = info) -> Entity:
    return Entity(
        config.NPC_NAME,
        DemoInputComponent(trace=trace),
        ObjectPhysicsComponent(trace=trace),
        ObjectGraphicsComponent(trace=trace),
    )
