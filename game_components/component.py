from abc import ABC, abstractmethod
import typing

if typing.TYPE_CHECKING:
    from game_components.entity import Entity


class InputComponent(ABC):
    @abstractmethod
    def update(self, entity: "Entity", event: int):
        """Apply one frame of keyboard input."""
        pass

    @abstractmethod
    def update_autonomous(self, entity: "Entity"):
        """Apply one frame of input when no event drives the entity."""
        pass


class PhysicsComponent(ABC):
    @abstractmethod
    def update(self, entity: "Entity"):
        pass


class GraphicsComponent(ABC):
    @abstractmethod
    def update(self, entity: "Entity"):
        pass
