"""
Game state types and the capability interface the hunter consumes.

The interface itself (process lookup, memory transport, input injection)
lives outside this package. A backend is any object providing the
``GameState`` methods below; the entry point builds one from a
``module:callable`` factory reference.
"""

import importlib
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol


class Status(IntEnum):
    """Entity / player status codes"""
    FIGHTING = 1
    DEAD_1 = 2
    DEAD_2 = 3


# Both codes mean the entity is dead; no difference has been observed.
DEAD_STATUSES = frozenset({Status.DEAD_1, Status.DEAD_2})


class ViewMode(IntEnum):
    THIRD_PERSON = 0
    FIRST_PERSON = 1


class GameProcessNotFound(Exception):
    """Raised by a backend factory when no game instance is running"""


@dataclass(frozen=True)
class Entity:
    """Snapshot of one entity table slot"""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    distance: float = 0.0
    spawn_flags: int = 0
    status: int = 0

    @classmethod
    def from_record(cls, record):
        """Build a snapshot from any backend record with matching attributes"""
        if isinstance(record, cls):
            return record
        # The local player record carries only a position
        return cls(
            x=float(record.x),
            y=float(record.y),
            z=float(record.z),
            distance=float(getattr(record, 'distance', 0.0)),
            spawn_flags=int(getattr(record, 'spawn_flags', 0)),
            status=int(getattr(record, 'status', 0)),
        )

    @property
    def is_dead(self):
        return self.status in DEAD_STATUSES


@dataclass(frozen=True)
class Target:
    """
    Durable handle on an entity.

    ``index`` identifies the slot; ``entity`` is the last snapshot read and
    must be refreshed before any decision that depends on it.
    """
    index: int
    entity: Entity

    def within(self, tolerance):
        return self.entity.distance <= tolerance


class GameState(Protocol):
    """Capabilities the hunter needs from the running game"""

    def scan_entity(self, index): ...

    def get_local_player(self): ...

    def get_player_status(self): ...

    def set_player_view_mode(self, mode): ...

    def set_visual_target(self, index): ...

    def set_player_facing(self, radian): ...

    def send_combat_command(self, command): ...

    def set_movement_key(self, key, pressed): ...


def load_backend(reference):
    """
    Resolve a ``package.module:factory`` reference to the factory callable.

    Raises ValueError when the reference is malformed or does not name a
    callable.
    """
    module_name, sep, attr = reference.partition(':')
    if not sep or not module_name or not attr:
        raise ValueError(f"Backend must look like 'module:factory', got {reference!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import backend module {module_name!r}: {e}") from e

    factory = module
    for part in attr.split('.'):
        try:
            factory = getattr(factory, part)
        except AttributeError:
            raise ValueError(f"Backend module {module_name!r} has no attribute {attr!r}") from None

    if not callable(factory):
        raise ValueError(f"Backend {reference!r} is not callable")
    return factory
