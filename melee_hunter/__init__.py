"""Melee hunter: target, approach and kill the nearest mob in a loop."""

from .combat import CombatController, CombatState
from .config import Config
from .entities import EntityView
from .game import (
    DEAD_STATUSES,
    Entity,
    GameProcessNotFound,
    GameState,
    Status,
    Target,
    ViewMode,
    load_backend,
)
from .hunter import MeleeHunter
from .navigation import Navigator, byte_to_radian, heading_byte
from .targeting import is_mob, select_mob

__version__ = '1.0.0'
