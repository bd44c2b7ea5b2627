from .config import Config
from .game import Entity, Target


# ============================================================================
# ENTITY VIEW
# ============================================================================

class EntityView:
    """Read-only access to the live entity table"""

    def __init__(self, game):
        self.game = game

    def scan_all(self):
        """
        Read every slot of the entity table.

        Returns {index: Entity} for indices 0..MAX_ENTITY_ARRAY_SIZE-1.
        Unoccupied slots come back as whatever the backend reports (usually
        all zeroes); no slot is ever skipped.
        """
        size = Config.MAX_ENTITY_ARRAY_SIZE

        bulk = getattr(self.game, 'scan_entities', None)
        if bulk is not None:
            records = list(bulk(0, size))
            if len(records) != size:
                raise ValueError(f"Bulk scan returned {len(records)} entries, expected {size}")
            return {index: Entity.from_record(record) for index, record in enumerate(records)}

        return {index: Entity.from_record(self.game.scan_entity(index)) for index in range(size)}

    def refresh(self, index):
        """Re-read one slot and return a fresh Target"""
        return Target(index, Entity.from_record(self.game.scan_entity(index)))

    def local_player(self):
        return Entity.from_record(self.game.get_local_player())

    def player_status(self):
        return int(self.game.get_player_status())
