"""
Target selection.

A slot counts as a mob when its spawn flags do NOT carry Config.MOB_FLAG.
The nearest mob wins; on equal distance the lowest index wins.
"""

import numpy as np

from .config import Config
from .game import Target


def is_mob(entity):
    """Check whether this entity has the mob flag clear"""
    return (entity.spawn_flags & Config.MOB_FLAG) == 0


def select_mob(entities):
    """
    Find the mob closest to the player.

    Args:
        entities: {index: Entity}, as returned by EntityView.scan_all()

    Returns a Target, or None when no entity qualifies.
    """
    if not entities:
        return None

    indices = np.fromiter(entities.keys(), dtype=np.int64, count=len(entities))
    order = np.argsort(indices, kind='stable')
    indices = indices[order]

    snapshots = [entities[int(i)] for i in indices]
    flags = np.fromiter((e.spawn_flags for e in snapshots), dtype=np.int64, count=len(snapshots))
    distances = np.fromiter((e.distance for e in snapshots), dtype=np.float64, count=len(snapshots))

    mob_mask = (flags & Config.MOB_FLAG) == 0
    if not mob_mask.any():
        return None

    candidates = np.flatnonzero(mob_mask)
    # argmin returns the first minimum, so ties go to the lowest index
    best = candidates[np.argmin(distances[candidates])]

    return Target(int(indices[best]), snapshots[best])
