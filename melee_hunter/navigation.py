import math
import time

from .config import Config
from .game import ViewMode


# ============================================================================
# HEADING
# ============================================================================

def heading_byte(player, target):
    """
    Facing angle from player to target, encoded as a byte (0-255 = one turn)

    Only the horizontal plane (x, z) is used. The arctangent only covers
    half a turn, so 128 is added when the target lies to the player's -x side.
    """
    dx = target.x - player.x
    dz = target.z - player.z

    if dx != 0:
        ratio = dz / dx
    elif dz != 0:
        ratio = math.copysign(math.inf, dz)
    else:
        ratio = 0.0

    angle = round(math.atan(ratio) * -(128.0 / math.pi)) % 256

    if player.x > target.x:
        angle = (angle + 128) % 256

    return angle


def byte_to_radian(angle):
    """Convert a heading byte to radians (divisor 255, as the game does)"""
    return angle / 255 * 2 * math.pi


# ============================================================================
# NAVIGATOR
# ============================================================================

class Navigator:
    """Run the player into melee range of a target"""

    def __init__(self, logger, game, view):
        self.logger = logger
        self.game = game
        self.view = view
        self.approaches = 0
        self.steps = 0

    def face(self, target, player):
        """Turn the player towards the target; returns the radian applied"""
        angle = heading_byte(player, target.entity)
        radian = byte_to_radian(angle)
        self.game.set_player_facing(radian)
        self.logger.debug(f"    Facing byte={angle} ({radian:.3f} rad)")
        return radian

    def approach(self, target, tolerance):
        """
        Move towards the target until it is within melee distance.

        ``tolerance`` only decides whether to move at all; once moving, the
        loop stops at Config.MELEE_DISTANCE. Returns the last Target read.
        """
        target = self.view.refresh(target.index)
        if target.within(tolerance):
            return target

        self.approaches += 1
        self.logger.info(f"  → Approaching #{target.index} (distance {target.entity.distance:.1f})")

        try:
            while True:
                # Get updated mob information
                target = self.view.refresh(target.index)

                # Stop when within melee distance
                if target.within(Config.MELEE_DISTANCE):
                    break

                # Heading changes only stick in first person
                self.game.set_player_view_mode(ViewMode.FIRST_PERSON)

                player = self.view.local_player()
                self.face(target, player)

                self.game.set_movement_key(Config.MOVE_FORWARD_KEY, True)
                self.steps += 1
                self.logger.debug(f"    Distance: {target.entity.distance:.1f}")

                time.sleep(Config.TICK_SECONDS)
        finally:
            self.game.set_movement_key(Config.MOVE_FORWARD_KEY, False)

        self.logger.info(f"  ✓ In range of #{target.index} (distance {target.entity.distance:.1f})")
        return target
