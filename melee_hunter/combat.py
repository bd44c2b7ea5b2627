import time
from enum import Enum

from .config import Config
from .game import Status


# ============================================================================
# COMBAT CONTROLLER
# ============================================================================

class CombatState(Enum):
    IDLE = 'idle'
    FIGHTING = 'fighting'
    DEAD = 'dead'


class CombatController:
    """Melee a target until it dies"""

    def __init__(self, logger, game, view, navigator):
        self.logger = logger
        self.game = game
        self.view = view
        self.navigator = navigator
        self.state = CombatState.IDLE
        self.total_kills = 0
        self.attack_commands = 0
        self.chases = 0  # Re-approaches after the target moved away

    def is_fighting(self):
        return self.view.player_status() == Status.FIGHTING

    def start_attack(self):
        """Toggle auto-attack on and let the game register it"""
        self.game.send_combat_command(Config.ATTACK_COMMAND)
        self.attack_commands += 1
        self.logger.info(f"  → {Config.ATTACK_COMMAND}")
        time.sleep(Config.SETTLE_SECONDS)

    def engage(self, target, melee_range):
        """
        Fight the target until its status reads dead.

        Attack is only ever switched on; the target's death ends the fight.
        Returns the final (dead) Target snapshot.
        """
        self.state = CombatState.IDLE
        self.logger.info(f"\n{'>'*60}")
        self.logger.info(f"⚔️  ENGAGING: #{target.index}")
        self.logger.info(f"{'>'*60}")

        first_read = True
        while True:
            # Get updated mob information
            target = self.view.refresh(target.index)

            if target.entity.is_dead:
                self.state = CombatState.DEAD
                if first_read:
                    self.logger.info("✗ Mob already dead, skipping")
                    return target
                break
            first_read = False

            # Mob ran away - close the distance again before attacking
            if not target.within(melee_range):
                self.chases += 1
                self.logger.info(f"  Target moved away (distance {target.entity.distance:.1f})")
                self.navigator.approach(target, melee_range)
                continue

            if self.is_fighting():
                if self.state is not CombatState.FIGHTING:
                    self.logger.debug("    Player is fighting")
                self.state = CombatState.FIGHTING
                time.sleep(Config.COMBAT_POLL_SECONDS)
            else:
                self.state = CombatState.IDLE
                self.start_attack()

        self.total_kills += 1
        self.logger.info(f"{'<'*60}")
        self.logger.info(f"💀 #{target.index} dead (status {target.entity.status}) | Total kills: {self.total_kills}")
        self.logger.info(f"{'<'*60}\n")
        return target
