import time
import traceback

from .combat import CombatController
from .config import Config
from .entities import EntityView
from .navigation import Navigator
from .targeting import select_mob


# ============================================================================
# MAIN CONTROLLER
# ============================================================================

class MeleeHunter:
    """Scan, pick the nearest mob, run to it and kill it, forever"""

    def __init__(self, logger, game, pause_toggle=None, log_dir=None):
        self.logger = logger
        self.game = game
        self.log_dir = log_dir

        # Components
        self.view = EntityView(game)
        self.navigator = Navigator(logger, game, self.view)
        self.combat = CombatController(logger, game, self.view, self.navigator)

        # Called between cycles; returns True when the pause key was pressed
        self.pause_toggle = pause_toggle

        self.cycle = 0
        self.empty_scans = 0
        self.failed_cycles = 0
        self.target_failures = 0
        self.running = True
        self.paused = False
        self.start_time = time.time()

    def run(self, max_cycles=None):
        """Main loop with pause/resume; stops on Ctrl+C or after max_cycles"""
        self.logger.info("\n🚀 Hunter started! Press Ctrl+C to stop.\n")
        if self.pause_toggle is not None:
            self.logger.info("💡 Controls: CapsLock = Pause/Resume\n")

        self.logger.info("📋 Configuration:")
        self.logger.info(f"   Melee Distance: {Config.MELEE_DISTANCE}")
        self.logger.info(f"   Entity Table: {Config.MAX_ENTITY_ARRAY_SIZE} slots")
        self.logger.info(f"   Attack Command: {Config.ATTACK_COMMAND}")
        self.logger.info(f"   Cycle Limit: {max_cycles if max_cycles is not None else 'none'}")
        self.logger.info("")

        try:
            while self.running:
                if self.pause_toggle is not None and self.pause_toggle():
                    self.paused = not self.paused
                    if self.paused:
                        self.logger.info("\n⏸️  PAUSED - Press CapsLock to resume\n")
                    else:
                        self.logger.info("\n▶️  RESUMED\n")

                if self.paused:
                    time.sleep(Config.PAUSE_POLL_SECONDS)
                    continue

                if max_cycles is not None and self.cycle >= max_cycles:
                    break

                self.cycle += 1
                self.run_cycle()

        except KeyboardInterrupt:
            self.logger.info("\n\n⛔ Hunter stopped by user")
        finally:
            self.print_statistics()

    def run_cycle(self):
        """
        One scan → select → target → approach → engage pass.

        Returns True when a mob was killed. An empty scan or an error waits
        before returning False so the next cycle starts after a short delay.
        """
        try:
            self.logger.info(f"\n{'='*70}")
            self.logger.info(f"CYCLE #{self.cycle}")
            self.logger.info(f"{'='*70}")

            entities = self.view.scan_all()
            target = select_mob(entities)

            if target is None:
                self.empty_scans += 1
                self.logger.info("→ No mob found, retrying")
                time.sleep(Config.NO_TARGET_RETRY_DELAY)
                return False

            self.logger.info(f"→ Nearest mob: #{target.index} (distance {target.entity.distance:.1f})")

            if not self.game.set_visual_target(target.index):
                self.target_failures += 1
                self.logger.warning(f"⚠️  Could not place cursor on #{target.index}")

            self.navigator.approach(target, Config.MELEE_DISTANCE)
            self.combat.engage(target, Config.MELEE_DISTANCE)
            return True

        except Exception as e:
            self.failed_cycles += 1
            self.logger.error(f"❌ CYCLE ERROR: {e}")
            self.logger.error(f"Cycle #{self.cycle} failed")
            self.logger.error(traceback.format_exc())
            time.sleep(Config.CYCLE_ERROR_DELAY)
            return False

    def print_statistics(self):
        """Print final statistics"""
        uptime = int(time.time() - self.start_time)

        self.logger.info("\n" + "="*70)
        self.logger.info("📊 FINAL STATISTICS")
        self.logger.info("="*70)

        if self.log_dir:
            self.logger.info(f"📁 Log Directory: {self.log_dir}")
        self.logger.info(f"⏱️  Uptime: {uptime}s ({uptime//60}m {uptime%60}s)")
        self.logger.info(f"🔄 Total Cycles: {self.cycle}")
        self.logger.info(f"   Empty Scans: {self.empty_scans}")
        self.logger.info(f"   Failed Cycles: {self.failed_cycles}")
        self.logger.info("")

        self.logger.info("⚔️  Combat:")
        self.logger.info(f"   Total Kills: {self.combat.total_kills}")
        self.logger.info(f"   Attack Commands: {self.combat.attack_commands}")
        self.logger.info(f"   Approaches: {self.navigator.approaches}")
        self.logger.info(f"   Movement Ticks: {self.navigator.steps}")
        self.logger.info(f"   Chases: {self.combat.chases}")
        self.logger.info(f"   Targeting Failures: {self.target_failures}")
        kills_per_hour = (self.combat.total_kills / uptime * 3600) if uptime > 0 else 0
        self.logger.info(f"   Kills/Hour: {kills_per_hour:.1f}")

        self.logger.info("="*70)

        return {
            'uptime': uptime,
            'cycles': self.cycle,
            'empty_scans': self.empty_scans,
            'failed_cycles': self.failed_cycles,
            'kills': self.combat.total_kills,
            'attack_commands': self.combat.attack_commands,
            'approaches': self.navigator.approaches,
            'movement_ticks': self.navigator.steps,
            'chases': self.combat.chases,
            'target_failures': self.target_failures,
        }
