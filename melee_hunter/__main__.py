import argparse
import sys
import time

from .config import Config
from .game import GameProcessNotFound, load_backend
from .hunter import MeleeHunter
from .log import setup_logger


BANNER = """
=========================================================
                    MELEE HUNTER
   Nearest-mob targeting | Run to melee | Auto-attack
=========================================================
Controls:
- CapsLock = Start / Pause / Resume
- Ctrl+C   = Stop
"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog='melee-hunter',
        description='Target, approach and melee the nearest mob, forever.',
    )
    parser.add_argument('backend',
                        help="game state factory as 'module:callable'")
    parser.add_argument('--process-name', default=Config.GAME_PROCESS_NAME,
                        help='game process name passed to the factory (default: %(default)s)')
    parser.add_argument('--keyboard-input', action='store_true',
                        help='send movement keys and chat commands with pyautogui')
    parser.add_argument('--no-wait', action='store_true',
                        help='start immediately instead of waiting for CapsLock')
    parser.add_argument('--no-hotkeys', action='store_true',
                        help='do not start the global keyboard listener')
    parser.add_argument('--cycles', type=int, default=None,
                        help='stop after this many cycles (default: run forever)')
    parser.add_argument('--debug', action='store_true', default=Config.DEBUG_MODE,
                        help='show debug output on the console')
    return parser


def create_game(reference, process_name):
    """Build the game state from a backend reference"""
    factory = load_backend(reference)
    game = factory(process_name=process_name)
    if game is None:
        raise GameProcessNotFound(process_name)
    return game


def main(argv=None):
    """Entry point"""
    args = build_parser().parse_args(argv)
    print(BANNER)

    try:
        game = create_game(args.backend, args.process_name)
    except GameProcessNotFound:
        print("No game process could be found.")
        return 1
    except ValueError as e:
        print(f"Invalid backend: {e}")
        return 1

    logger, log_dir = setup_logger(debug=args.debug)
    logger.info("="*70)
    logger.info("MELEE HUNTER")
    logger.info("="*70)
    logger.info(f"Log directory: {log_dir}")
    logger.info(f"Backend: {args.backend} (process '{args.process_name}')")
    logger.info("="*70)

    keys = None
    if args.keyboard_input:
        from .controls import KeyboardGameState, KeyboardInput
        keys = KeyboardInput(logger)
        game = KeyboardGameState(game, keys)

    hotkey = None
    if not args.no_hotkeys:
        from .controls import PauseHotkey
        print("Starting global keyboard listener...")
        hotkey = PauseHotkey()
        hotkey.start()
        time.sleep(0.5)

        if not args.no_wait:
            print("Press CapsLock to start the hunter...")
            hotkey.wait()

    print("Hunter starting...\n")

    hunter = MeleeHunter(
        logger,
        game,
        pause_toggle=hotkey.toggled if hotkey else None,
        log_dir=log_dir,
    )
    try:
        hunter.run(max_cycles=args.cycles)
    finally:
        if keys is not None:
            keys.release_all()
        if hotkey is not None:
            hotkey.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
