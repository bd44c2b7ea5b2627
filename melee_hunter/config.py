# ============================================================================
# CONFIGURATION
# ============================================================================


class Config:
    # Entity table
    MAX_ENTITY_ARRAY_SIZE = 4096
    MOB_FLAG = 0x10            # Spawn flag set on everything that is NOT a mob

    # Combat settings
    MELEE_DISTANCE = 3         # Distance units; authoritative stop distance for approach
    ATTACK_COMMAND = '/attack on'
    SETTLE_SECONDS = 0.1       # Wait after toggling attack before re-reading
    COMBAT_POLL_SECONDS = 0.1  # Re-poll interval while already fighting

    # Movement
    MOVE_FORWARD_KEY = 'num8'
    TICK_SECONDS = 0.1         # Navigation cadence

    # Loop timing
    NO_TARGET_RETRY_DELAY = 1.0  # Seconds to wait when no mob is in the table
    CYCLE_ERROR_DELAY = 1.0      # Seconds to wait after a failed cycle
    PAUSE_POLL_SECONDS = 0.1

    # Game process
    GAME_PROCESS_NAME = 'pol'

    # Hotkeys
    PAUSE_KEY = 'caps_lock'    # pynput Key name

    # Chat input
    CHAT_TYPE_INTERVAL = 0.02  # Seconds between typed characters
    CHAT_SUBMIT_KEY = 'enter'

    # Debug & Logging
    DEBUG_MODE = False
    LOG_DIR = 'logs'
