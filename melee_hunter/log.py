import logging
import os
from datetime import datetime

from .config import Config


# ============================================================================
# LOGGING
# ============================================================================

def setup_logger(log_root=None, debug=None):
    """Setup logging system"""
    if log_root is None:
        log_root = Config.LOG_DIR
    if debug is None:
        debug = Config.DEBUG_MODE

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_dir = os.path.join(log_root, f"session_{timestamp}")
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger('MeleeHunter')
    logger.setLevel(logging.DEBUG)

    # Drop handlers from an earlier session in the same process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # File handler
    fh = logging.FileHandler(os.path.join(log_dir, 'bot.log'), encoding='utf-8')
    fh.setLevel(logging.DEBUG)

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if debug else logging.INFO)

    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    fh.setFormatter(formatter)
    ch.setFormatter(formatter)

    logger.addHandler(fh)
    logger.addHandler(ch)

    return logger, log_dir
