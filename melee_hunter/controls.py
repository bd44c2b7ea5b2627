"""
Keyboard side of the game interface.

KeyboardInput drives movement and chat commands through pyautogui.
PauseHotkey watches for the pause key globally through pynput.
"""

import threading
import time

import pyautogui
from pynput import keyboard

from .config import Config

# Disable PyAutoGUI fail-safe
pyautogui.FAILSAFE = False


# ============================================================================
# KEYBOARD INPUT
# ============================================================================

class KeyboardInput:
    """Held keys and typed chat commands via pyautogui"""

    def __init__(self, logger):
        self.logger = logger
        self.held = set()

    def set_movement_key(self, key, pressed):
        """Press (pressed=True) or release a held key"""
        if pressed:
            pyautogui.keyDown(key)
            self.held.add(key)
        else:
            pyautogui.keyUp(key)
            self.held.discard(key)

    def send_combat_command(self, command):
        """Type a chat command and submit it"""
        self.logger.debug(f"    Typing: {command}")
        pyautogui.write(command, interval=Config.CHAT_TYPE_INTERVAL)
        pyautogui.press(Config.CHAT_SUBMIT_KEY)

    def release_all(self):
        for key in list(self.held):
            self.set_movement_key(key, False)


class KeyboardGameState:
    """
    Combine a memory-only backend with keyboard input.

    Reads and memory writes go to ``reader``; movement keys and chat
    commands go to ``keys``.
    """

    def __init__(self, reader, keys):
        self.reader = reader
        self.keys = keys

    def __getattr__(self, name):
        return getattr(self.reader, name)

    def set_movement_key(self, key, pressed):
        self.keys.set_movement_key(key, pressed)

    def send_combat_command(self, command):
        self.keys.send_combat_command(command)


# ============================================================================
# PAUSE HOTKEY
# ============================================================================

class PauseHotkey:
    """Global keyboard listener that latches pause-key presses"""

    def __init__(self, key_name=None):
        self.key = getattr(keyboard.Key, key_name or Config.PAUSE_KEY)
        self._toggled = False
        self._lock = threading.Lock()
        self.listener = None

    def _on_key_press(self, key):
        if key == self.key:
            with self._lock:
                self._toggled = True

    def toggled(self):
        """Check if the pause key was pressed and reset flag"""
        with self._lock:
            if self._toggled:
                self._toggled = False
                return True
            return False

    def start(self):
        """Start global keyboard listener in background thread"""
        self.listener = keyboard.Listener(on_press=self._on_key_press)
        self.listener.daemon = True
        self.listener.start()
        return self.listener

    def stop(self):
        if self.listener is not None:
            self.listener.stop()
            self.listener = None

    def wait(self, poll=0.1):
        """Block until the pause key is pressed once"""
        while not self.toggled():
            time.sleep(poll)
