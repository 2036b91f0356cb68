"""
Clipboard output with delayed clearing
The clipboard is only cleared if it still holds the passphrase we wrote
"""

import logging
import time
from enum import Enum
from typing import Callable, Optional

import pyperclip

from passgen.errors import ClipboardUnavailable

logger = logging.getLogger("passgen.clipboard")


class ClipboardState(str, Enum):
    IDLE = "idle"
    WRITTEN = "written"
    CLEARED = "cleared"
    SUPERSEDED = "superseded"


class ClipboardSink:
    """Writes one passphrase to the system clipboard and clears it later"""

    def __init__(self, sleep: Optional[Callable[[float], None]] = None):
        self._sleep = sleep or time.sleep
        self._written: Optional[str] = None
        self.state = ClipboardState.IDLE

    def write(self, text: str) -> None:
        """Copy text to the clipboard"""
        if self.state != ClipboardState.IDLE:
            raise RuntimeError(f"Clipboard already used (state: {self.state.value})")

        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailable(f"Could not set clipboard contents: {e}") from e

        self._written = text
        self.state = ClipboardState.WRITTEN
        logger.info("Passphrase copied to clipboard")

    def clear_after(self, delay: float) -> ClipboardState:
        """
        Wait delay seconds, then clear the clipboard if unchanged
        A delay of 0 leaves the clipboard as is
        """
        if self.state != ClipboardState.WRITTEN:
            raise RuntimeError(f"Nothing to clear (state: {self.state.value})")

        if delay <= 0:
            logger.warning("Clipboard clearing disabled - passphrase stays on clipboard")
            return self.state

        logger.info(f"Clearing clipboard in {delay:g} seconds")
        self._sleep(delay)

        try:
            current = pyperclip.paste()
            if current != self._written:
                self.state = ClipboardState.SUPERSEDED
                logger.info("Clipboard changed since copy - leaving it alone")
                return self.state

            pyperclip.copy("")
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailable(f"Could not clear clipboard contents: {e}") from e

        self._written = None
        self.state = ClipboardState.CLEARED
        logger.info("Clipboard cleared")
        return self.state
