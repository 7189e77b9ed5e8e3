"""System clipboard sink."""

import subprocess
import sys

from smartcommit.logging import get_logger
from smartcommit.sinks.base import CommitMessageSink

logger = get_logger("sinks.clipboard")


def copy_to_clipboard(text: str) -> tuple[bool, str]:
    """Copy text to clipboard. Returns (success, failure_reason)."""
    try:
        if sys.platform == 'win32':
            subprocess.run(['clip'], input=text.encode('utf-8'), check=True)
        elif sys.platform == 'darwin':
            subprocess.run(['pbcopy'], input=text.encode('utf-8'), check=True)
        else:
            try:
                subprocess.run(['xclip', '-selection', 'clipboard'], input=text.encode('utf-8'), check=True)
            except FileNotFoundError:
                subprocess.run(['xsel', '--clipboard', '--input'], input=text.encode('utf-8'), check=True)
        return True, ""
    except FileNotFoundError:
        if sys.platform == 'linux':
            return False, "Install xclip or xsel: sudo apt install xclip"
        return False, "No clipboard tool found"
    except (subprocess.CalledProcessError, OSError) as e:
        return False, f"Clipboard command failed: {e}"


class ClipboardSink(CommitMessageSink):
    """Copies the message to the system clipboard."""

    def __init__(self):
        self.last_error = ""

    @property
    def name(self) -> str:
        return "clipboard"

    def try_set(self, message: str) -> bool:
        copied, reason = copy_to_clipboard(message)
        if not copied:
            self.last_error = reason
            logger.debug("Clipboard copy failed: %s", reason)
        return copied
