"""Commit message file sink (prepare-commit-msg hooks, COMMIT_EDITMSG)."""

from pathlib import Path

from smartcommit.logging import get_logger
from smartcommit.sinks.base import CommitMessageSink

logger = get_logger("sinks.file")


class MessageFileSink(CommitMessageSink):
    """Writes the message into the commit message file git is about to open.

    The file's existing comment block (git's status template) is kept
    below the message. A file that already carries a message, e.g. from
    ``git commit -m``, is left untouched.
    """

    def __init__(self, path: str | Path | None):
        self.path = Path(path) if path else None

    @property
    def name(self) -> str:
        return f"message file ({self.path})"

    def try_set(self, message: str) -> bool:
        if self.path is None:
            return False

        try:
            existing = self.path.read_text(encoding='utf-8') if self.path.exists() else ""
            if any(line.strip() and not line.startswith('#') for line in existing.split('\n')):
                logger.debug("%s already holds a message, not overwriting", self.path)
                return False

            content = f"{message}\n"
            if existing.strip():
                content += "\n" + existing.lstrip('\n')
            self.path.write_text(content, encoding='utf-8')
            return True
        except OSError as e:
            logger.debug("Could not write %s: %s", self.path, e)
            return False
