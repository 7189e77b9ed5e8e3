"""Commit Message Sinks Package"""

from pathlib import Path
from typing import Iterable

from smartcommit.config import Config
from smartcommit.logging import get_logger
from smartcommit.sinks.base import CommitMessageSink
from smartcommit.sinks.clipboard import ClipboardSink, copy_to_clipboard
from smartcommit.sinks.file import MessageFileSink

logger = get_logger("sinks")


def build_sinks(config: Config, message_file: str | Path | None = None) -> list[CommitMessageSink]:
    """Sinks to try, in order: commit message file, then clipboard."""
    sinks: list[CommitMessageSink] = []
    if message_file:
        sinks.append(MessageFileSink(message_file))
    if config.copy_to_clipboard:
        sinks.append(ClipboardSink())
    return sinks


def deliver(message: str, sinks: Iterable[CommitMessageSink]) -> CommitMessageSink | None:
    """Hand the message to the first sink that accepts it.

    Returns the accepting sink, or None when the caller has to present
    the message for manual use.
    """
    for sink in sinks:
        if sink.try_set(message):
            logger.debug("Message delivered to %s", sink.name)
            return sink
        logger.debug("Sink %s declined the message", sink.name)
    return None


__all__ = [
    "CommitMessageSink",
    "ClipboardSink",
    "MessageFileSink",
    "build_sinks",
    "copy_to_clipboard",
    "deliver",
]
