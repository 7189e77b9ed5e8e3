"""Message Sink Base Class"""

from abc import ABC, abstractmethod


class CommitMessageSink(ABC):
    """Somewhere a generated commit message can be handed off to.

    ``try_set`` must not raise: a sink that cannot take the message
    returns False so the next one in line can try.
    """

    @abstractmethod
    def try_set(self, message: str) -> bool:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
