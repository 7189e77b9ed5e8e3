"""Change facts and aggregates shared by the classification pipeline."""

from dataclasses import dataclass, field
from enum import Enum


class Operation(str, Enum):
    """What happened to a file. The value doubles as the message verb."""
    ADD = 'add'
    REMOVE = 'remove'
    UPDATE = 'update'
    MOVE = 'move'
    MODIFY = 'modify'

    @property
    def verb(self) -> str:
        return self.value


class Context(str, Enum):
    """Semantic role of a file, inferred from its name and directory."""
    TEST = 'test'
    CONFIG = 'config'
    API = 'api'
    AUTH = 'auth'
    DATABASE = 'database'
    UI = 'ui'
    STYLE = 'style'
    DOCS = 'docs'
    BUILD = 'build'
    FILE = 'file'


class CommitType(str, Enum):
    """Conventional commit type chosen for a whole change set."""
    TEST = 'test'
    DOCS = 'docs'
    STYLE = 'style'
    CHORE = 'chore'
    BUILD = 'build'
    FEAT = 'feat'
    REFACTOR = 'refactor'
    FIX = 'fix'


@dataclass
class FileChange:
    """Represents a single file's change, reduced to path facts."""
    file_name: str | None = None
    extension: str | None = None
    directory: str | None = None
    operation: Operation = Operation.MODIFY
    path: str | None = None
    context: Context = Context.FILE


@dataclass
class ChangeStats:
    """Frequency tables over one change set.

    Mappings and the distinct-value lists keep first-seen order, which is
    what every tie-break downstream relies on.
    """
    extensions: dict[str, int] = field(default_factory=dict)
    operations: dict[Operation, int] = field(default_factory=dict)
    directories: list[str] = field(default_factory=list)
    contexts: list[Context] = field(default_factory=list)

    def has_extension(self, *extensions: str) -> bool:
        return any(ext in self.extensions for ext in extensions)

    def has_context(self, context: Context) -> bool:
        return context in self.contexts

    def count(self, operation: Operation) -> int:
        return self.operations.get(operation, 0)
