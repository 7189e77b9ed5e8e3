"""Git Operations Package"""

from smartcommit.git.analyzer import (
    GitAnalyzer,
    GitError,
    ChangeKind,
    ChangeRecord,
    FileRevision,
    parse_name_status,
)

__all__ = [
    "GitAnalyzer",
    "GitError",
    "ChangeKind",
    "ChangeRecord",
    "FileRevision",
    "parse_name_status",
]
