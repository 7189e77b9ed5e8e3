"""Commit Message Package"""

from smartcommit.message.description import DescriptionGenerator, file_detail, file_type_label
from smartcommit.message.composer import (
    CommitAnalysis,
    analyze,
    build_message,
    compose_message,
    generate_commit_message,
    NO_CHANGES_MESSAGE,
    FALLBACK_MESSAGE,
)

__all__ = [
    "DescriptionGenerator",
    "file_detail",
    "file_type_label",
    "CommitAnalysis",
    "analyze",
    "build_message",
    "compose_message",
    "generate_commit_message",
    "NO_CHANGES_MESSAGE",
    "FALLBACK_MESSAGE",
]
