"""Change Analysis Package"""

from smartcommit.analysis.models import ChangeStats, CommitType, Context, FileChange, Operation
from smartcommit.analysis.extractor import classify_context, extract_change, extract_changes
from smartcommit.analysis.stats import aggregate_stats
from smartcommit.analysis.classifier import classify_commit_type, classify_scope

__all__ = [
    "ChangeStats",
    "CommitType",
    "Context",
    "FileChange",
    "Operation",
    "classify_context",
    "extract_change",
    "extract_changes",
    "aggregate_stats",
    "classify_commit_type",
    "classify_scope",
]
