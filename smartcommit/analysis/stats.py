"""Stats Aggregator - Fold file facts into frequency tables."""

from typing import Iterable

from smartcommit.analysis.models import ChangeStats, FileChange


def aggregate_stats(changes: Iterable[FileChange]) -> ChangeStats:
    stats = ChangeStats()

    for change in changes:
        if change.extension is not None:
            stats.extensions[change.extension] = stats.extensions.get(change.extension, 0) + 1
        stats.operations[change.operation] = stats.operations.get(change.operation, 0) + 1
        if change.directory is not None and change.directory not in stats.directories:
            stats.directories.append(change.directory)
        if change.context not in stats.contexts:
            stats.contexts.append(change.context)

    return stats
