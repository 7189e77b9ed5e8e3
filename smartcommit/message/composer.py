"""Message Composer - Run the classification pipeline and assemble the message."""

from dataclasses import dataclass
from typing import Any, Iterable

from smartcommit.analysis.classifier import classify_commit_type, classify_scope
from smartcommit.analysis.extractor import extract_changes
from smartcommit.analysis.models import ChangeStats, CommitType, FileChange
from smartcommit.analysis.stats import aggregate_stats
from smartcommit.logging import get_logger
from smartcommit.message.description import DescriptionGenerator

logger = get_logger("composer")

NO_CHANGES_MESSAGE = "chore: no changes detected"
FALLBACK_MESSAGE = "chore: update project files"


def compose_message(commit_type: str, scope: str, short: str, long: str = "") -> str:
    header = f"{commit_type}({scope}): {short}" if scope else f"{commit_type}: {short}"
    if long:
        return f"{header}\n\n{long}"
    return header


@dataclass
class CommitAnalysis:
    """Everything the pipeline decided about one change set."""
    commit_type: CommitType
    scope: str
    short_description: str
    long_description: str
    stats: ChangeStats

    @property
    def message(self) -> str:
        return compose_message(
            self.commit_type.value, self.scope, self.short_description, self.long_description
        )


def analyze(changes: list[FileChange]) -> CommitAnalysis:
    stats = aggregate_stats(changes)
    generator = DescriptionGenerator()
    return CommitAnalysis(
        commit_type=classify_commit_type(stats),
        scope=classify_scope(stats),
        short_description=generator.short(changes, stats),
        long_description=generator.long(changes),
        stats=stats,
    )


def build_message(changes: list[FileChange]) -> str:
    if not changes:
        return NO_CHANGES_MESSAGE
    return analyze(changes).message


def generate_commit_message(
    records: Iterable[Any],
    *,
    include_body: bool = True,
    forced_type: str | None = None,
) -> str:
    """Main entry point: change records -> commit message. Never raises.

    Args:
        records: Objects exposing ``kind``, ``before`` and ``after``.
        include_body: Append the itemized per-file body for multi-file changes.
        forced_type: Commit type to use instead of the classified one.
    """
    try:
        changes = extract_changes(records)
        if not changes:
            return NO_CHANGES_MESSAGE

        analysis = analyze(changes)
        if forced_type:
            analysis.commit_type = CommitType(forced_type)
        if not include_body:
            analysis.long_description = ""

        logger.debug(
            "Classified %d files as %s (scope=%r)",
            len(changes), analysis.commit_type.value, analysis.scope,
        )
        return analysis.message
    except Exception:
        logger.debug("Commit message generation failed, using fallback", exc_info=True)
        return FALLBACK_MESSAGE
