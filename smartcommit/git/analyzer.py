"""Git Analyzer - Extract change records from git."""

import subprocess
from dataclasses import dataclass
from enum import Enum

from smartcommit.logging import get_logger

logger = get_logger("git")


class ChangeKind(str, Enum):
    """Change kind as reported by the version-control backend."""
    NEW = 'new'
    DELETED = 'deleted'
    MODIFIED = 'modified'
    MOVED = 'moved'
    OTHER = 'other'


@dataclass
class FileRevision:
    """One side (before or after) of a file change."""
    name: str
    path: str

    @classmethod
    def from_path(cls, path: str) -> 'FileRevision':
        return cls(name=path.rsplit('/', 1)[-1], path=path)


@dataclass
class ChangeRecord:
    """A single changed file as seen by git."""
    kind: ChangeKind
    before: FileRevision | None = None
    after: FileRevision | None = None

    @property
    def display_path(self) -> str:
        revision = self.after or self.before
        if revision is None:
            return '?'
        if self.kind == ChangeKind.MOVED and self.before and self.after:
            return f"{self.before.path} -> {self.after.path}"
        return revision.path


class GitError(Exception):
    """Raised when git operations fail."""
    pass


def parse_name_status(output: str) -> list[ChangeRecord]:
    """Parse 'git diff --name-status -M -z' output into change records.

    With -z git emits NUL-terminated fields and leaves paths unquoted:
    a status field, then one path, or two for renames and copies.
    """
    fields = output.split('\0')
    if fields and not fields[-1]:
        fields.pop()

    records = []
    i = 0
    while i < len(fields):
        status = fields[i][:1]
        count = 2 if status in ('R', 'C') else 1
        paths = fields[i + 1:i + 1 + count]
        i += 1 + count
        if len(paths) < count or not all(paths):
            logger.debug("Skipping truncated status entry: %r", status)
            continue

        if status == 'A':
            records.append(ChangeRecord(ChangeKind.NEW, after=FileRevision.from_path(paths[0])))
        elif status == 'D':
            records.append(ChangeRecord(ChangeKind.DELETED, before=FileRevision.from_path(paths[0])))
        elif status == 'M':
            revision = FileRevision.from_path(paths[0])
            records.append(ChangeRecord(ChangeKind.MODIFIED, before=revision, after=revision))
        elif status == 'R' and len(paths) >= 2:
            records.append(ChangeRecord(
                ChangeKind.MOVED,
                before=FileRevision.from_path(paths[0]),
                after=FileRevision.from_path(paths[1]),
            ))
        elif len(paths) >= 2:
            # Copies report source and destination
            records.append(ChangeRecord(
                ChangeKind.OTHER,
                before=FileRevision.from_path(paths[0]),
                after=FileRevision.from_path(paths[1]),
            ))
        else:
            records.append(ChangeRecord(ChangeKind.OTHER, after=FileRevision.from_path(paths[0])))

    return records


class GitAnalyzer:
    """Reads the list of changed files from git."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        logger.debug("Running: git %s", ' '.join(args))
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError:
            raise GitError("Not inside a git repository")

    def git_dir(self) -> str:
        return self._run_git('rev-parse', '--git-dir').strip()

    def has_commits(self) -> bool:
        try:
            self._run_git('rev-parse', '--verify', '--quiet', 'HEAD')
        except GitError:
            return False
        return True

    def get_staged_changes(self) -> list[ChangeRecord]:
        """Changes in the index, relative to HEAD."""
        return parse_name_status(self._run_git('diff', '--staged', '--name-status', '-M', '-z'))

    def get_working_changes(self) -> list[ChangeRecord]:
        """All tracked local changes, staged or not, relative to HEAD.

        Before the first commit there is no HEAD to compare against, so
        only the index is reported.
        """
        if not self.has_commits():
            logger.debug("No commits yet, reading staged changes instead")
            return self.get_staged_changes()
        return parse_name_status(self._run_git('diff', 'HEAD', '--name-status', '-M', '-z'))
