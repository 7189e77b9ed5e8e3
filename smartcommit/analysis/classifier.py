"""Commit Classifier - Derive commit type and scope from change stats.

Both classifiers are ordered rule tables evaluated first-match-wins.
Structural signals (docs, styling, configuration, build files) come before
signals read from operations, so adding a lone YAML file reads as a chore
rather than a feature.
"""

from typing import Callable

from smartcommit.analysis.models import ChangeStats, CommitType, Context, Operation

DOC_EXTENSIONS = ('md', 'txt', 'rst')
STYLE_EXTENSIONS = ('css', 'scss', 'sass', 'less')
CONFIG_EXTENSIONS = ('json', 'xml', 'yml', 'yaml', 'properties', 'gradle')
BUILD_EXTENSIONS = ('gradle', 'maven')
SOURCE_EXTENSIONS = ('java', 'php', 'js', 'py', 'kt', 'ts')

Rule = tuple[Callable[[ChangeStats], bool], CommitType]

COMMIT_TYPE_RULES: list[Rule] = [
    (lambda s: s.has_context(Context.TEST), CommitType.TEST),
    (lambda s: s.has_extension(*DOC_EXTENSIONS) or s.has_context(Context.DOCS), CommitType.DOCS),
    (lambda s: s.has_extension(*STYLE_EXTENSIONS) or s.has_context(Context.STYLE), CommitType.STYLE),
    (lambda s: s.has_extension(*CONFIG_EXTENSIONS) or s.has_context(Context.CONFIG), CommitType.CHORE),
    (lambda s: s.has_context(Context.BUILD) or s.has_extension(*BUILD_EXTENSIONS), CommitType.BUILD),
    (lambda s: s.count(Operation.ADD) > s.count(Operation.UPDATE), CommitType.FEAT),
    (lambda s: s.count(Operation.REMOVE) > 0, CommitType.REFACTOR),
    (lambda s: s.has_extension(*SOURCE_EXTENSIONS), CommitType.FIX),
]

DEFAULT_COMMIT_TYPE = CommitType.CHORE

# Contexts that name a scope directly, in priority order
SCOPE_CONTEXTS: list[tuple[Context, str]] = [
    (Context.AUTH, 'auth'),
    (Context.API, 'api'),
    (Context.DATABASE, 'database'),
    (Context.UI, 'ui'),
]

# (keywords, scope) checked against each directory name in turn
DIRECTORY_SCOPES: list[tuple[tuple[str, ...], str]] = [
    (('api', 'service'), 'api'),
    (('ui', 'component', 'view'), 'ui'),
    (('auth', 'security'), 'auth'),
    (('database', 'db', 'model'), 'database'),
    (('config', 'setting'), 'config'),
    (('util', 'helper'), 'utils'),
    (('test',), 'test'),
]

EXTENSION_SCOPES: list[tuple[tuple[str, ...], str]] = [
    (('java', 'php'), 'backend'),
    (('js', 'ts', 'vue', 'jsx', 'html'), 'frontend'),
    (('sql',), 'database'),
]


def classify_commit_type(stats: ChangeStats) -> CommitType:
    for predicate, commit_type in COMMIT_TYPE_RULES:
        if predicate(stats):
            return commit_type
    return DEFAULT_COMMIT_TYPE


def _directory_scope(directory: str) -> str | None:
    lower_dir = directory.lower()
    for keywords, scope in DIRECTORY_SCOPES:
        if any(k in lower_dir for k in keywords):
            return scope
    return None


def classify_scope(stats: ChangeStats) -> str:
    """Return the scope label, or an empty string for an unscoped message."""
    for context, scope in SCOPE_CONTEXTS:
        if stats.has_context(context):
            return scope

    # Directories are scanned in first-seen order
    for directory in stats.directories:
        scope = _directory_scope(directory)
        if scope:
            return scope

    for extensions, scope in EXTENSION_SCOPES:
        if stats.has_extension(*extensions):
            return scope

    return ''
