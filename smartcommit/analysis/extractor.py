"""Change Fact Extractor - Reduce change records to typed file facts."""

from typing import Any, Iterable

from smartcommit.analysis.models import Context, FileChange, Operation
from smartcommit.logging import get_logger

logger = get_logger("extractor")

# Ordered (keywords, context) rules. First rule whose keyword appears in the
# lowercased file name or directory wins.
CONTEXT_RULES: list[tuple[tuple[str, ...], Context]] = [
    (('test',), Context.TEST),
    (('config',), Context.CONFIG),
    (('api',), Context.API),
    (('auth',), Context.AUTH),
    (('database', 'db'), Context.DATABASE),
    (('ui', 'component'), Context.UI),
    (('style', 'css'), Context.STYLE),
    (('doc',), Context.DOCS),
    (('build', 'gradle', 'maven'), Context.BUILD),
]

KIND_OPERATIONS: dict[str, Operation] = {
    'new': Operation.ADD,
    'deleted': Operation.REMOVE,
    'modified': Operation.UPDATE,
    'moved': Operation.MOVE,
}


def classify_context(file_name: str | None, directory: str | None = None) -> Context:
    """Map a file's name and parent directory to a single context tag."""
    if file_name is None:
        return Context.FILE

    lower_name = file_name.lower()
    lower_dir = directory.lower() if directory else ''

    for keywords, context in CONTEXT_RULES:
        if any(k in lower_name or k in lower_dir for k in keywords):
            return context
    return Context.FILE


def extract_extension(file_name: str | None) -> str | None:
    if file_name and '.' in file_name:
        return file_name.rsplit('.', 1)[1].lower()
    return None


def extract_directory(path: str | None) -> str | None:
    """Name of the immediate parent directory, if the path has one."""
    if not path:
        return None
    parts = path.split('/')
    if len(parts) > 1:
        return parts[-2] or None
    return None


def _extract_operation(record: Any) -> Operation:
    try:
        kind = record.kind
        kind = getattr(kind, 'value', kind)
        return KIND_OPERATIONS.get(str(kind).lower(), Operation.MODIFY)
    except Exception:
        logger.debug("Could not read change kind, assuming modify", exc_info=True)
        return Operation.MODIFY


def _extract_revision(record: Any) -> Any:
    """The after revision, or the before one when the file no longer exists."""
    try:
        revision = record.after
        if revision is None:
            revision = record.before
        return revision
    except Exception:
        logger.debug("Could not read revision from change record", exc_info=True)
        return None


def _revision_field(revision: Any, attr: str) -> str | None:
    if revision is None:
        return None
    try:
        return getattr(revision, attr) or None
    except Exception:
        logger.debug("Could not read file %s from revision", attr, exc_info=True)
        return None


def extract_change(record: Any) -> FileChange:
    """Build one FileChange from a change record. Never raises."""
    revision = _extract_revision(record)
    file_name = _revision_field(revision, 'name')
    path = _revision_field(revision, 'path')
    directory = extract_directory(path)

    return FileChange(
        file_name=file_name,
        extension=extract_extension(file_name),
        directory=directory,
        operation=_extract_operation(record),
        path=path,
        context=classify_context(file_name, directory),
    )


def extract_changes(records: Iterable[Any]) -> list[FileChange]:
    """One FileChange per record, in input order."""
    return [extract_change(record) for record in records]
