"""Description Generator - Turn file facts into subject and body text."""

from smartcommit.analysis.models import ChangeStats, Context, FileChange, Operation

BULLET = '•'

FILE_TYPE_LABELS: dict[str, str] = {
    'java': 'Java class',
    'js': 'JavaScript module',
    'php': 'PHP script',
    'py': 'Python module',
    'css': 'stylesheet',
    'html': 'HTML template',
    'json': 'JSON config',
    'xml': 'XML config',
    'md': 'documentation',
    'gradle': 'build script',
    'yml': 'YAML config',
    'yaml': 'YAML config',
}

# Single-file subject nouns; "{label}" is the file type label
SINGLE_FILE_PHRASES: dict[Context, str] = {
    Context.CONFIG: '{label} configuration',
    Context.API: '{label} API endpoint',
    Context.UI: '{label} component',
    Context.TEST: '{label} tests',
    Context.DATABASE: '{label} schema',
    Context.AUTH: '{label} authentication',
}

EXTENSION_PHRASES: dict[str, str] = {
    'java': 'Java implementation',
    'js': 'JavaScript functionality',
    'php': 'PHP implementation',
    'py': 'Python modules',
    'css': 'styling system',
    'html': 'UI templates',
    'json': 'configuration files',
    'xml': 'configuration files',
    'md': 'documentation',
}
DEFAULT_EXTENSION_PHRASE = 'project structure'

CONTEXT_ANNOTATIONS: dict[Context, str] = {
    Context.CONFIG: 'configuration',
    Context.API: 'API layer',
    Context.UI: 'user interface',
    Context.TEST: 'test suite',
    Context.DATABASE: 'database layer',
    Context.AUTH: 'authentication',
    Context.BUILD: 'build system',
}


def file_type_label(change: FileChange) -> str:
    """Human label for a file, from its extension."""
    if change.file_name is None:
        return 'file'
    return FILE_TYPE_LABELS.get(change.extension or '', change.file_name)


def file_detail(change: FileChange) -> str:
    """File name plus a parenthetical context annotation."""
    if change.file_name is None:
        return 'unknown file'
    if change.context == Context.FILE:
        return change.file_name
    annotation = CONTEXT_ANNOTATIONS.get(change.context, change.context.value)
    return f"{change.file_name} ({annotation})"


def _most_frequent(counts: dict):
    """Key with the highest count; ties go to the first key seen."""
    if not counts:
        return None
    return max(counts, key=counts.get)


class DescriptionGenerator:
    """Builds the subject line description and the itemized body."""

    def short(self, changes: list[FileChange], stats: ChangeStats) -> str:
        if len(changes) == 1:
            return self._single_file(changes[0])
        return self._multi_file(stats)

    def long(self, changes: list[FileChange]) -> str:
        if len(changes) <= 1:
            return ""

        groups: dict[Operation, list[FileChange]] = {}
        for change in changes:
            groups.setdefault(change.operation, []).append(change)

        sections = []
        for operation, files in groups.items():
            verb = operation.verb.capitalize()
            if len(files) == 1:
                sections.append(f"- {verb} {file_detail(files[0])}")
            else:
                lines = [f"- {verb} {len(files)} files:"]
                lines.extend(f"  {BULLET} {file_detail(f)}" for f in files)
                sections.append("\n".join(lines))

        return "\n\n".join(sections)

    def _single_file(self, change: FileChange) -> str:
        verb = change.operation.verb
        label = file_type_label(change)

        if change.context == Context.FILE:
            return f"{verb} {label}"
        phrase = SINGLE_FILE_PHRASES.get(change.context)
        if phrase:
            return f"{verb} {phrase.format(label=label)}"
        return f"{verb} {change.context.value} {label}"

    def _multi_file(self, stats: ChangeStats) -> str:
        dominant = _most_frequent(stats.operations)
        verb = dominant.verb if dominant else Operation.UPDATE.verb

        if len(stats.contexts) == 1:
            return f"{verb} {stats.contexts[0].value} implementation"

        extension = _most_frequent(stats.extensions)
        phrase = EXTENSION_PHRASES.get(extension, DEFAULT_EXTENSION_PHRASE)
        return f"{verb} {phrase}"
