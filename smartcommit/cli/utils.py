"""CLI Utility Functions"""

from smartcommit.git import ChangeKind, ChangeRecord

KIND_SYMBOLS = {
    ChangeKind.NEW: 'A',
    ChangeKind.DELETED: 'D',
    ChangeKind.MODIFIED: 'M',
    ChangeKind.MOVED: 'R',
    ChangeKind.OTHER: '?',
}

HOOK_MARKER = "# installed by smart-commit"

HOOK_SCRIPT = f"""#!/bin/sh
{HOOK_MARKER}
# Leave messages git already has alone (-m, merges, squashes, amends).
case "$2" in
  message|merge|squash|commit) exit 0 ;;
esac
smart-commit --message-file "$1" --no-copy > /dev/null 2>&1 || true
"""


def append_ticket(message: str, ticket: str, prefix: str) -> str:
    """Append a ticket reference footer, e.g. 'Refs: PROJ-123'."""
    return f"{message}\n\n{prefix}: {ticket.upper()}"


def format_record(record: ChangeRecord) -> str:
    return f"{KIND_SYMBOLS.get(record.kind, '?')} {record.display_path}"
