"""Terminal Output - Status lines and commit message highlighting."""

import os
import re
import sys

from smartcommit.analysis.models import CommitType

# SGR parameters by style name
STYLES = {
    'bold': '1',
    'dim': '2',
    'red': '31',
    'green': '32',
    'yellow': '33',
    'magenta': '35',
    'cyan': '36',
}


def _enable_windows_ansi() -> bool:
    try:
        import ctypes
        kernel32 = ctypes.windll.kernel32
        return bool(kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7))
    except (AttributeError, OSError):
        return False


def _color_enabled() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not getattr(sys.stdout, 'isatty', None) or not sys.stdout.isatty():
        return False
    return sys.platform != 'win32' or _enable_windows_ansi()


def _symbol(glyph: str, fallback: str) -> str:
    """Glyph if stdout can encode it, ASCII fallback otherwise."""
    try:
        glyph.encode(sys.stdout.encoding or 'utf-8')
    except (UnicodeEncodeError, LookupError):
        return fallback
    return glyph


COLORS_ENABLED = _color_enabled()

CHECK = _symbol('✓', '[OK]')
CROSS = _symbol('✗', '[X]')
WARN = _symbol('⚠', '[!]')
RULE = _symbol('─', '-')


def style(text: str, *names: str) -> str:
    if not COLORS_ENABLED or not names:
        return text
    return f"\033[{';'.join(STYLES[n] for n in names)}m{text}\033[0m"


def success(text: str) -> str:
    return style(text, 'green')


def info(text: str) -> str:
    return style(text, 'cyan')


def dim(text: str) -> str:
    return style(text, 'dim')


def bold(text: str) -> str:
    return style(text, 'bold')


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(style(f"{CROSS} {message}", 'red'), file=sys.stderr)


def print_warning(message: str) -> None:
    print(style(f"{WARN} {message}", 'yellow'))


COMMIT_TYPE_STYLES = {
    CommitType.FEAT: 'green',
    CommitType.FIX: 'red',
    CommitType.REFACTOR: 'yellow',
    CommitType.DOCS: 'cyan',
    CommitType.TEST: 'magenta',
    CommitType.CHORE: 'dim',
    CommitType.STYLE: 'magenta',
    CommitType.BUILD: 'cyan',
}

# "<type>(<scope>): " or "<type>: " for the types this tool emits
HEADER_RE = re.compile(
    r'^(?P<type>' + '|'.join(t.value for t in CommitType) + r')(\([^)]*\))?:'
)


def colorize_commit_type(message: str) -> str:
    """Color the type prefix on the subject line; the body is left as is."""
    subject, newline, body = message.partition('\n')
    match = HEADER_RE.match(subject)
    if not match:
        return message
    prefix = match.group(0)
    color = COMMIT_TYPE_STYLES[CommitType(match.group('type'))]
    return style(prefix, 'bold', color) + subject[len(prefix):] + newline + body


__all__ = [
    "COLORS_ENABLED", "CHECK", "CROSS", "WARN", "RULE",
    "style", "success", "info", "dim", "bold",
    "print_success", "print_error", "print_warning",
    "COMMIT_TYPE_STYLES", "colorize_commit_type",
]
