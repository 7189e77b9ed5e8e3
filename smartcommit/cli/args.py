"""CLI Argument Parsing"""

import argparse
import argcomplete

from smartcommit import COMMIT_TYPE_NAMES, __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='smart-commit',
        description='Generate conventional commit messages from changed files',
        epilog='Example: smart-commit (copies message to clipboard)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Generation options
    parser.add_argument('-t', '--type', type=str, choices=COMMIT_TYPE_NAMES, help='Force commit type')
    parser.add_argument('-j', '--jira', type=str, metavar='TICKET', help='Add JIRA ticket: -j PROJ-123')
    parser.add_argument('--ticket-prefix', type=str, metavar='PREFIX', help='Ticket reference prefix (default: Refs)')
    parser.add_argument('--no-body', action='store_true', help='Generate subject line only, no file list')
    parser.add_argument('-a', '--all', action='store_true', help='Use all tracked local changes, not just staged ones')

    # Output options
    parser.add_argument('--message-file', type=str, metavar='PATH', help='Write message into a commit message file (prepare-commit-msg hook)')
    parser.add_argument('--no-copy', action='store_true', help='Print message only, do not copy to clipboard')
    parser.add_argument('--verbose', action='store_true', help='Show debug logging and how the message was classified')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')
    parser.add_argument('--install-hook', action='store_true', help='Install a prepare-commit-msg git hook')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
