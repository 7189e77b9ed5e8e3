"""CLI Main Entry Point"""

import sys

from smartcommit.analysis import extract_changes
from smartcommit.config import load_config
from smartcommit.git import GitAnalyzer, GitError
from smartcommit.logging import configure_logging
from smartcommit.message import analyze, generate_commit_message
from smartcommit.output import success, dim, bold, print_error, print_warning, CHECK, RULE, colorize_commit_type
from smartcommit.sinks import ClipboardSink, MessageFileSink, build_sinks, deliver

from smartcommit.cli.args import parse_args
from smartcommit.cli.commands import display_config, run_setup, run_install_completion, run_install_hook
from smartcommit.cli.utils import append_ticket, format_record


def _display_file_list(records, max_shown=8):
    """Show which files will be analyzed, collapsing long lists.

    Args:
        records: ChangeRecords read from git
        max_shown: Maximum files to display before collapsing (from config)
    """
    if not records:
        return
    print(bold("Changed files:"))
    shown = records[:max_shown]
    remaining = len(records) - len(shown)
    for record in shown:
        print(dim(f"  {format_record(record)}"))
    if remaining > 0:
        print(dim(f"  ... and {remaining} more files"))


def _display_message(message):
    """Display commit message with horizontal rules and colored type."""
    colored = colorize_commit_type(message)
    lines = colored.split('\n')
    # Use raw message for width calculation (no ANSI codes)
    raw_lines = message.split('\n')
    width = max((len(line) for line in raw_lines), default=40)
    print(f"\n{dim(RULE * width)}")
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim(RULE * width))


def _display_analysis(records):
    """Show how the change set was classified (--verbose)."""
    changes = extract_changes(records)
    if not changes:
        return
    analysis = analyze(changes)
    stats = analysis.stats
    print()
    print(dim(f"  Type: {analysis.commit_type.value}   Scope: {analysis.scope or '(none)'}"))
    print(dim(f"  Contexts: {', '.join(c.value for c in stats.contexts)}"))
    print(dim(f"  Operations: {', '.join(f'{op.value}={n}' for op, n in stats.operations.items())}"))
    if stats.extensions:
        print(dim(f"  Extensions: {', '.join(f'{ext}={n}' for ext, n in stats.extensions.items())}"))


def _report_delivery(sink, sinks):
    """Tell the user where the message went, or how to use it manually."""
    if isinstance(sink, ClipboardSink):
        print(f"{success(CHECK)} Copied to clipboard!")
        return
    if isinstance(sink, MessageFileSink):
        print(f"{success(CHECK)} Written to {sink.path}")
        return
    if not sinks:
        return

    for candidate in sinks:
        if isinstance(candidate, ClipboardSink) and candidate.last_error:
            print_warning(f"Could not copy to clipboard: {candidate.last_error}")
    print(dim("  Select the message above to copy manually."))


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.install_hook:
        return run_install_hook(), True
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    return 0, False


def _read_changes(staged_only):
    """Get change records from git.

    Returns:
        list of ChangeRecord, or None when git failed (error already printed)
    """
    try:
        analyzer = GitAnalyzer()
        if staged_only:
            return analyzer.get_staged_changes()
        return analyzer.get_working_changes()
    except GitError as e:
        print_error(str(e))
        return None


def _is_pipe():
    return not sys.stdout.isatty()


def _generate_commit_flow(args, config):
    """Main commit message generation flow.

    Returns:
        int: Exit code
    """
    is_pipe = _is_pipe()

    records = _read_changes(config.staged_only)
    if records is None:
        return 1
    if not records:
        if config.staged_only:
            print_error("No staged changes. Run 'git add' first.")
        else:
            print_error("No local changes.")
        return 1

    if not is_pipe:
        _display_file_list(records, config.max_file_display)

    message = generate_commit_message(
        records,
        include_body=config.include_body,
        forced_type=args.type,
    )

    if args.verbose and not is_pipe:
        _display_analysis(records)

    # Append JIRA ticket if provided
    if args.jira:
        message = append_ticket(message, args.jira, args.ticket_prefix or config.ticket_prefix)

    # Pipe mode: fill the message file if asked, otherwise output raw message
    if is_pipe:
        if args.message_file and deliver(message, [MessageFileSink(args.message_file)]):
            return 0
        print(message)
        return 0

    _display_message(message)
    sinks = build_sinks(config, args.message_file)
    _report_delivery(deliver(message, sinks), sinks)
    return 0


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    configure_logging(verbose=args.verbose)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    # Apply CLI overrides to config
    config = load_config()
    if args.no_body:
        config.include_body = False
    if args.no_copy:
        config.copy_to_clipboard = False
    if args.all:
        config.staged_only = False

    return _generate_commit_flow(args, config)


def run() -> None:
    sys.exit(main())
