"""CLI Commands"""

import os
import stat
import sys
from pathlib import Path

from smartcommit.config import Config, load_config, save_config, get_config_path
from smartcommit.git import GitAnalyzer, GitError
from smartcommit.output import bold, dim, info, print_success, print_error
from smartcommit.cli.args import build_parser
from smartcommit.cli.utils import HOOK_MARKER, HOOK_SCRIPT


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .smartcommitrc found)")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    include_body:       {info(str(config.include_body).lower())}")
    print(f"    copy_to_clipboard:  {info(str(config.copy_to_clipboard).lower())}")
    print(f"    staged_only:        {info(str(config.staged_only).lower())}")
    print(f"    ticket_prefix:      {info(config.ticket_prefix)}")
    print(f"    max_file_display:   {info(str(config.max_file_display))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .smartcommitrc (in current directory)")
    print(f"    Global: ~/.smartcommitrc")
    print(f"\n  {dim('Run')} smart-commit --setup {dim('to configure')}\n")

    return 0


def _ask_yes_no(question: str, default: bool) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    print(f"{question} {hint}: ", end='')
    answer = input().strip().lower()
    if not answer:
        return default
    return answer.startswith('y')


def run_setup() -> int:
    """Quick setup wizard."""
    display_config()
    print(f"{bold('Setup Wizard')}\n")

    include_body = _ask_yes_no("Include a per-file list in the commit body?", True)
    copy = _ask_yes_no("Copy generated messages to the clipboard?", True)
    staged_only = _ask_yes_no("Only look at staged changes?", True)

    print("\nTicket reference prefix (Enter for Refs): ", end='')
    ticket_prefix = input().strip() or "Refs"

    print("\nMax files listed before collapsing (Enter for 8): ", end='')
    max_input = input().strip()
    max_file_display = int(max_input) if max_input.isdigit() and int(max_input) > 0 else 8

    config = Config(
        include_body=include_body,
        copy_to_clipboard=copy,
        staged_only=staged_only,
        ticket_prefix=ticket_prefix,
        max_file_display=max_file_display,
    )
    path = save_config(config, global_config=True)

    print_success(f"Saved to {path}")
    return 0


# shell -> (startup file, line that registers completion for {prog})
COMPLETION_TARGETS = {
    'bash': ('~/.bashrc', 'eval "$(register-python-argcomplete {prog})"'),
    'zsh': ('~/.zshrc', 'eval "$(register-python-argcomplete {prog})"'),
    'fish': ('~/.config/fish/config.fish', 'register-python-argcomplete --shell fish {prog} | source'),
    'powershell': ('$PROFILE', 'register-python-argcomplete --shell powershell {prog} | Out-String | Invoke-Expression'),
}


def detect_shell() -> str | None:
    """Shell whose startup file should register completion, if recognised."""
    if sys.platform == 'win32':
        return 'powershell'
    name = os.path.basename(os.environ.get('SHELL', ''))
    return name if name in COMPLETION_TARGETS else None


def run_install_completion() -> int:
    """Print the argcomplete registration line for the user's shell."""
    prog = build_parser().prog
    shell = detect_shell()

    print(f"\n{bold('Tab Completion Setup')}\n")
    if shell:
        startup, template = COMPLETION_TARGETS[shell]
        print(f"Add this line to {dim(startup)}:\n")
        print(f"  {template.format(prog=prog)}\n")
    else:
        print("Add the line for your shell to its startup file:\n")
        for name, (startup, template) in COMPLETION_TARGETS.items():
            print(f"  {dim(f'# {name} ({startup})')}")
            print(f"  {template.format(prog=prog)}\n")

    print(dim(f"Open a new shell, then press TAB after '{prog} -' to list flags."))
    return 0


def install_hook(git_dir: Path) -> Path:
    """Write the prepare-commit-msg hook. Refuses to replace a foreign hook."""
    hook_path = git_dir / 'hooks' / 'prepare-commit-msg'
    if hook_path.exists() and HOOK_MARKER not in hook_path.read_text(encoding='utf-8', errors='replace'):
        raise FileExistsError(f"{hook_path} already exists and was not installed by smart-commit")

    hook_path.parent.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(HOOK_SCRIPT, encoding='utf-8')
    hook_path.chmod(hook_path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return hook_path


def run_install_hook() -> int:
    """Install the git hook that pre-fills commit messages."""
    try:
        git_dir = Path(GitAnalyzer().git_dir())
        hook_path = install_hook(git_dir)
    except GitError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Could not install hook: {e}")
        return 1

    print_success(f"Installed {hook_path}")
    print(dim("  'git commit' will now open with a generated message."))
    return 0
