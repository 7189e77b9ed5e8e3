"""
Smart Commit

Deterministic conventional-commit messages inferred from changed file paths.
"""

__version__ = "1.0.0"

# Centralized commit types - single source of truth
# Used by: cli/args.py (argparse); must match analysis.models.CommitType
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'refactor': 'Code restructuring without behavior change',
    'chore': 'Maintenance tasks, dependencies, configuration',
    'docs': 'Documentation only changes',
    'test': 'Adding or updating tests',
    'style': 'Stylesheets and visual styling',
    'build': 'Build system or external dependency changes',
}

# List of type names for validation and argparse
COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
