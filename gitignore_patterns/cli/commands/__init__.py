"""CLI commands for gitignore-patterns."""

from gitignore_patterns.cli.commands.parse import parse_cmd
from gitignore_patterns.cli.commands.flat import flat_cmd
from gitignore_patterns.cli.commands.regex import regex_cmd
from gitignore_patterns.cli.commands.check import check_cmd

__all__ = ['parse_cmd', 'flat_cmd', 'regex_cmd', 'check_cmd']
