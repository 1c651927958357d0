"""Flat configuration objects built from .gitignore patterns."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from gitignore_patterns.core.minimatch import convert_ignore_pattern_to_minimatch

DEFAULT_NAME = 'gitignore'


@dataclass(frozen=True)
class FlatConfig:
    """A named list of minimatch ignore patterns."""
    name: str = DEFAULT_NAME
    ignores: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form, e.g. for JSON output."""
        return {'name': self.name, 'ignores': list(self.ignores)}


def to_flat_config(patterns: Iterable[str], name: str = DEFAULT_NAME) -> FlatConfig:
    """
    Convert .gitignore patterns to a flat configuration object.

    Args:
        patterns: .gitignore patterns, e.g. from parse()
        name: Name of the configuration

    Returns:
        FlatConfig whose ignores are the minimatch translations
    """
    ignores = [convert_ignore_pattern_to_minimatch(pattern) for pattern in patterns]
    return FlatConfig(name=name, ignores=ignores)
