"""gitignore-patterns - Convert .gitignore patterns to globs and regexes."""

__version__ = '0.1.0'

from gitignore_patterns.core import (
    FileAccessError,
    parse,
    parse_path,
    dedupe,
    convert_ignore_pattern_to_minimatch,
    IgnoreRegex,
    to_regex,
    ignore,
    filter_paths,
    FlatConfig,
    to_flat_config,
)

__all__ = [
    'FileAccessError',
    'parse',
    'parse_path',
    'dedupe',
    'convert_ignore_pattern_to_minimatch',
    'IgnoreRegex',
    'to_regex',
    'ignore',
    'filter_paths',
    'FlatConfig',
    'to_flat_config',
]
