"""Core pattern parsing, translation and matching."""

from gitignore_patterns.core.errors import FileAccessError
from gitignore_patterns.core.parser import parse, parse_path, dedupe
from gitignore_patterns.core.minimatch import convert_ignore_pattern_to_minimatch
from gitignore_patterns.core.regex import (IgnoreRegex, to_regex, ignore,
                                           filter_paths, prepare_regex_pattern)
from gitignore_patterns.core.flat_config import FlatConfig, to_flat_config
from gitignore_patterns.core.config import Config

__all__ = [
    'FileAccessError',
    'parse', 'parse_path', 'dedupe',
    'convert_ignore_pattern_to_minimatch',
    'IgnoreRegex', 'to_regex', 'ignore', 'filter_paths', 'prepare_regex_pattern',
    'FlatConfig', 'to_flat_config',
    'Config',
]
