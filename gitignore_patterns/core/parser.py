"""Parsing of .gitignore file content into pattern lists."""

import logging
import os
import re
from pathlib import Path
from typing import Iterable, List, Union

from gitignore_patterns.core.errors import FileAccessError

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r'\r?\n')


def parse(content: str, dedupe: bool = True) -> List[str]:
    """
    Extract the patterns from the content of a .gitignore file.

    Lines are trimmed; blank lines and comments (leading '#') are dropped.

    Args:
        content: Text of the .gitignore file
        dedupe: If True, drop repeated patterns keeping the first one

    Returns:
        List of patterns in file order
    """
    patterns = []

    for line in _LINE_BREAK.split(content):
        value = line.strip()
        if value and not value.startswith('#'):
            patterns.append(value)

    logger.debug("Parsed %d patterns", len(patterns))

    if dedupe:
        return _dedupe(patterns)

    return patterns


def parse_path(filepath: Union[str, os.PathLike], strict: bool = True,
               dedupe: bool = True) -> List[str]:
    """
    Read a .gitignore file and extract its patterns.

    Args:
        filepath: Path to the .gitignore file
        strict: If True, a missing file raises FileAccessError;
            otherwise an empty list is returned
        dedupe: If True, drop repeated patterns keeping the first one

    Returns:
        List of patterns in file order

    Raises:
        FileAccessError: If the file does not exist and strict is True
    """
    path = Path(filepath)

    if not path.exists():
        if strict:
            raise FileAccessError(filepath)
        logger.debug("Ignore file %s not found, using no patterns", filepath)
        return []

    logger.debug("Reading ignore file %s", filepath)
    # utf-8-sig drops a leading BOM; newline='' leaves line breaks to parse()
    with open(path, 'r', encoding='utf-8-sig', newline='') as f:
        content = f.read()

    return parse(content, dedupe=dedupe)


def dedupe(patterns: Iterable[str]) -> List[str]:
    """Remove duplicate patterns, keeping the first occurrence of each."""
    return list(dict.fromkeys(patterns))


# parse() shadows the module-level name with its keyword argument
_dedupe = dedupe
