"""Regular expression compilation and matching for .gitignore patterns."""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List

logger = logging.getLogger(__name__)

# Characters that are literal in .gitignore but special in a regex
_REGEX_SPECIAL = re.compile(r'[$()+./?\[\\\]^{|}\-]')

# Matches no string at all, used for an empty set of patterns
NEVER_MATCH = re.compile(r'(?!)')

_REPEATED_STAR = re.compile(r'\*{2,}')


@dataclass(frozen=True)
class IgnoreRegex:
    """
    Compiled accept and ignore expressions for a list of patterns.

    `accepts` holds the negated ('!') patterns, `ignores` everything else.
    Both are anchored at the start of the path only, so a match on a
    directory also covers everything below it.
    """
    accepts: re.Pattern
    ignores: re.Pattern

    def ignore(self, path: str) -> bool:
        """Check if a path is ignored by these expressions."""
        return ignore(self, path)


def prepare_regex_pattern(pattern: str) -> str:
    """
    Convert a single pattern into a regex source string.

    Regex metacharacters are escaped, then the first '**' becomes '(.+)'
    (any characters) and the first '*' becomes '([^\\/]+)' (any characters
    except '/'). Later wildcards stay as regex repeats, with runs of '*'
    squeezed to one so the expression always compiles. A repeat right after
    a translated wildcard is folded into it, e.g. '([^\\/]+)*' becomes
    '([^\\/]*)'.

    Args:
        pattern: Pattern without its '!' prefix or leading slash

    Returns:
        Regex source string
    """
    escaped = _REGEX_SPECIAL.sub(r'\\\g<0>', pattern)
    translated = escaped.replace('**', '(.+)', 1).replace('*', r'([^\/]+)', 1)
    translated = _REPEATED_STAR.sub('*', translated)
    # (x+)* backtracks exponentially on a failed match, (x*) accepts the same strings
    return translated.replace(r'([^\/]+)*', r'([^\/]*)').replace('(.+)*', '(.*)')


def to_regex(patterns: Iterable[str]) -> IgnoreRegex:
    """
    Compile patterns into an accept and an ignore expression.

    Patterns starting with '!' are accept patterns, the others are
    ignore patterns. One leading slash is removed from each.

    Args:
        patterns: .gitignore patterns, e.g. from parse()

    Returns:
        IgnoreRegex with both compiled expressions
    """
    accepts = []
    ignores = []

    for pattern in patterns:
        negated = pattern.startswith('!')
        if negated:
            pattern = pattern[1:]

        if pattern.startswith('/'):
            pattern = pattern[1:]

        if negated:
            accepts.append(pattern)
        else:
            ignores.append(pattern)

    logger.debug("Compiling %d ignore and %d accept patterns",
                 len(ignores), len(accepts))

    return IgnoreRegex(accepts=_compile(accepts), ignores=_compile(ignores))


def ignore(regex: IgnoreRegex, path: str) -> bool:
    """
    Check if a path is ignored.

    A path is ignored when it matches an ignore pattern and no accept
    pattern. One leading slash is removed from the path first.

    Args:
        regex: Expressions returned by to_regex()
        path: Path relative to the .gitignore location

    Returns:
        True if the path should be ignored
    """
    value = path[1:] if path.startswith('/') else path
    return bool(regex.ignores.match(value)) and not regex.accepts.match(value)


def filter_paths(regex: IgnoreRegex, paths: Iterable[str]) -> List[str]:
    """Return the paths that are not ignored, in their original order."""
    return [path for path in paths if not ignore(regex, path)]


def _compile(patterns: List[str]) -> re.Pattern:
    if not patterns:
        return NEVER_MATCH

    alternatives = ')|('.join(prepare_regex_pattern(p) for p in patterns)
    return re.compile(f"^({alternatives})")
