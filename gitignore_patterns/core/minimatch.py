"""Translation of .gitignore patterns into minimatch glob patterns."""

# Patterns that already mean "everything" in both dialects
_PASSTHROUGH = ('', '**', '/**', '**/')


def convert_ignore_pattern_to_minimatch(pattern: str) -> str:
    """
    Convert a .gitignore pattern to an equivalent minimatch pattern.

    - A leading '!' (negation) is kept in front of the result.
    - Patterns without a slash, or with a single trailing slash, match at
      any depth and get a '**/' prefix.
    - A leading slash anchors the pattern to the root and is removed.
    - Literal '{' and '(' are escaped so minimatch does not read them as
      brace expansion or extglob syntax.
    - A trailing '/**' gets '/*' appended so the directory contents match.

    Args:
        pattern: A single .gitignore pattern

    Returns:
        The minimatch pattern
    """
    negated = pattern.startswith('!')
    negated_prefix = '!' if negated else ''
    pattern_to_test = (pattern[1:] if negated else pattern).rstrip()

    if pattern_to_test in _PASSTHROUGH:
        return f"{negated_prefix}{pattern_to_test}"

    first_slash = pattern_to_test.find('/')

    if first_slash < 0 or first_slash == len(pattern_to_test) - 1:
        match_everywhere_prefix = '**/'
    else:
        match_everywhere_prefix = ''

    body = pattern_to_test[1:] if first_slash == 0 else pattern_to_test
    match_inside_suffix = '/*' if pattern_to_test.endswith('/**') else ''

    return (f"{negated_prefix}{match_everywhere_prefix}"
            f"{_escape_literal_braces(body)}{match_inside_suffix}")


def _escape_literal_braces(text: str) -> str:
    """
    Backslash-escape every '{' and '(' that is not already escaped.

    In .gitignore `src/{a,b}.js` names exactly that file, while minimatch
    expands it to `src/a.js` and `src/b.js`.
    """
    parts = []
    i = 0

    while i < len(text):
        c = text[i]

        if c == '\\' and i + 1 < len(text):
            # Escape sequence, keep both characters as they are
            parts.append(text[i:i + 2])
            i += 2
            continue

        if c in '{(':
            parts.append('\\')
        parts.append(c)
        i += 1

    return ''.join(parts)
