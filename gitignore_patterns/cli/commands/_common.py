"""Helpers shared by the CLI commands."""

from typing import List, Optional

import click

from gitignore_patterns.core.config import Config
from gitignore_patterns.core.errors import FileAccessError
from gitignore_patterns.core.parser import parse_path
from gitignore_patterns.cli.output import error


def load_patterns(config: Config, file: str, strict: Optional[bool] = None,
                  dedupe: Optional[bool] = None) -> List[str]:
    """
    Read patterns from an ignore file, reporting a missing file.

    Options left as None take their value from the config.
    """
    strict = config.strict if strict is None else strict
    dedupe = config.dedupe if dedupe is None else dedupe

    try:
        return parse_path(file, strict=strict, dedupe=dedupe)
    except FileAccessError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()
