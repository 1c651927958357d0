"""Flat command - print a flat ignore configuration."""

import json

import click

from gitignore_patterns.core.flat_config import to_flat_config
from gitignore_patterns.cli.commands._common import load_patterns


@click.command('flat')
@click.argument('file')
@click.option('--name', default=None, help='Configuration name')
@click.option('--strict/--no-strict', default=None,
              help='Fail if the file does not exist')
@click.pass_obj
def flat_cmd(config, file, name, strict):
    """
    Print the flat configuration of an ignore file as JSON.

    Every pattern is converted to its minimatch equivalent.

    Examples:
        gitignore-patterns flat .gitignore
        gitignore-patterns flat --name my-ignores .gitignore
    """
    patterns = load_patterns(config, file, strict=strict)
    flat_config = to_flat_config(patterns, name=name or config.name)
    click.echo(json.dumps(flat_config.to_dict(), indent=2))
