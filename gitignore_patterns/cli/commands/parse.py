"""Parse command - list the patterns of an ignore file."""

import click

from gitignore_patterns.cli.commands._common import load_patterns


@click.command('parse')
@click.argument('file')
@click.option('--dedupe/--no-dedupe', default=None, help='Remove duplicate patterns')
@click.option('--strict/--no-strict', default=None,
              help='Fail if the file does not exist')
@click.pass_obj
def parse_cmd(config, file, dedupe, strict):
    """
    Print the patterns of an ignore file, one per line.

    Blank lines and comments are dropped.

    Examples:
        gitignore-patterns parse .gitignore
        gitignore-patterns parse --no-dedupe .gitignore
        gitignore-patterns parse --no-strict missing/.gitignore
    """
    for pattern in load_patterns(config, file, strict=strict, dedupe=dedupe):
        click.echo(pattern)
