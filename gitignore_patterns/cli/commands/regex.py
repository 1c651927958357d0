"""Regex command - print the compiled expressions of an ignore file."""

import click

from gitignore_patterns.core.regex import NEVER_MATCH, to_regex
from gitignore_patterns.cli.commands._common import load_patterns
from gitignore_patterns.cli.output import no_expression


@click.command('regex')
@click.argument('file')
@click.option('--strict/--no-strict', default=None,
              help='Fail if the file does not exist')
@click.pass_obj
def regex_cmd(config, file, strict):
    """
    Print the accept and ignore regular expressions of an ignore file.

    Examples:
        gitignore-patterns regex .gitignore
    """
    regex = to_regex(load_patterns(config, file, strict=strict))

    for label, expression in (('accepts', regex.accepts), ('ignores', regex.ignores)):
        if expression is NEVER_MATCH:
            click.echo(no_expression(label))
        else:
            click.echo(f"{label}: {expression.pattern}")
