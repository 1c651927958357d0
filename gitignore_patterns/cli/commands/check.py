"""Check command - test paths against an ignore file."""

import click

from gitignore_patterns.core.regex import to_regex
from gitignore_patterns.cli.commands._common import load_patterns
from gitignore_patterns.cli.output import ignored, kept


@click.command('check')
@click.argument('file')
@click.argument('paths', nargs=-1, required=True)
@click.option('--strict/--no-strict', default=None,
              help='Fail if the file does not exist')
@click.option('--exit-code', is_flag=True,
              help='Exit with status 1 if any path is ignored')
@click.pass_obj
def check_cmd(config, file, paths, strict, exit_code):
    """
    Report whether each path is ignored by an ignore file.

    Paths are relative to the directory of the ignore file.

    Examples:
        gitignore-patterns check .gitignore dist/app.js src/index.ts
        gitignore-patterns check --exit-code .gitignore build
    """
    regex = to_regex(load_patterns(config, file, strict=strict))

    any_ignored = False
    for path in paths:
        if regex.ignore(path):
            any_ignored = True
            click.echo(ignored(path))
        else:
            click.echo(kept(path))

    if exit_code and any_ignored:
        raise SystemExit(1)
