"""Main CLI entry point for gitignore-patterns."""

import logging

import click
from colorama import init

from gitignore_patterns import __version__
from gitignore_patterns.core.config import Config
from gitignore_patterns.cli.commands import parse_cmd, flat_cmd, regex_cmd, check_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


@click.group()
@click.version_option(version=__version__)
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='INI file with option defaults')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, config_path, verbose):
    """Convert .gitignore patterns to minimatch globs and regexes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = Config(config_path)


# Register commands
cli.add_command(parse_cmd)
cli.add_command(flat_cmd)
cli.add_command(regex_cmd)
cli.add_command(check_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
