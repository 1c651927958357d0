"""Coloured messages for the gitignore-patterns commands."""

from colorama import Fore, Style


def ignored(path: str) -> str:
    """Line for a path matched by the ignore patterns."""
    return f"{Fore.YELLOW}ignored: {path}{Style.RESET_ALL}"


def kept(path: str) -> str:
    """Line for a path the ignore patterns let through."""
    return f"{Fore.GREEN}kept: {path}{Style.RESET_ALL}"


def no_expression(label: str) -> str:
    """Line for a regex with no patterns behind it."""
    return f"{Fore.CYAN}{label}: (none){Style.RESET_ALL}"


def error(message: str) -> str:
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"
