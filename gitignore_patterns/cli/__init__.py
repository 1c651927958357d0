"""Command line interface for gitignore-patterns."""
