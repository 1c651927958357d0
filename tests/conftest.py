"""Shared pytest fixtures for gitignore-patterns tests."""

import pytest
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


def file_fixture(name: str) -> Path:
    """Path of a .gitignore fixture file."""
    return FIXTURES_DIR / f'{name}.txt'


def fixture(name: str) -> str:
    """Content of a .gitignore fixture file."""
    return file_fixture(name).read_text(encoding='utf-8')


@pytest.fixture
def gitignore_patterns():
    """Deduplicated patterns of the basic fixture."""
    return [
        'logs',
        '*.log',
        'npm-debug.log',
        'yarn-debug.log',
        'yarn-error.log',
        'pids',
        '*.pid',
        '*.seed',
        '*.pid.lock',
    ]


@pytest.fixture
def ignore_file(tmp_path):
    """Factory writing a .gitignore with the given content."""
    def _write(content: str) -> Path:
        path = tmp_path / '.gitignore'
        path.write_text(content, encoding='utf-8')
        return path
    return _write
