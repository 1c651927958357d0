"""Integration tests for the gitignore-patterns command line."""

import json

import pytest
from click.testing import CliRunner

from gitignore_patterns.cli.main import cli
from tests.conftest import file_fixture


@pytest.fixture
def runner():
    return CliRunner()


class TestParseCommand:
    """Tests for gitignore-patterns parse."""

    def test_parse(self, runner, gitignore_patterns):
        result = runner.invoke(cli, ['parse', str(file_fixture('gitignore'))])
        assert result.exit_code == 0
        assert result.output.splitlines() == gitignore_patterns

    def test_parse_no_dedupe(self, runner):
        result = runner.invoke(cli, ['parse', '--no-dedupe', str(file_fixture('gitignore_dupe'))])
        assert result.exit_code == 0
        assert result.output.splitlines().count('*.log') == 2

    def test_parse_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ['parse', str(tmp_path / 'missing')])
        assert result.exit_code != 0
        assert 'invalid file' in result.output

    def test_parse_missing_file_not_strict(self, runner, tmp_path):
        result = runner.invoke(cli, ['parse', '--no-strict', str(tmp_path / 'missing')])
        assert result.exit_code == 0
        assert result.output == ''

    def test_parse_strict_from_config(self, runner, tmp_path):
        config_file = tmp_path / 'options.ini'
        config_file.write_text("[parse]\nstrict = false\n")
        result = runner.invoke(cli, ['--config', str(config_file),
                                     'parse', str(tmp_path / 'missing')])
        assert result.exit_code == 0


class TestFlatCommand:
    """Tests for gitignore-patterns flat."""

    def test_flat(self, runner):
        result = runner.invoke(cli, ['flat', str(file_fixture('gitignore2'))])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data['name'] == 'gitignore'
        assert data['ignores'][:3] == ['**/node_modules', '**/fixtures', '!fixtures/node_modules']

    def test_flat_name_option(self, runner):
        result = runner.invoke(cli, ['flat', '--name', 'custom', str(file_fixture('gitignore2'))])
        assert json.loads(result.output)['name'] == 'custom'

    def test_flat_name_from_config(self, runner, tmp_path):
        config_file = tmp_path / 'options.ini'
        config_file.write_text("[flat]\nname = from-config\n")
        result = runner.invoke(cli, ['--config', str(config_file),
                                     'flat', str(file_fixture('gitignore2'))])
        assert json.loads(result.output)['name'] == 'from-config'


class TestRegexCommand:
    """Tests for gitignore-patterns regex."""

    def test_regex(self, runner):
        result = runner.invoke(cli, ['regex', str(file_fixture('gitignore2'))])
        assert result.exit_code == 0
        assert r'accepts: ^(fixtures\/node_modules)' in result.output
        assert 'ignores: ^(node_modules)|(fixtures)' in result.output

    def test_regex_without_negations(self, runner):
        result = runner.invoke(cli, ['regex', str(file_fixture('gitignore'))])
        assert result.exit_code == 0
        assert 'accepts: (none)' in result.output


class TestCheckCommand:
    """Tests for gitignore-patterns check."""

    def test_check(self, runner):
        result = runner.invoke(cli, ['check', str(file_fixture('gitignore2')),
                                     'dist', 'src/index.ts', 'fixtures/node_modules'])
        assert result.exit_code == 0
        assert 'ignored: dist' in result.output
        assert 'kept: src/index.ts' in result.output
        assert 'kept: fixtures/node_modules' in result.output

    def test_check_exit_code(self, runner):
        result = runner.invoke(cli, ['check', '--exit-code',
                                     str(file_fixture('gitignore2')), 'dist'])
        assert result.exit_code == 1

    def test_check_exit_code_all_kept(self, runner):
        result = runner.invoke(cli, ['check', '--exit-code',
                                     str(file_fixture('gitignore2')), 'src/index.ts'])
        assert result.exit_code == 0

    def test_check_requires_paths(self, runner):
        result = runner.invoke(cli, ['check', str(file_fixture('gitignore2'))])
        assert result.exit_code != 0


def test_version(runner):
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert '0.1.0' in result.output
