import json

from click.testing import CliRunner

from rws.cli import cli
from rws.version import __version__


def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert 'review-workspace' in result.output.lower()
    assert __version__ in result.output


def test_cli_help_lists_commands():
    result = CliRunner().invoke(cli, ['--help'])
    assert result.exit_code == 0
    for name in ('config', 'layout', 'gui'):
        assert name in result.output


def test_config_command(test_config):
    result = CliRunner().invoke(cli, ['config'], obj=test_config)
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data['layout']['library_width'] == 30.0


def test_config_section(test_config):
    result = CliRunner().invoke(cli, ['config', '-s', 'resize'], obj=test_config)
    assert result.exit_code == 0
    assert list(json.loads(result.output)) == ['resize']


def test_config_unknown_section(test_config):
    result = CliRunner().invoke(cli, ['config', '-s', 'nope'], obj=test_config)
    assert result.exit_code != 0
    assert "Unknown section 'nope'" in result.output


def test_config_command_rejects_bad_widths(test_config):
    test_config['layout']['library_width'] = 50.0
    result = CliRunner().invoke(cli, ['config', '-s', 'layout'], obj=test_config)
    assert result.exit_code != 0
    assert 'must sum to 100' in result.output


def test_bad_env_widths_reported_as_usage_error(monkeypatch):
    monkeypatch.setenv('RWS__LAYOUT__LIBRARY_WIDTH', '50')
    result = CliRunner().invoke(cli, ['config'])
    assert result.exit_code == 2
    assert 'Invalid layout configuration' in result.output
