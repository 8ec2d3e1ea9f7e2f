"""Tests for the interactive console loop."""

import json

import click
import pytest
from click.testing import CliRunner

from filefinder.console import main


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to the prompts, then simulate end of input."""
    asked = []

    def _answers(*lines):
        remaining = iter(lines)

        def fake_input(query):
            asked.append(query)
            try:
                line = next(remaining)
            except StopIteration:
                raise click.Abort()
            if isinstance(line, Exception):
                raise line
            return line.strip()

        monkeypatch.setattr(main, 'get_input', fake_input)
        return asked

    return _answers


def invoke(*args):
    return CliRunner().invoke(main.cli, list(args))


def test_search_prints_matches_and_summary(tree, answers):
    root = tree('report.txt', 'sub/report_old.csv', 'other.md')
    answers(str(root), 'REPORT', '')
    result = invoke()
    assert result.exit_code == 0, result.output
    assert f'{root / "report.txt"} - Found in ' in result.output
    assert f'{root / "sub" / "report_old.csv"} - Found in ' in result.output
    assert 'other.md' not in result.output
    assert 'Total time: ' in result.output
    assert '2 results found' in result.output


def test_prompts_are_asked_in_order(answers):
    asked = answers()
    result = invoke('search')
    assert result.exit_code == 0
    assert asked == [main.PATH_PROMPT]


def test_empty_root_reprompts(tree, answers):
    root = tree('a.log')
    asked = answers('', 'a', '', str(root), '', 'log')
    result = invoke()
    assert result.exit_code == 0
    assert 'You must enter the path to search' in result.output
    assert '1 results found' in result.output
    assert asked.count(main.PATH_PROMPT) == 3


def test_missing_name_and_extensions_reprompts(tree, answers):
    root = tree('a.log')
    answers(str(root), '', '')
    result = invoke()
    assert result.exit_code == 0
    assert 'You must enter either a filename or extensions' in result.output
    assert 'results found' not in result.output


def test_input_error_restarts_loop(answers):
    asked = answers(OSError('stdin gone'))
    result = invoke()
    assert result.exit_code == 0
    assert 'Error getting user input, try again: stdin gone' in result.output
    assert asked == [main.PATH_PROMPT, main.PATH_PROMPT]


def test_size_is_printed_in_megabytes(tree, answers):
    root = tree()
    (root / 'big.bin').write_bytes(b'\0' * 2_000_000)
    answers(str(root), 'big', 'bin')
    result = invoke()
    assert ' - 2 MB' in result.output


def test_results_csv_records_matches(tree, answers, tmp_path):
    root = tree('a.txt', 'b.txt')
    csv_path = tmp_path / 'logs' / 'results.csv'
    config = tmp_path / 'config.yml'
    config.write_text(f'results_csv: {csv_path}\n')
    answers(str(root), '', 'txt')
    result = invoke('--config', str(config))
    assert result.exit_code == 0, result.output
    lines = csv_path.read_text(encoding='utf-8').splitlines()
    assert len(lines) == 3
    assert lines[0].startswith('run_id,')


def test_invalid_config_is_reported(tmp_path):
    config = tmp_path / 'config.yml'
    config.write_text('colour: blue\n')
    result = invoke('--config', str(config), 'show-config')
    assert result.exit_code == 1
    assert 'Unknown configuration keys: colour' in result.output


def test_show_config(tmp_path):
    config = tmp_path / 'config.yml'
    config.write_text('log_level: info\n')
    result = invoke('--config', str(config), 'show-config')
    assert result.exit_code == 0
    assert json.loads(result.output) == {'log_level': 'INFO', 'results_csv': None}


def test_undecodable_input_restarts_loop(answers):
    asked = answers(UnicodeDecodeError('utf-8', b'\xff', 0, 1, 'invalid start byte'))
    result = invoke()
    assert result.exit_code == 0, result.output
    assert 'Error getting user input, try again:' in result.output
    assert asked == [main.PATH_PROMPT, main.PATH_PROMPT]


def test_tab_in_path_is_printed_verbatim(tree, answers):
    root = tree('a\tb.txt')
    answers(str(root), 'a', 'txt')
    result = invoke()
    assert result.exit_code == 0, result.output
    path = str(root / 'a\tb.txt')
    assert f'{path} - Found in ' in result.output
