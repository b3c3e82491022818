import json
from pathlib import Path

from typer.testing import CliRunner

from eventcracker.runner import app

runner = CliRunner()

EVENT = {
    'id': 1,
    'pages': [
        {
            'list': [
                {'code': 121, 'indent': 0, 'parameters': [1, 1, 0]},
                {'code': 230, 'indent': 0, 'parameters': [60]},
                {'code': 0, 'indent': 0, 'parameters': []},
            ]
        }
    ],
}

EXPECTED = 'door_open = True\nwait(duration=60)\n'


def write_map(tmp_path: Path, event=EVENT) -> Path:
    path = tmp_path / 'Map001.json'
    path.write_text(json.dumps({'events': [None, event]}), encoding='utf-8')
    return path


def write_names(tmp_path: Path) -> Path:
    path = tmp_path / 'names.yml'
    path.write_text('switches:\n  1: door_open\n', encoding='utf-8')
    return path


def invoke(*args):
    return runner.invoke(app, ['event', 'commands2py', *map(str, args)])


def test_prints_to_stdout(tmp_path: Path) -> None:
    path = write_map(tmp_path)
    result = invoke(path, '--event-id', 1, '--config', write_names(tmp_path))
    assert result.exit_code == 0, result.output
    assert result.stdout == EXPECTED


def test_writes_output_file(tmp_path: Path) -> None:
    path = write_map(tmp_path)
    output = tmp_path / 'event_1.py'
    result = invoke(path, '-e', 1, '-c', write_names(tmp_path), '-o', output)
    assert result.exit_code == 0, result.output
    assert output.read_text(encoding='utf-8') == EXPECTED
    assert not (tmp_path / 'event_1.py.tmp').exists()


def test_refuses_to_replace_output(tmp_path: Path) -> None:
    path = write_map(tmp_path)
    output = tmp_path / 'event_1.py'
    output.write_text('keep', encoding='utf-8')

    result = invoke(path, '-e', 1, '-o', output)
    assert result.exit_code == 1
    assert output.read_text(encoding='utf-8') == 'keep'

    result = invoke(path, '-e', 1, '-o', output, '--overwrite')
    assert result.exit_code == 0
    assert output.read_text(encoding='utf-8') == 'game_switch_1 = True\nwait(duration=60)\n'


def test_dry_run_writes_nothing(tmp_path: Path) -> None:
    path = write_map(tmp_path)
    output = tmp_path / 'event_1.py'
    result = invoke(path, '-e', 1, '-o', output, '--dry-run')
    assert result.exit_code == 0
    assert not output.exists()
    assert not (tmp_path / 'event_1.py.tmp').exists()


def test_decode_error_fails_without_output(tmp_path: Path) -> None:
    event = {
        'id': 1,
        'pages': [{'list': [{'code': 211, 'indent': 0, 'parameters': [2]}]}],
    }
    path = write_map(tmp_path, event)
    output = tmp_path / 'event_1.py'
    result = invoke(path, '-e', 1, '-o', output)
    assert result.exit_code == 1
    assert not output.exists()


def test_missing_event_fails(tmp_path: Path) -> None:
    path = write_map(tmp_path)
    result = invoke(path, '-e', 4)
    assert result.exit_code == 1


def test_mz_dialect(tmp_path: Path) -> None:
    event = {
        'id': 1,
        'pages': [
            {
                'list': [
                    {'code': 357, 'indent': 0, 'parameters': ['Quest', 'add', '', {}]},
                    {'code': 657, 'indent': 0, 'parameters': ['Id = 3']},
                ]
            }
        ],
    }
    path = write_map(tmp_path, event)
    result = invoke(path, '-e', 1, '--dialect', 'mz')
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith('plugin_command(\n')
    assert 'Unknown' not in result.stdout


def test_type_mismatch_reports_error(tmp_path: Path) -> None:
    event = {
        'id': 1,
        'pages': [{'list': [{'code': 230, 'indent': 0, 'parameters': ['a']}]}],
    }
    path = write_map(tmp_path, event)
    result = invoke(path, '-e', 1)
    assert result.exit_code == 1
    assert 'error: ' in result.output
    assert 'WAIT' in result.output
    assert 'duration' in result.output
