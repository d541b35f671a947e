from typer.testing import CliRunner

from raff.runner import app

runner = CliRunner()


def test_sample_then_map(tmp_path):
    path = tmp_path / 'sample.wav'
    result = runner.invoke(app, ['sample', str(path)])
    assert result.exit_code == 0, result.output
    assert 'Generated' in result.output
    assert path.read_bytes()[:4] == b'RIFF'

    result = runner.invoke(app, ['map', str(path)])
    assert result.exit_code == 0, result.output
    assert 'Mapping file: sample.wav' in result.output
    assert '<data size="8" />' in result.output


def test_find(tmp_path):
    path = tmp_path / 'sample.wav'
    runner.invoke(app, ['sample', str(path)])
    result = runner.invoke(app, ['find', str(path), 'fmt{}'])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ['fmt  OTHER 16']


def test_map_rejects_non_riff(tmp_path):
    path = tmp_path / 'plain.txt'
    path.write_bytes(b'hello world')
    result = runner.invoke(app, ['map', str(path)])
    assert result.exit_code == 1
