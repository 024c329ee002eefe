"""Tests for the command line runner and its environment configuration."""

import pytest
from lifegrid import zoo
from lifegrid.cli import main
from lifegrid.config import SimulationConfig
from lifegrid.core.grid import Grid
from lifegrid.errors import InvalidArgumentError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('WIDTH', 'HEIGHT', 'STEPS', 'TOROIDAL', 'LOG_LEVEL'):
        monkeypatch.delenv(f'LIFEGRID_{name}', raising=False)


class TestSimulationConfig:
    """Test defaults and environment parsing."""

    def test_defaults(self):
        config = SimulationConfig.from_env()
        assert config.width is None
        assert config.height is None
        assert config.steps == 0
        assert config.toroidal is False
        assert config.log_level == 'WARNING'

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('LIFEGRID_WIDTH', '40')
        monkeypatch.setenv('LIFEGRID_HEIGHT', '30')
        monkeypatch.setenv('LIFEGRID_STEPS', '12')
        monkeypatch.setenv('LIFEGRID_TOROIDAL', 'yes')
        monkeypatch.setenv('LIFEGRID_LOG_LEVEL', 'debug')

        config = SimulationConfig.from_env()

        assert (config.width, config.height, config.steps) == (40, 30, 12)
        assert config.toroidal is True
        assert config.log_level == 'DEBUG'

    @pytest.mark.parametrize("name,value", [
        ('WIDTH', 'wide'),
        ('STEPS', '-3'),
        ('HEIGHT', '0'),
        ('TOROIDAL', 'maybe'),
    ])
    def test_invalid_env(self, monkeypatch, name, value):
        monkeypatch.setenv(f'LIFEGRID_{name}', value)
        with pytest.raises(InvalidArgumentError):
            SimulationConfig.from_env()

    def test_log_level_normalised(self):
        assert SimulationConfig(log_level='debug').log_level == 'DEBUG'

    def test_unknown_log_level(self):
        with pytest.raises(InvalidArgumentError, match="log_level"):
            SimulationConfig(log_level='loud')


class TestCommandLine:
    """Test end-to-end runs through main()."""

    def test_shape_run_prints_rendering(self, capsys):
        assert main(['--shape', 'block', '--width', '4', '--height', '4', '--steps', '3']) == 0

        out = capsys.readouterr().out
        assert out == "+----+\n|    |\n| ## |\n| ## |\n|    |\n+----+\n"

    def test_glider_run_saved_to_file(self, tmp_path):
        output = tmp_path / "after.gol"

        code = main(['--shape', 'glider', '--width', '8', '--height', '8',
                     '--offset', '1', '1', '--steps', '4', '--output', str(output)])

        assert code == 0
        expected = Grid(8, 8)
        expected.merge(zoo.glider(), 2, 2)
        assert zoo.load(output) == expected

    def test_input_file_toroidal(self, tmp_path):
        source = tmp_path / "start.bgol"
        start = Grid(6, 6)
        start.merge(zoo.glider(), 3, 3)
        zoo.save(source, start)
        output = tmp_path / "end.bgol"

        code = main(['--input', str(source), '--steps', '24', '--toroidal',
                     '--output', str(output)])

        assert code == 0
        assert zoo.load(output) == start

    def test_steps_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv('LIFEGRID_STEPS', '1')
        output = tmp_path / "out.gol"

        assert main(['--shape', 'blinker', '--width', '3', '--height', '3',
                     '--output', str(output)]) == 0
        assert zoo.load(output).alive_coordinates() == [(1, 0), (1, 1), (1, 2)]

    def test_demo_scene(self, capsys):
        assert main(['--demo', '--width', '12', '--height', '12']) == 0
        assert capsys.readouterr().out.startswith("+------------+\n")

    def test_missing_input_fails(self, tmp_path, capsys):
        assert main(['--input', str(tmp_path / "missing.gol")]) == 1
        assert capsys.readouterr().out == ""

    def test_source_larger_than_world_fails(self):
        assert main(['--shape', 'light_weight_spaceship', '--width', '3', '--height', '3']) == 1

    def test_bad_environment_fails(self, monkeypatch):
        monkeypatch.setenv('LIFEGRID_WIDTH', 'wide')
        assert main(['--demo']) == 1

    def test_non_ascii_input_fails(self, tmp_path, capsys):
        path = tmp_path / "binary.gol"
        path.write_bytes(b"2 1\n\xff#\n")

        assert main(['--input', str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_unknown_log_level_rejected(self):
        with pytest.raises(SystemExit):
            main(['--demo', '--log-level', 'bogus'])

    def test_log_level_case_insensitive(self, capsys):
        assert main(['--shape', 'block', '--log-level', 'info']) == 0
        assert capsys.readouterr().out

    def test_unknown_log_level_in_environment_fails(self, monkeypatch):
        monkeypatch.setenv('LIFEGRID_LOG_LEVEL', 'bogus')
        assert main(['--demo']) == 1

    def test_source_is_required(self):
        with pytest.raises(SystemExit):
            main([])
