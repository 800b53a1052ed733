"""Tests for the psychro command-line entry point."""

import json

import pytest

from psychro.main import build_parser, main


class TestCommandLine:
    """Tests for psychro.main."""

    def test_relative_humidity(self, capsys):
        """Test a dry bulb + RH query prints the resolved state."""
        assert main(["--dry-bulb", "75", "--rh", "50"]) == 0
        out = capsys.readouterr().out
        assert "DB=75.0°F" in out
        assert "RH=50.0%" in out

    def test_json_output(self, capsys):
        """Test JSON output contains every state field."""
        assert main(["--dry-bulb", "95", "--wet-bulb", "75", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["wet_bulb_f"] == 75.0
        assert data["humidity_ratio"] == pytest.approx(0.0141, abs=0.001)
        assert data["converged"] is True

    def test_dry_air_json(self, capsys):
        """Test an out-of-range dew point is reported as null."""
        assert main(["--dry-bulb", "70", "--humidity-ratio", "0", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["dew_point_f"] is None

    def test_pressure(self, capsys):
        """Test a site pressure is passed through."""
        assert main(["--dry-bulb", "75", "--dew-point", "55", "--pressure", "12.1", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["pressure_psia"] == 12.1

    def test_comfort_season(self, capsys):
        """Test the comfort zone report."""
        assert main(["--dry-bulb", "76", "--rh", "45", "--season", "summer"]) == 0
        assert "In summer comfort zone: yes" in capsys.readouterr().out

    def test_comfort_season_json(self, capsys):
        """Test the comfort flag in JSON output."""
        assert main(["--dry-bulb", "85", "--rh", "45", "--season", "summer", "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["in_comfort_zone"] is False

    def test_invalid_state_exit_code(self, capsys):
        """Test impossible inputs exit with status 1."""
        assert main(["--dry-bulb", "75", "--rh", "120"]) == 1

    def test_vapor_pressure_above_total_exit_code(self, capsys):
        """Test RH that would boil at the site pressure exits with status 1."""
        assert main(["--dry-bulb", "150", "--rh", "90", "--pressure", "3"]) == 1

    def test_hot_air_at_low_pressure(self, capsys):
        """Test hot dry air above the local boiling point resolves."""
        args = ["--dry-bulb", "195", "--humidity-ratio", "0.01", "--pressure", "10", "--json"]
        assert main(args) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["wet_bulb_f"] == pytest.approx(82.53, abs=0.05)

    def test_config_file(self, tmp_path, capsys):
        """Test the site pressure is read from a config file."""
        config = tmp_path / "site.yaml"
        config.write_text("pressure_psia: 12.1\n")
        assert main(["--dry-bulb", "75", "--enthalpy", "28", "--config", str(config), "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["pressure_psia"] == 12.1

    def test_missing_config_file(self, tmp_path):
        """Test a missing config file exits with status 2."""
        assert main(["--dry-bulb", "75", "--rh", "50", "--config", str(tmp_path / "none.yaml")]) == 2

    def test_requires_one_alternate(self):
        """Test two alternate properties are rejected by the parser."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--dry-bulb", "75", "--rh", "50", "--wet-bulb", "60"])

    def test_requires_dry_bulb(self):
        """Test dry bulb is required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--rh", "50"])
