"""Tests for the command line interface."""

from typer.testing import CliRunner

from shapearea.cli import app

runner = CliRunner()


class TestCli:
    """Test suite for the shape-area CLI."""

    def test_circle(self):
        result = runner.invoke(app, ["circle", "--radius", "1"])
        assert result.exit_code == 0
        assert "3.141593" in result.stdout
        assert "circle" in result.stdout

    def test_rectangle(self):
        result = runner.invoke(app, ["rectangle", "--height", "3", "--width", "4"])
        assert result.exit_code == 0
        assert "12.000000" in result.stdout

    def test_rectangle_perimeter(self):
        result = runner.invoke(
            app, ["rectangle", "--height", "3", "--width", "4", "--perimeter"]
        )
        assert result.exit_code == 0
        assert "14.000000" in result.stdout

    def test_custom_tag(self):
        result = runner.invoke(app, ["circle", "--radius", "2", "--shape", "disc"])
        assert result.exit_code == 0
        assert "disc" in result.stdout

    def test_missing_option(self):
        result = runner.invoke(app, ["rectangle", "--height", "3"])
        assert result.exit_code != 0

    def test_verbose_logs_area(self):
        result = runner.invoke(app, ["circle", "--radius", "1", "--verbose"])
        assert result.exit_code == 0
        assert "Area of" in result.output

    def test_quiet_by_default(self):
        result = runner.invoke(app, ["rectangle", "--height", "3", "--width", "4"])
        assert result.exit_code == 0
        assert "Area of" not in result.output

    def test_non_numeric_option(self):
        result = runner.invoke(app, ["circle", "--radius", "abc"])
        assert result.exit_code == 2
