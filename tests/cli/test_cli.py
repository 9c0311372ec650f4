"""Tests for the typeguess CLI."""

import json

import pytest
from typer.testing import CliRunner

from typeguess.cli import app
from typeguess.core.logging import configure_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Point logging back at the real stderr after each CLI run."""
    yield
    configure_logging()


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text(
        "id,amount,flag,name,joined\n"
        "1,2.5,true,alice,2024-01-01\n"
        "2,13.75,false,bob,2024-02-15\n"
        "3,,true,,\n"
    )
    return path


class TestInfer:
    """Tests for the infer command."""

    def test_json(self, csv_file):
        """Test JSON output for every column."""
        result = runner.invoke(app, ["infer", str(csv_file), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["id"]["type"] == "INTEGER"
        assert data["amount"] == {
            "type": "DECIMAL",
            "integer_digits": 2,
            "fractional_digits": 2,
            "string_length": 5,
            "unicode": False,
        }
        assert data["flag"]["type"] == "BOOLEAN"
        assert data["name"]["type"] == "STRING"
        assert data["name"]["string_length"] == 5
        assert data["joined"]["type"] == "DATETIME"

    def test_table(self, csv_file):
        """Test the rich table output."""
        result = runner.invoke(app, ["infer", str(csv_file)])
        assert result.exit_code == 0, result.output
        assert "people.csv" in result.output
        assert "DECIMAL(4,2)" in result.output
        assert "STRING(5)" in result.output

    def test_culture_and_separator(self, tmp_path):
        """Test a German file with semicolon separators."""
        path = tmp_path / "de.csv"
        path.write_text("betrag;aktiv\n1.234,5;ja\n2,25;nein\n")
        result = runner.invoke(
            app, ["infer", str(path), "--culture", "de-DE", "--sep", ";", "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["betrag"]["type"] == "DECIMAL"
        assert data["betrag"]["integer_digits"] == 4
        assert data["aktiv"]["type"] == "BOOLEAN"

    def test_char_bool(self, tmp_path):
        """Test the single letter boolean flag."""
        path = tmp_path / "yn.csv"
        path.write_text("answer\nY\nN\n")
        plain = json.loads(runner.invoke(app, ["infer", str(path), "--json"]).output)
        flagged = json.loads(
            runner.invoke(app, ["infer", str(path), "--json", "--char-bool"]).output
        )
        assert plain["answer"]["type"] == "STRING"
        assert flagged["answer"]["type"] == "BOOLEAN"

    def test_compact_dates(self, tmp_path):
        """Test the compact date flag."""
        path = tmp_path / "dates.csv"
        path.write_text("day\n20240115\n20231231\n")
        result = runner.invoke(app, ["infer", str(path), "--json", "--compact-dates"])
        assert json.loads(result.output)["day"]["type"] == "DATETIME"

    def test_unknown_culture(self, csv_file):
        """Test that an unknown culture exits with an error."""
        result = runner.invoke(app, ["infer", str(csv_file), "--culture", "xx-XX"])
        assert result.exit_code == 1
        assert "Unknown culture" in result.output

    def test_missing_file(self, tmp_path):
        """Test that a missing file is rejected by argument validation."""
        result = runner.invoke(app, ["infer", str(tmp_path / "nope.csv")])
        assert result.exit_code != 0


class TestCultures:
    """Tests for the cultures command."""

    def test_table(self):
        """Test the culture listing."""
        result = runner.invoke(app, ["cultures"])
        assert result.exit_code == 0, result.output
        assert "de-DE" in result.output
        assert "fr-FR" in result.output

    def test_json(self):
        """Test the JSON culture listing."""
        result = runner.invoke(app, ["cultures", "--json"])
        data = json.loads(result.output)
        german = next(c for c in data if c["name"] == "de-DE")
        assert german["decimal_separator"] == ","
        assert german["date_order"] == "DMY"
