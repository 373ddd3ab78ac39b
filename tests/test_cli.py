"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from gaussian_bayes.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def with_data_dir(monkeypatch, data_dir: Path) -> Path:
    monkeypatch.setenv("GAUSSIAN_BAYES_DATA_DIR", str(data_dir))
    return data_dir


class TestMenu:
    """Interactive dataset selection."""

    def test_iris_choice(self, runner, with_data_dir):
        result = runner.invoke(main, ["menu"], input="1\n")
        assert result.exit_code == 0, result.output
        assert "1. Iris Dataset" in result.output
        assert "2. Banknote Dataset" in result.output
        assert "Accuracy: 100.00% - 12/12 correctly classified" in result.output

    def test_banknote_choice(self, runner, with_data_dir):
        result = runner.invoke(main, ["menu"], input="2\n")
        assert result.exit_code == 0, result.output
        assert "correctly classified" in result.output
        assert "/8 " in result.output

    def test_invalid_choice_reprompts(self, runner, with_data_dir):
        result = runner.invoke(main, ["menu"], input="7\n1\n")
        assert result.exit_code == 0, result.output
        assert "12/12 correctly classified" in result.output

    def test_bundled_iris_without_data_dir(self, runner):
        result = runner.invoke(main, ["menu"], input="1\n")
        assert result.exit_code == 0, result.output
        assert "/150 correctly classified" in result.output

    def test_unbundled_banknote_points_at_data_dir(self, runner):
        result = runner.invoke(main, ["menu"], input="2\n")
        assert result.exit_code == 1
        assert "GAUSSIAN_BAYES_DATA_DIR" in result.output

    def test_missing_dataset_file(self, runner, monkeypatch, tmp_path):
        monkeypatch.setenv("GAUSSIAN_BAYES_DATA_DIR", str(tmp_path / "empty"))
        result = runner.invoke(main, ["menu"], input="1\n")
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestEvaluate:
    def test_accuracy_line(self, runner, flowers_file):
        result = runner.invoke(main, ["evaluate", str(flowers_file)])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "Accuracy: 100.00% - 12/12 correctly classified"

    def test_detailed(self, runner, flowers_file):
        result = runner.invoke(main, ["evaluate", str(flowers_file), "--detailed"])
        assert result.exit_code == 0, result.output
        assert "Iris-versicolor" in result.output
        assert "Macro F1" in result.output

    def test_json_output(self, runner, flowers_file):
        result = runner.invoke(main, ["evaluate", str(flowers_file), "-o", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["accuracy"]["correct"] == 12
        assert len(data["summaries"]) == 3

    def test_separate_test_file(self, runner, flowers_file, tmp_path):
        test_file = tmp_path / "holdout.csv"
        test_file.write_text("a,b,c,d,species\n6.5,3.0,5.8,2.2,Iris-virginica\n")
        result = runner.invoke(main, ["evaluate", str(flowers_file), "--test", str(test_file)])
        assert result.exit_code == 0, result.output
        assert "1/1 correctly classified" in result.output

    def test_strict_flag_reports_error(self, runner, tmp_path):
        file = tmp_path / "tiny.csv"
        file.write_text("x,label\n1.0,a\n1.2,a\n9.0,b\n")
        result = runner.invoke(main, ["evaluate", str(file), "--strict"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_strict_from_environment(self, runner, monkeypatch, tmp_path):
        monkeypatch.setenv("GAUSSIAN_BAYES_STRICT", "1")
        file = tmp_path / "tiny.csv"
        file.write_text("x,label\n1.0,a\n1.2,a\n9.0,b\n")
        result = runner.invoke(main, ["evaluate", str(file)])
        assert result.exit_code == 1

    def test_missing_file_is_usage_error(self, runner, tmp_path):
        result = runner.invoke(main, ["evaluate", str(tmp_path / "missing.csv")])
        assert result.exit_code == 2

    def test_bad_setting_fails(self, runner, monkeypatch, flowers_file):
        monkeypatch.setenv("GAUSSIAN_BAYES_LOG_LEVEL", "LOUD")
        result = runner.invoke(main, ["evaluate", str(flowers_file)])
        assert result.exit_code == 1
        assert "GAUSSIAN_BAYES_LOG_LEVEL" in result.output


class TestSummarize:
    def test_rich_tables(self, runner, flowers_file):
        result = runner.invoke(main, ["summarize", str(flowers_file)])
        assert result.exit_code == 0, result.output
        assert "Iris-setosa (4 rows)" in result.output
        assert "petal_length" in result.output
        assert "1.3750" in result.output

    def test_json(self, runner, flowers_file):
        result = runner.invoke(main, ["summarize", str(flowers_file), "-o", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["dataset"] == "iris"
        assert [c["name"] for c in data["classes"]] == [
            "Iris-setosa", "Iris-versicolor", "Iris-virginica",
        ]


class TestDatasets:
    def test_lists_builtins(self, runner, with_data_dir):
        result = runner.invoke(main, ["datasets"])
        assert result.exit_code == 0, result.output
        assert "iris" in result.output
        assert "banknote" in result.output
        assert "yes" in result.output
