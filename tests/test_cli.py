"""Tests for the click command-line interface."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

import pytest
from click.testing import CliRunner

from ngram_bayes.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any handlers the CLI's logging setup attaches."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestClassifyCommand:
    """Tests for ``ngram-bayes classify``."""

    def test_json_one_shot(self, runner: CliRunner, training_file: Path) -> None:
        result = runner.invoke(
            main, ["classify", "--training", str(training_file), "-o", "json", "I love it"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["predicted_label"] == "positive"
        assert set(data["scores"]) == {"positive", "negative"}

    def test_rich_one_shot(self, runner: CliRunner, training_file: Path) -> None:
        result = runner.invoke(main, ["classify", "-t", str(training_file), "awful film"])
        assert result.exit_code == 0, result.output
        assert "Predicted: negative" in result.output
        assert "positive" in result.output

    def test_reads_single_line_from_stdin(self, runner: CliRunner, training_file: Path) -> None:
        result = runner.invoke(
            main,
            ["classify", "-t", str(training_file), "-o", "json"],
            input="terrible awful movie\nI love this\n",
        )
        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["predicted_label"] == "negative"

    def test_interactive_until_exit(self, runner: CliRunner, training_file: Path) -> None:
        result = runner.invoke(
            main,
            ["classify", "-t", str(training_file), "-i", "-o", "json"],
            input="I love this\n\nterrible film\nexit\nI love this\n",
        )
        assert result.exit_code == 0, result.output
        labels = [json.loads(line)["predicted_label"] for line in result.output.splitlines()]
        assert labels == ["positive", "negative"]

    def test_interactive_until_eof(self, runner: CliRunner, training_file: Path) -> None:
        result = runner.invoke(
            main, ["classify", "-t", str(training_file), "-i"], input="great film\n"
        )
        assert result.exit_code == 0, result.output
        assert "Interactive mode is active" in result.output
        assert "Predicted: positive" in result.output

    def test_ngram_size_override(self, runner: CliRunner, training_file: Path) -> None:
        result = runner.invoke(
            main, ["classify", "-t", str(training_file), "-n", "2", "-o", "json", "I love this"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["predicted_label"] == "positive"

    def test_missing_training_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            main, ["classify", "-t", str(tmp_path / "missing.json"), "hello"]
        )
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_empty_training_set(self, runner: CliRunner, tmp_path: Path) -> None:
        file = tmp_path / "empty.json"
        file.write_text(json.dumps({"samples": []}), encoding="utf-8")
        result = runner.invoke(main, ["classify", "-t", str(file), "hello"])
        assert result.exit_code == 1
        assert "no samples" in result.output

    def test_verbose_flag(self, runner: CliRunner, training_file: Path) -> None:
        result = runner.invoke(
            main, ["-v", "classify", "-t", str(training_file), "-o", "json", "love"]
        )
        assert result.exit_code == 0, result.output

    def test_non_finite_smoothing_override(
        self, runner: CliRunner, training_file: Path
    ) -> None:
        result = runner.invoke(
            main, ["classify", "-t", str(training_file), "-s", "nan", "-o", "json", "love"]
        )
        assert result.exit_code == 0, result.output
        scores = json.loads(result.output)["scores"]
        assert all(math.isfinite(s) for s in scores.values())


class TestStatsCommand:
    """Tests for ``ngram-bayes stats``."""

    def test_stats(self, runner: CliRunner, training_file: Path) -> None:
        result = runner.invoke(main, ["stats", "-t", str(training_file)])
        assert result.exit_code == 0, result.output
        assert "positive" in result.output
        assert "negative" in result.output
        assert "documents: 6" in result.output
        assert "n-gram size: 1" in result.output
