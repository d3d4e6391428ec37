import json
from pathlib import Path

from typer.testing import CliRunner

from dictation_evaluator.cli import app
from tests.utils import SAMPLE_EXERCISES, write_exercise_file

runner = CliRunner()


def test_cli_evaluate_outputs_report():
    """evaluate command prints the JSON report for one dictation."""
    result = runner.invoke(
        app, ["evaluate", "--reference", "O gato dorme.", "--student", "O gatto dorme"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["accuracy_percentage"] == 82
    assert len(payload["word_details"]) == 3


def test_cli_evaluate_row_output():
    """--row prints the flattened persistence row."""
    result = runner.invoke(
        app, ["evaluate", "-r", "O gato", "-s", "O cão", "--row"]
    )
    assert result.exit_code == 0
    row = json.loads(result.stdout)
    assert row["error_count"] == 1
    assert row["error_words"] == ["gato"]
    assert row["resolution"] == "O cão"


def test_cli_evaluate_uses_config(tmp_path: Path):
    config_path = tmp_path / "report.yaml"
    config_path.write_text("include_letter_details: false\n", encoding="utf-8")
    result = runner.invoke(
        app, ["evaluate", "-r", "O gato", "-s", "O gato", "--config", str(config_path)]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert "letter_details" not in payload["word_details"][0]


def test_cli_batch_prints_summary(tmp_path: Path):
    """batch command evaluates every exercise in a YAML file."""
    path = write_exercise_file(tmp_path / "batch.yaml", SAMPLE_EXERCISES)
    result = runner.invoke(app, ["batch", "--input-path", str(path)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    scores = {item["id"]: item["report"]["accuracy_percentage"] for item in payload["exercises"]}
    assert scores == {"ex-1": 82, "ex-2": 81, "ex-3": 100}


def test_cli_batch_writes_output_file(tmp_path: Path):
    path = write_exercise_file(tmp_path / "batch.json", SAMPLE_EXERCISES)
    output_path = tmp_path / "out" / "results.json"
    result = runner.invoke(
        app, ["batch", "--input-path", str(path), "--output-path", str(output_path)]
    )
    assert result.exit_code == 0
    assert output_path.exists()
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["exercises"][1]["row"]["split_join_count"] == 1


def test_cli_batch_rejects_malformed_file(tmp_path: Path):
    path = tmp_path / "batch.yaml"
    path.write_text("just a string\n", encoding="utf-8")
    result = runner.invoke(app, ["batch", "--input-path", str(path)])
    assert result.exit_code != 0


def test_cli_print_config():
    """print-config command dumps the default report settings."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "include_letter_details" in result.stdout
