from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import typer
import yaml

from .config import ReportSettings, load_config
from .evaluator import evaluate
from .exercises import BatchFileError, load_exercises
from .reporting import build_metrics_row, metrics_to_dict

app = typer.Typer(help="Dictation evaluation CLI.", no_args_is_help=True)


@app.command("evaluate")
def evaluate_command(
    reference: str = typer.Option(..., "--reference", "-r", help="Dictated sentence."),
    student: str = typer.Option("", "--student", "-s", help="What the student typed."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    row: bool = typer.Option(
        False, "--row/--no-row", help="Emit the flattened persistence row instead."
    ),
) -> None:
    """Evaluate a single dictation and print the JSON report."""
    settings = load_config(config)
    metrics = evaluate(reference, student)
    if row:
        payload: Dict[str, Any] = dict(build_metrics_row(metrics, resolution=student))
    else:
        payload = metrics_to_dict(metrics, settings)
    typer.echo(json.dumps(payload, indent=settings.indent, ensure_ascii=False))


@app.command()
def batch(
    input_path: Path = typer.Option(..., exists=True, readable=True, dir_okay=False),
    output_path: Path | None = typer.Option(None, dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Evaluate every exercise listed in a YAML or JSON file."""
    settings = load_config(config)
    try:
        exercises = load_exercises(input_path)
    except BatchFileError as exc:
        raise typer.BadParameter(str(exc)) from exc

    results: List[Dict[str, Any]] = []
    for exercise in exercises:
        metrics = evaluate(exercise.reference, exercise.student)
        results.append(
            {
                "id": exercise.exercise_id,
                "report": metrics_to_dict(metrics, settings),
                "row": build_metrics_row(metrics, resolution=exercise.student),
            }
        )

    rendered = json.dumps({"exercises": results}, indent=settings.indent, ensure_ascii=False)
    if output_path is None:
        typer.echo(rendered)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered, encoding="utf-8")
    typer.echo(f"Wrote {len(results)} evaluations to {output_path}")


@app.command("print-config")
def print_config() -> None:
    """Print the default report settings as YAML."""
    typer.echo(yaml.safe_dump(ReportSettings().to_dict(), sort_keys=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
