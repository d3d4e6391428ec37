from __future__ import annotations

import json
from pathlib import Path

import yaml


def write_exercise_file(path: Path, exercises: list[dict[str, str]]) -> Path:
    """Write exercises as JSON or YAML depending on the path suffix."""
    if path.suffix == ".json":
        path.write_text(json.dumps(exercises, ensure_ascii=False), encoding="utf-8")
    else:
        path.write_text(
            yaml.safe_dump({"exercises": exercises}, allow_unicode=True),
            encoding="utf-8",
        )
    return path


SAMPLE_EXERCISES = [
    {"id": "ex-1", "reference": "O gato dorme.", "student": "O gatto dorme"},
    {"id": "ex-2", "reference": "Vou a casa.", "student": "Vou acasa."},
    {"id": "ex-3", "reference": "A menina canta.", "student": "A menina canta."},
]
