from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping

import yaml

LOGGER = logging.getLogger(__name__)

SUPPORTED_BATCH_EXTENSIONS = {".yaml", ".yml", ".json"}


class BatchFileError(ValueError):
    """Raised when an exercise batch file cannot be read."""


@dataclass(slots=True)
class Exercise:
    """A reference sentence paired with what the student typed."""

    exercise_id: str
    reference: str
    student: str


def load_exercises(path: Path) -> List[Exercise]:
    """Read a YAML or JSON list of ``{id, reference, student}`` entries."""
    if not path.is_file():
        raise BatchFileError(f"Exercise file not found: {path}")
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_BATCH_EXTENSIONS:
        raise BatchFileError(f"Unsupported exercise file type: {path.suffix}")

    contents = path.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            parsed = json.loads(contents)
        else:
            parsed = yaml.safe_load(contents)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise BatchFileError(f"Unable to parse {path}: {exc}") from exc

    if isinstance(parsed, Mapping):
        parsed = parsed.get("exercises")
    if not isinstance(parsed, list):
        raise BatchFileError(f"{path} must contain a list of exercises.")

    exercises: List[Exercise] = []
    for index, entry in enumerate(parsed):
        exercise = _exercise_from_entry(entry, index)
        if exercise is None:
            LOGGER.warning("Skipping entry %d in %s: missing reference text.", index, path)
            continue
        exercises.append(exercise)
    LOGGER.info("Loaded %d exercises from %s", len(exercises), path)
    return exercises


def _exercise_from_entry(entry: Any, index: int) -> Exercise | None:
    if not isinstance(entry, Mapping) or "reference" not in entry:
        return None
    student = entry.get("student")
    return Exercise(
        exercise_id=str(entry.get("id", index)),
        reference=str(entry["reference"]),
        student="" if student is None else str(student),
    )
