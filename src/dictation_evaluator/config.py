from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

# Word alignment costs.
GAP_COST = 1.0
STRUCTURAL_COST = 0.0
SIMILAR_SUBSTITUTION_COST = 0.6
# Kept below 2 * GAP_COST so aligned but dissimilar words still pair up.
DISSIMILAR_SUBSTITUTION_COST = 1.2
SIMILAR_DISTANCE = 2
SIMILAR_DISTANCE_LONG = 3
LONG_WORD_MIN_LENGTH = 4

# More non-correct letters than this and the word is reported as substituted.
WORD_SUBSTITUTION_THRESHOLD = 2

# Scoring rubric.
MAX_SCORE = 100
WORD_VALUE_POOL = 95
WORD_VALUE_PRECISION = 3
PUNCTUATION_PENALTY = 5
CASE_PENALTY_FACTOR = 0.1
SHORT_WORD_MAX_LENGTH = 3
LONG_WORD_ERROR_FACTOR = 0.4

# Feedback bands.
HIGH_ACCURACY = 90
MEDIUM_ACCURACY = 70


@dataclass(slots=True)
class ReportSettings:
    """Controls how evaluation reports are rendered by the CLI."""

    include_letter_details: bool = True
    include_clean_forms: bool = True
    indent: int = 2

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the settings."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> ReportSettings:
    """Build ReportSettings from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return ReportSettings()
    allowed = {field.name for field in fields(ReportSettings)}
    return ReportSettings(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> ReportSettings:
    """Load report settings from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReportSettings:
    """Load settings from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReportSettings()
    return config_from_yaml(path)
