"""
dictation_evaluator package exports the evaluation engine for library consumers.
"""

from __future__ import annotations

from .alignment import align
from .config import ReportSettings, config_from_dict, config_from_yaml, load_config
from .evaluator import evaluate
from .letters import analyze_word
from .models import (
    AlignedPair,
    CaseError,
    ErrorType,
    EvaluationMetrics,
    LetterDetail,
    PunctuationError,
    WordAnalysisResult,
    WordStatus,
)
from .punctuation import analyze_punctuation_and_case
from .scoring import calculate_score

__all__ = [
    "AlignedPair",
    "CaseError",
    "ErrorType",
    "EvaluationMetrics",
    "LetterDetail",
    "PunctuationError",
    "ReportSettings",
    "WordAnalysisResult",
    "WordStatus",
    "align",
    "analyze_punctuation_and_case",
    "analyze_word",
    "calculate_score",
    "config_from_dict",
    "config_from_yaml",
    "evaluate",
    "load_config",
]

__version__ = "0.1.0"
