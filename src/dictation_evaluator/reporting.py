from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, TypedDict

from .config import HIGH_ACCURACY, MEDIUM_ACCURACY, ReportSettings
from .models import (
    EvaluationMetrics,
    LetterDetail,
    WordAnalysisResult,
    WordStatus,
)


class AccuracyBand(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MetricsRow(TypedDict):
    correct_count: int
    error_count: int
    missing_count: int
    extra_count: int
    accuracy_percent: int
    letter_omission_count: int
    letter_insertion_count: int
    letter_substitution_count: int
    transposition_count: int
    split_join_count: int
    punctuation_error_count: int
    capitalization_error_count: int
    error_words: List[str]
    resolution: str


def accuracy_band(score: int) -> AccuracyBand:
    """Bucket an accuracy score the way the feedback view colours it."""
    if score >= HIGH_ACCURACY:
        return AccuracyBand.HIGH
    if score >= MEDIUM_ACCURACY:
        return AccuracyBand.MEDIUM
    return AccuracyBand.LOW


def collect_error_words(metrics: EvaluationMetrics) -> List[str]:
    """
    Reference words the student got wrong, for the review list.

    Join/split structural errors are left out. Capitalisation and
    punctuation mistakes never mark a word wrong, so they are excluded too.
    """
    words: List[str] = []
    for word in metrics.word_details:
        if word.status is not WordStatus.WRONG or not word.reference_word:
            continue
        if word.is_structural:
            continue
        words.append(word.reference_word)
    return words


def build_metrics_row(metrics: EvaluationMetrics, *, resolution: str = "") -> MetricsRow:
    """Flatten an evaluation into the row stored by the host application."""
    return {
        "correct_count": metrics.correct_words,
        "error_count": metrics.total_word_substitutions,
        "missing_count": metrics.omitted_words,
        "extra_count": metrics.extra_words,
        "accuracy_percent": metrics.accuracy_percentage,
        "letter_omission_count": metrics.total_letters_omitted,
        "letter_insertion_count": metrics.total_letters_inserted,
        "letter_substitution_count": metrics.total_letters_substituted,
        "transposition_count": metrics.total_letters_transposed,
        "split_join_count": metrics.total_word_joins + metrics.total_word_splits,
        "punctuation_error_count": metrics.total_punctuation_errors,
        "capitalization_error_count": metrics.total_case_errors,
        "error_words": collect_error_words(metrics),
        "resolution": resolution,
    }


def metrics_to_dict(
    metrics: EvaluationMetrics, settings: ReportSettings | None = None
) -> Dict[str, Any]:
    """Serialize an evaluation into plain JSON-compatible types."""
    settings = settings or ReportSettings()
    return {
        "accuracy_percentage": metrics.accuracy_percentage,
        "accuracy_band": accuracy_band(metrics.accuracy_percentage).value,
        "total_words": metrics.total_words,
        "correct_words": metrics.correct_words,
        "omitted_words": metrics.omitted_words,
        "extra_words": metrics.extra_words,
        "total_letters_correct": metrics.total_letters_correct,
        "total_letters_omitted": metrics.total_letters_omitted,
        "total_letters_inserted": metrics.total_letters_inserted,
        "total_letters_substituted": metrics.total_letters_substituted,
        "total_letters_transposed": metrics.total_letters_transposed,
        "total_punctuation_errors": metrics.total_punctuation_errors,
        "total_case_errors": metrics.total_case_errors,
        "total_word_joins": metrics.total_word_joins,
        "total_word_splits": metrics.total_word_splits,
        "total_word_substitutions": metrics.total_word_substitutions,
        "word_details": [_word_dict(word, settings) for word in metrics.word_details],
    }


def _word_dict(word: WordAnalysisResult, settings: ReportSettings) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "reference_word": word.reference_word,
        "student_word": word.student_word,
        "status": word.status.value,
        "error_types": [error.value for error in word.error_types],
        "labels": [error.label for error in word.error_types],
        "punctuation_error": word.punctuation_error.value,
        "case_error": word.case_error.value,
    }
    if settings.include_clean_forms:
        payload["clean_reference"] = word.clean_reference
        payload["clean_student"] = word.clean_student
    if settings.include_letter_details:
        payload["letter_details"] = [_letter_dict(detail) for detail in word.letter_details]
    return payload


def _letter_dict(detail: LetterDetail) -> Dict[str, Any]:
    return {
        "position": detail.position,
        "reference_char": detail.reference_char,
        "student_char": detail.student_char,
        "kind": detail.kind.value,
    }

