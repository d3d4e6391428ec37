from __future__ import annotations

import math

from .config import (
    CASE_PENALTY_FACTOR,
    LONG_WORD_ERROR_FACTOR,
    MAX_SCORE,
    PUNCTUATION_PENALTY,
    SHORT_WORD_MAX_LENGTH,
    WORD_VALUE_POOL,
    WORD_VALUE_PRECISION,
)
from .models import (
    CaseError,
    ErrorType,
    EvaluationMetrics,
    WordAnalysisResult,
    WordStatus,
)


def calculate_score(metrics: EvaluationMetrics) -> int:
    """
    Reduce aggregated evaluation counts to a 0-100 accuracy score.

    Every reference word is worth ``n = 95 / total_words`` points. Punctuation
    errors cost a flat amount; word-level problems cost at most ``n`` each.
    """
    if metrics.total_words == 0:
        return 0

    n = word_value(metrics.total_words)
    score = float(MAX_SCORE)
    score -= PUNCTUATION_PENALTY * metrics.total_punctuation_errors

    for word in metrics.word_details:
        if word.status in (WordStatus.MISSING, WordStatus.EXTRA):
            continue
        score -= word_penalty(word, n)

    score -= n * (metrics.omitted_words + metrics.extra_words)

    clamped = min(float(MAX_SCORE), max(0.0, score))
    return int(math.floor(clamped + 0.5))


def word_value(total_words: int) -> float:
    """Points carried by each reference word."""
    if total_words <= 0:
        return 0.0
    return round(WORD_VALUE_POOL / total_words, WORD_VALUE_PRECISION)


def word_penalty(word: WordAnalysisResult, n: float) -> float:
    """Penalty for an aligned word, capped at the word's value ``n``."""
    if ErrorType.SUBSTITUTION_WORD in word.error_types:
        return n

    penalty = 0.0
    if word.case_error is not CaseError.NONE:
        penalty += CASE_PENALTY_FACTOR * n

    rate = n if len(word.clean_reference) <= SHORT_WORD_MAX_LENGTH else LONG_WORD_ERROR_FACTOR * n
    penalty += error_units(word) * rate
    return min(penalty, n)


def error_units(word: WordAnalysisResult) -> int:
    """Letter errors plus structural tags; a swapped pair of letters is one unit."""
    transposed = 0
    units = 0
    for detail in word.letter_details:
        if detail.kind is ErrorType.TRANSPOSITION_LETTER:
            transposed += 1
        elif detail.kind.is_letter_error:
            units += 1
    units += transposed // 2
    if ErrorType.MERGE_WORD_ERROR in word.error_types:
        units += 1
    if ErrorType.SPLIT_WORD_ERROR in word.error_types:
        units += 1
    return units
