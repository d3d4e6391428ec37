from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .alignment import align
from .config import MAX_SCORE, WORD_SUBSTITUTION_THRESHOLD
from .letters import analyze_word, count_letter_errors
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
from .textutils import normalize_for_comparison

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _Totals:
    correct_words: int = 0
    omitted_words: int = 0
    extra_words: int = 0
    letters_correct: int = 0
    letters_omitted: int = 0
    letters_inserted: int = 0
    letters_substituted: int = 0
    letters_transposed: int = 0
    punctuation_errors: int = 0
    case_errors: int = 0
    word_joins: int = 0
    word_splits: int = 0
    word_substitutions: int = 0
    details: List[WordAnalysisResult] = field(default_factory=list)


def evaluate(reference_text: str, student_text: str) -> EvaluationMetrics:
    """Evaluate a student's dictation against the reference sentence."""
    pairs = align(reference_text, student_text)
    if not pairs:
        # Nothing was dictated and nothing was typed.
        return EvaluationMetrics(accuracy_percentage=MAX_SCORE)

    totals = _Totals()
    for pair in pairs:
        totals.details.append(_analyze_pair(pair, totals))

    metrics = EvaluationMetrics(
        total_words=sum(1 for pair in pairs if pair.reference_word is not None),
        correct_words=totals.correct_words,
        omitted_words=totals.omitted_words,
        extra_words=totals.extra_words,
        total_letters_correct=totals.letters_correct,
        total_letters_omitted=totals.letters_omitted,
        total_letters_inserted=totals.letters_inserted,
        total_letters_substituted=totals.letters_substituted,
        total_letters_transposed=totals.letters_transposed // 2,
        total_punctuation_errors=totals.punctuation_errors,
        total_case_errors=totals.case_errors,
        total_word_joins=totals.word_joins,
        total_word_splits=totals.word_splits,
        total_word_substitutions=totals.word_substitutions,
        word_details=totals.details,
    )
    metrics.accuracy_percentage = calculate_score(metrics)
    LOGGER.debug(
        "Evaluated dictation: %d words, %d correct, accuracy %d%%",
        metrics.total_words,
        metrics.correct_words,
        metrics.accuracy_percentage,
    )
    return metrics


def _analyze_pair(pair: AlignedPair, totals: _Totals) -> WordAnalysisResult:
    if pair.reference_word is None:
        totals.extra_words += 1
        return WordAnalysisResult(
            reference_word=None,
            student_word=pair.student_word,
            clean_reference="",
            clean_student=normalize_for_comparison(pair.student_word),
            status=WordStatus.EXTRA,
            error_types=[ErrorType.EXTRA_WORD],
        )

    if pair.student_word is None:
        totals.omitted_words += 1
        return WordAnalysisResult(
            reference_word=pair.reference_word,
            student_word=None,
            clean_reference=normalize_for_comparison(pair.reference_word),
            clean_student="",
            status=WordStatus.MISSING,
            error_types=[ErrorType.MISSING_WORD],
        )

    clean_reference = normalize_for_comparison(pair.reference_word)
    clean_student = normalize_for_comparison(pair.student_word)
    error_types: List[ErrorType] = []
    letter_details: List[LetterDetail] = []

    if pair.is_join or pair.is_split:
        # Structural errors are reported on their own, without letter noise.
        if pair.is_join:
            error_types.append(ErrorType.MERGE_WORD_ERROR)
            totals.word_joins += 1
        if pair.is_split:
            error_types.append(ErrorType.SPLIT_WORD_ERROR)
            totals.word_splits += 1
    else:
        letter_details = analyze_word(clean_reference, clean_student)
        if count_letter_errors(letter_details) > WORD_SUBSTITUTION_THRESHOLD:
            error_types.append(ErrorType.SUBSTITUTION_WORD)
            totals.word_substitutions += 1
            letter_details = []
        else:
            _tally_letters(letter_details, error_types, totals)

    punctuation_error, case_error = analyze_punctuation_and_case(
        pair.reference_word, pair.student_word
    )
    if punctuation_error is not PunctuationError.NONE:
        totals.punctuation_errors += 1
    if case_error is not CaseError.NONE:
        totals.case_errors += 1

    # Punctuation and case alone never make a word wrong.
    if error_types:
        status = WordStatus.WRONG
    else:
        status = WordStatus.CORRECT
        totals.correct_words += 1

    return WordAnalysisResult(
        reference_word=pair.reference_word,
        student_word=pair.student_word,
        clean_reference=clean_reference,
        clean_student=clean_student,
        status=status,
        letter_details=letter_details,
        error_types=error_types,
        punctuation_error=punctuation_error,
        case_error=case_error,
    )


def _tally_letters(
    details: List[LetterDetail], error_types: List[ErrorType], totals: _Totals
) -> None:
    for detail in details:
        kind = detail.kind
        if kind is ErrorType.CORRECT:
            totals.letters_correct += 1
            continue
        if kind is ErrorType.OMISSION_LETTER:
            totals.letters_omitted += 1
        elif kind is ErrorType.INSERTION_LETTER:
            totals.letters_inserted += 1
        elif kind is ErrorType.SUBSTITUTION_LETTER:
            totals.letters_substituted += 1
        elif kind is ErrorType.TRANSPOSITION_LETTER:
            totals.letters_transposed += 1
        if kind not in error_types:
            error_types.append(kind)
