from __future__ import annotations

import unicodedata
from typing import Tuple

from .models import CaseError, PunctuationError
from .textutils import is_letter


def analyze_punctuation_and_case(
    reference_word: str | None, student_word: str | None
) -> Tuple[PunctuationError, CaseError]:
    """
    Compare leading capitalisation and trailing punctuation of two raw words.

    Only the first and last characters are inspected, independently of
    whether the letters in between match.
    """
    if not reference_word or not student_word:
        return PunctuationError.NONE, CaseError.NONE
    # Compose accents so a trailing combining mark is not read as punctuation.
    reference_word = unicodedata.normalize("NFC", reference_word)
    student_word = unicodedata.normalize("NFC", student_word)
    return (
        _punctuation_error(reference_word[-1], student_word[-1]),
        _case_error(reference_word[0], student_word[0]),
    )


def _case_error(reference_first: str, student_first: str) -> CaseError:
    if not (is_letter(reference_first) and is_letter(student_first)):
        return CaseError.NONE
    reference_upper = reference_first.isupper()
    student_upper = student_first.isupper()
    if reference_upper and not student_upper:
        return CaseError.MISSING_CAP
    if student_upper and not reference_upper:
        return CaseError.WRONG_CAP
    return CaseError.NONE


def _punctuation_error(reference_last: str, student_last: str) -> PunctuationError:
    reference_punct = not is_letter(reference_last)
    student_punct = not is_letter(student_last)
    if reference_punct:
        if not student_punct:
            return PunctuationError.MISSING
        if reference_last != student_last:
            return PunctuationError.WRONG_SYMBOL
        return PunctuationError.NONE
    if student_punct:
        return PunctuationError.INSERTED
    return PunctuationError.NONE
