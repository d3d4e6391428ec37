from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ErrorType(str, Enum):
    """Closed set of error tags used at both letter and word level."""

    CORRECT = "correct"
    OMISSION_LETTER = "omission_letter"
    INSERTION_LETTER = "insertion_letter"
    SUBSTITUTION_LETTER = "substitution_letter"
    TRANSPOSITION_LETTER = "transposition_letter"
    SPLIT_WORD_ERROR = "split_word_error"
    MERGE_WORD_ERROR = "merge_word_error"
    SUBSTITUTION_WORD = "substitution_word"
    MISSING_WORD = "missing_word"
    EXTRA_WORD = "extra_word"

    @property
    def label(self) -> str:
        """Short Portuguese label shown next to a word in the feedback view."""
        return _ERROR_LABELS[self]

    @property
    def is_letter_error(self) -> bool:
        return self in _LETTER_ERRORS


_ERROR_LABELS = {
    ErrorType.CORRECT: "correto",
    ErrorType.OMISSION_LETTER: "-letra",
    ErrorType.INSERTION_LETTER: "+letra",
    ErrorType.SUBSTITUTION_LETTER: "letra errada",
    ErrorType.TRANSPOSITION_LETTER: "troca",
    ErrorType.SPLIT_WORD_ERROR: "separação indevida de palavra",
    ErrorType.MERGE_WORD_ERROR: "junção indevida de palavra",
    ErrorType.SUBSTITUTION_WORD: "substituição da palavra correta",
    ErrorType.MISSING_WORD: "palavra em falta",
    ErrorType.EXTRA_WORD: "palavra a mais",
}

_LETTER_ERRORS = frozenset(
    {
        ErrorType.OMISSION_LETTER,
        ErrorType.INSERTION_LETTER,
        ErrorType.SUBSTITUTION_LETTER,
        ErrorType.TRANSPOSITION_LETTER,
    }
)


class WordStatus(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    MISSING = "missing"
    EXTRA = "extra"


class PunctuationError(str, Enum):
    NONE = "none"
    MISSING = "missing"
    INSERTED = "inserted"
    WRONG_SYMBOL = "wrong_symbol"


class CaseError(str, Enum):
    NONE = "none"
    MISSING_CAP = "missing_cap"
    WRONG_CAP = "wrong_cap"


@dataclass(frozen=True, slots=True)
class AlignedPair:
    """
    One step of the word alignment.

    ``reference_word`` is None for an extra student word and ``student_word``
    is None for an omitted reference word. Joined or split tokens are kept
    as the two raw words separated by a single space.
    """

    reference_word: str | None
    student_word: str | None
    is_join: bool = False
    is_split: bool = False


@dataclass(frozen=True, slots=True)
class LetterDetail:
    """Letter-level comparison entry; position is -1 for a pure insertion."""

    position: int
    reference_char: str | None
    student_char: str | None
    kind: ErrorType


@dataclass(slots=True)
class WordAnalysisResult:
    """Per-word feedback produced for one aligned pair."""

    reference_word: str | None
    student_word: str | None
    clean_reference: str
    clean_student: str
    status: WordStatus
    letter_details: list[LetterDetail] = field(default_factory=list)
    error_types: list[ErrorType] = field(default_factory=list)
    punctuation_error: PunctuationError = PunctuationError.NONE
    case_error: CaseError = CaseError.NONE

    @property
    def is_structural(self) -> bool:
        return (
            ErrorType.MERGE_WORD_ERROR in self.error_types
            or ErrorType.SPLIT_WORD_ERROR in self.error_types
        )

    @property
    def letter_error_count(self) -> int:
        return sum(1 for detail in self.letter_details if detail.kind.is_letter_error)


@dataclass(slots=True)
class EvaluationMetrics:
    """Aggregate result of a single dictation evaluation."""

    total_words: int = 0
    correct_words: int = 0
    omitted_words: int = 0
    extra_words: int = 0
    total_letters_correct: int = 0
    total_letters_omitted: int = 0
    total_letters_inserted: int = 0
    total_letters_substituted: int = 0
    total_letters_transposed: int = 0
    total_punctuation_errors: int = 0
    total_case_errors: int = 0
    total_word_joins: int = 0
    total_word_splits: int = 0
    total_word_substitutions: int = 0
    word_details: list[WordAnalysisResult] = field(default_factory=list)
    accuracy_percentage: int = 0
