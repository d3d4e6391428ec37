from __future__ import annotations

from typing import Iterable, List

from .models import ErrorType, LetterDetail


def analyze_word(reference: str, student: str) -> List[LetterDetail]:
    """
    Compare two normalized words letter by letter.

    Uses a Damerau-Levenshtein style table so that two adjacent swapped
    letters are reported as one transposition instead of two substitutions.
    Entries are returned left to right.
    """
    rows, cols = len(reference), len(student)
    dist = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(rows + 1):
        dist[i][0] = i
    for j in range(cols + 1):
        dist[0][j] = j

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            cost = 0 if reference[i - 1] == student[j - 1] else 1
            best = min(
                dist[i - 1][j] + 1,
                dist[i][j - 1] + 1,
                dist[i - 1][j - 1] + cost,
            )
            if _is_swap(reference, student, i, j):
                best = min(best, dist[i - 2][j - 2] + 1)
            dist[i][j] = best

    details: List[LetterDetail] = []
    i, j = rows, cols
    while i > 0 or j > 0:
        if (
            _is_swap(reference, student, i, j)
            and reference[i - 1] != student[j - 1]
            and dist[i][j] == dist[i - 2][j - 2] + 1
        ):
            details.append(
                LetterDetail(i - 1, reference[i - 1], student[j - 1], ErrorType.TRANSPOSITION_LETTER)
            )
            details.append(
                LetterDetail(i - 2, reference[i - 2], student[j - 2], ErrorType.TRANSPOSITION_LETTER)
            )
            i -= 2
            j -= 2
            continue

        if i > 0 and j > 0:
            same = reference[i - 1] == student[j - 1]
            if dist[i][j] == dist[i - 1][j - 1] + (0 if same else 1):
                kind = ErrorType.CORRECT if same else ErrorType.SUBSTITUTION_LETTER
                details.append(LetterDetail(i - 1, reference[i - 1], student[j - 1], kind))
                i -= 1
                j -= 1
                continue

        if i > 0 and dist[i][j] == dist[i - 1][j] + 1:
            details.append(LetterDetail(i - 1, reference[i - 1], None, ErrorType.OMISSION_LETTER))
            i -= 1
        else:
            details.append(LetterDetail(-1, None, student[j - 1], ErrorType.INSERTION_LETTER))
            j -= 1

    details.reverse()
    return details


def count_letter_errors(details: Iterable[LetterDetail]) -> int:
    """Number of entries that are not CORRECT."""
    return sum(1 for detail in details if detail.kind is not ErrorType.CORRECT)


def _is_swap(reference: str, student: str, i: int, j: int) -> bool:
    return (
        i > 1
        and j > 1
        and reference[i - 1] == student[j - 2]
        and reference[i - 2] == student[j - 1]
    )
