"""Word-level alignment between a reference sentence and a student transcription."""
from __future__ import annotations

from typing import List, Sequence

from rapidfuzz.distance import Levenshtein

from .config import (
    DISSIMILAR_SUBSTITUTION_COST,
    GAP_COST,
    LONG_WORD_MIN_LENGTH,
    SIMILAR_DISTANCE,
    SIMILAR_DISTANCE_LONG,
    SIMILAR_SUBSTITUTION_COST,
    STRUCTURAL_COST,
)
from .models import AlignedPair
from .textutils import normalize_for_comparison, split_words

MATCH = "match"
DELETE = "delete"
INSERT = "insert"
JOIN = "join"
SPLIT = "split"


def align(reference_text: str, student_text: str) -> List[AlignedPair]:
    """
    Align reference words against student words.

    Besides match/substitute, delete and insert, the alignment recognises a
    JOIN (two reference words typed as one student token) and a SPLIT (one
    reference word typed as two student tokens). Returns the pairs in
    left-to-right order.
    """
    reference = split_words(reference_text)
    student = split_words(student_text)

    if not reference or not student:
        return [AlignedPair(reference_word=word, student_word=None) for word in reference] + [
            AlignedPair(reference_word=None, student_word=word) for word in student
        ]

    moves = _fill_moves(
        [normalize_for_comparison(word) for word in reference],
        [normalize_for_comparison(word) for word in student],
    )
    return _backtrack(reference, student, moves)


def word_distance(first: str, second: str) -> int:
    """Single-character Levenshtein distance between two words."""
    return Levenshtein.distance(first, second)


def substitution_cost(reference_word: str, student_word: str) -> float:
    """Cost of aligning two normalized words against each other."""
    distance = word_distance(reference_word, student_word)
    if distance == 0:
        return 0.0
    if distance <= SIMILAR_DISTANCE or (
        len(reference_word) >= LONG_WORD_MIN_LENGTH and distance <= SIMILAR_DISTANCE_LONG
    ):
        return SIMILAR_SUBSTITUTION_COST
    return DISSIMILAR_SUBSTITUTION_COST


def _fill_moves(reference: Sequence[str], student: Sequence[str]) -> List[List[str]]:
    rows, cols = len(reference), len(student)
    cost = [[0.0] * (cols + 1) for _ in range(rows + 1)]
    moves = [[MATCH] * (cols + 1) for _ in range(rows + 1)]

    for i in range(1, rows + 1):
        cost[i][0] = i * GAP_COST
        moves[i][0] = DELETE
    for j in range(1, cols + 1):
        cost[0][j] = j * GAP_COST
        moves[0][j] = INSERT

    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            ref_word = reference[i - 1]
            stu_word = student[j - 1]

            # Candidates in tie-break order; later ones win only when strictly cheaper.
            best_cost = cost[i - 1][j - 1] + substitution_cost(ref_word, stu_word)
            best_move = MATCH
            if cost[i - 1][j] + GAP_COST < best_cost:
                best_cost, best_move = cost[i - 1][j] + GAP_COST, DELETE
            if cost[i][j - 1] + GAP_COST < best_cost:
                best_cost, best_move = cost[i][j - 1] + GAP_COST, INSERT
            if i >= 2 and _concatenates(reference[i - 2], ref_word, stu_word):
                if cost[i - 2][j - 1] + STRUCTURAL_COST < best_cost:
                    best_cost, best_move = cost[i - 2][j - 1] + STRUCTURAL_COST, JOIN
            if j >= 2 and _concatenates(student[j - 2], stu_word, ref_word):
                if cost[i - 1][j - 2] + STRUCTURAL_COST < best_cost:
                    best_cost, best_move = cost[i - 1][j - 2] + STRUCTURAL_COST, SPLIT

            cost[i][j] = best_cost
            moves[i][j] = best_move

    return moves


def _concatenates(first: str, second: str, whole: str) -> bool:
    # Empty parts come from punctuation-only tokens and never form a join/split.
    return bool(first) and bool(second) and first + second == whole


def _backtrack(
    reference: Sequence[str], student: Sequence[str], moves: List[List[str]]
) -> List[AlignedPair]:
    pairs: List[AlignedPair] = []
    i, j = len(reference), len(student)

    while i > 0 or j > 0:
        move = moves[i][j]
        if move == MATCH:
            pairs.append(AlignedPair(reference[i - 1], student[j - 1]))
            i -= 1
            j -= 1
        elif move == DELETE:
            pairs.append(AlignedPair(reference[i - 1], None))
            i -= 1
        elif move == INSERT:
            pairs.append(AlignedPair(None, student[j - 1]))
            j -= 1
        elif move == JOIN:
            pairs.append(
                AlignedPair(f"{reference[i - 2]} {reference[i - 1]}", student[j - 1], is_join=True)
            )
            i -= 2
            j -= 1
        else:
            pairs.append(
                AlignedPair(reference[i - 1], f"{student[j - 2]} {student[j - 1]}", is_split=True)
            )
            i -= 1
            j -= 2

    pairs.reverse()
    return pairs
