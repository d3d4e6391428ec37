import json

from dictation_evaluator.config import ReportSettings
from dictation_evaluator.evaluator import evaluate
from dictation_evaluator.models import ErrorType
from dictation_evaluator.reporting import (
    AccuracyBand,
    accuracy_band,
    build_metrics_row,
    collect_error_words,
    metrics_to_dict,
)


def test_build_metrics_row_flattens_counts():
    metrics = evaluate("O gato dorme.", "O gatto dorme")
    row = build_metrics_row(metrics, resolution="O gatto dorme")

    assert row["correct_count"] == 2
    assert row["error_count"] == 0
    assert row["missing_count"] == 0
    assert row["extra_count"] == 0
    assert row["accuracy_percent"] == 82
    assert row["letter_insertion_count"] == 1
    assert row["punctuation_error_count"] == 1
    assert row["split_join_count"] == 0
    assert row["error_words"] == ["gato"]
    assert row["resolution"] == "O gatto dorme"


def test_collect_error_words_skips_structural_and_case_only_words():
    assert collect_error_words(evaluate("Vou a casa.", "Vou acasa.")) == []
    assert collect_error_words(evaluate("O gato", "o gato")) == []
    assert collect_error_words(evaluate("O gato", "O cão")) == ["gato"]


def test_accuracy_band_thresholds():
    assert accuracy_band(95) is AccuracyBand.HIGH
    assert accuracy_band(90) is AccuracyBand.HIGH
    assert accuracy_band(89) is AccuracyBand.MEDIUM
    assert accuracy_band(70) is AccuracyBand.MEDIUM
    assert accuracy_band(69) is AccuracyBand.LOW


def test_metrics_to_dict_is_json_serializable():
    payload = metrics_to_dict(evaluate("O aluno", "O alnuo"))
    decoded = json.loads(json.dumps(payload))

    word = decoded["word_details"][1]
    assert decoded["accuracy_band"] == "medium"
    assert word["status"] == "wrong"
    assert word["error_types"] == ["transposition_letter"]
    assert word["labels"] == ["troca"]
    assert [d["kind"] for d in word["letter_details"]].count("transposition_letter") == 2


def test_metrics_to_dict_respects_settings():
    settings = ReportSettings(include_letter_details=False, include_clean_forms=False)
    word = metrics_to_dict(evaluate("O gato", "O gato"), settings)["word_details"][0]

    assert "letter_details" not in word
    assert "clean_reference" not in word


def test_error_type_labels():
    assert ErrorType.INSERTION_LETTER.label == "+letra"
    assert ErrorType.MISSING_WORD.label == "palavra em falta"
    assert ErrorType.TRANSPOSITION_LETTER.is_letter_error
    assert not ErrorType.SUBSTITUTION_WORD.is_letter_error
