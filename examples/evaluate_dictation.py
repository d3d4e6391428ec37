"""Minimal example showing how a host application calls the evaluation engine."""

from __future__ import annotations

import json

from dictation_evaluator import WordStatus, evaluate
from dictation_evaluator.reporting import build_metrics_row


def main() -> None:
    metrics = evaluate("O menino foi a casa da avó.", "o menino foi acasa da avo")
    for word in metrics.word_details:
        if word.status is WordStatus.CORRECT:
            continue
        labels = ", ".join(error.label for error in word.error_types)
        print(f"{word.reference_word!r} -> {word.student_word!r}: {labels}")
    print(json.dumps(build_metrics_row(metrics), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
