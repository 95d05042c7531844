"""
Classification metrics over actual/predicted category pairs.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Set

from .models import AnnotatedPair


@dataclass
class EvaluationMetrics:
    """Aggregate scores of an evaluation run."""
    accuracy: float
    precision: float
    recall: float
    f1: float
    num_pairs: int

    def to_dict(self):
        return {
            "accuracy": self.accuracy,
            "precision": self.precision,
            "recall": self.recall,
            "f1": self.f1,
            "num_pairs": self.num_pairs
        }


def compute_metrics(
    pairs: Iterable[AnnotatedPair],
    ignore_labels: Optional[Set[str]] = None
) -> EvaluationMetrics:
    """
    Compute accuracy and macro-averaged precision, recall and F1.

    Pairs in which both the actual and the predicted label are ignored are
    left out entirely. Ignored labels get no per-label score of their own.

    Args:
        pairs: Actual/predicted pairs
        ignore_labels: Labels to exclude from scoring

    Returns:
        EvaluationMetrics; all scores are 0.0 when no pair is scored
    """
    ignored = ignore_labels or set()

    true_positives: Counter = Counter()
    false_positives: Counter = Counter()
    false_negatives: Counter = Counter()
    labels: Set[str] = set()
    correct = 0
    total = 0

    for pair in pairs:
        if pair.actual in ignored and pair.predicted in ignored:
            continue

        total += 1
        for label in (pair.actual, pair.predicted):
            if label not in ignored:
                labels.add(label)

        if pair.actual == pair.predicted:
            correct += 1
            true_positives[pair.actual] += 1
        else:
            false_positives[pair.predicted] += 1
            false_negatives[pair.actual] += 1

    if total == 0 or not labels:
        return EvaluationMetrics(0.0, 0.0, 0.0, 0.0, total)

    precisions = []
    recalls = []
    f1_scores = []
    for label in sorted(labels):
        tp = true_positives[label]
        precision = _ratio(tp, tp + false_positives[label])
        recall = _ratio(tp, tp + false_negatives[label])
        precisions.append(precision)
        recalls.append(recall)
        f1_scores.append(_ratio(2 * precision * recall, precision + recall))

    return EvaluationMetrics(
        accuracy=correct / total,
        precision=sum(precisions) / len(labels),
        recall=sum(recalls) / len(labels),
        f1=sum(f1_scores) / len(labels),
        num_pairs=total
    )


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0
