"""
Evaluation example: estimate recommender quality on a held-out split.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from doccat_recommender import (
    AnnotatedDocument,
    DoccatRecommender,
    PercentageBasedSplitter,
    RecommenderDescriptor
)
from doccat_recommender.models import SENTENCE_LAYER

LAYER = "custom.DocumentCategory"
FEATURE = "value"

training_data = [
    ("sports", ["the", "striker", "scored", "a", "goal"]),
    ("politics", ["the", "senate", "passed", "the", "bill"]),
    ("sports", ["the", "team", "won", "the", "match"]),
    ("politics", ["voters", "elected", "a", "new", "mayor"]),
    ("sports", ["a", "late", "goal", "won", "the", "cup"]),
    ("politics", ["parliament", "debated", "the", "budget"]),
    ("sports", ["the", "keeper", "saved", "the", "goal"]),
    ("politics", ["the", "senate", "debated", "the", "bill"]),
    ("sports", ["fans", "cheered", "the", "team"]),
    ("politics", ["the", "mayor", "announced", "a", "budget"]),
] * 2

document = AnnotatedDocument.from_sentences([tokens for _, tokens in training_data])
for sentence, (label, _) in zip(document.select(SENTENCE_LAYER), training_data):
    document.add_annotation(LAYER, sentence.begin, sentence.end, **{FEATURE: label})

recommender = DoccatRecommender(RecommenderDescriptor(layer_name=LAYER, feature_name=FEATURE))
result = recommender.evaluate([document], PercentageBasedSplitter(0.8))

print(f"Training set size: {result.training_set_size}")
print(f"Test set size: {result.test_set_size}")

if result.skipped:
    print("Not enough data to evaluate")
    sys.exit(0)

metrics = result.compute_metrics()
for name, value in metrics.to_dict().items():
    print(f"   {name}: {value}")
