"""
Basic example: train a document category recommender and predict sentence categories.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from doccat_recommender import (
    AnnotatedDocument,
    DoccatRecommender,
    ModelContext,
    RecommenderDescriptor
)
from doccat_recommender.models import SENTENCE_LAYER

LAYER = "custom.DocumentCategory"
FEATURE = "value"

training_data = [
    ("invoice", ["please", "remit", "payment", "within", "30", "days"]),
    ("invoice", ["payment", "terms", "net", "30"]),
    ("invoice", ["the", "invoice", "total", "is", "due"]),
    ("manual", ["press", "the", "power", "button", "to", "start"]),
    ("manual", ["follow", "these", "steps", "to", "install", "the", "software"]),
    ("manual", ["see", "chapter", "two", "for", "configuration", "steps"]),
]

# Build a training document with one category annotation per sentence
document = AnnotatedDocument.from_sentences([tokens for _, tokens in training_data], name="training")
for sentence, (label, _) in zip(document.select(SENTENCE_LAYER), training_data):
    document.add_annotation(LAYER, sentence.begin, sentence.end, **{FEATURE: label})

recommender = DoccatRecommender(RecommenderDescriptor(layer_name=LAYER, feature_name=FEATURE))
context = ModelContext()
recommender.train(context, [document])

if not recommender.is_ready_for_prediction(context):
    print("Training produced no model")
    sys.exit(1)

unseen = AnnotatedDocument.from_sentences([
    ["payment", "is", "due", "in", "30", "days"],
    ["install", "the", "software", "and", "press", "start"],
], name="unseen")

print("Sentence Category Predictions:")
print("=" * 50)

for prediction in recommender.predict(context, unseen):
    text = unseen.text[prediction.begin:prediction.end]
    print(f"\nText: {text}")
    print(f"   Predicted Category: {prediction.label}")
    print(f"   Confidence: {prediction.confidence:.4f}")
