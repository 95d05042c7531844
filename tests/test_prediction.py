"""
Tests for the prediction engine.
"""

from unittest.mock import MagicMock

import numpy as np
import pytest

from doccat_recommender.context import ModelContext
from doccat_recommender.exceptions import RecommendationError
from doccat_recommender.maxent import MaxentDoccatTrainer
from doccat_recommender.models import (
    LABEL_FEATURE,
    PREDICTION_LAYER,
    SCORE_FEATURE,
    SENTENCE_LAYER,
    AnnotatedDocument,
    Sample,
    TrainingParameters
)
from doccat_recommender.prediction import PredictionEngine
from doccat_recommender.training import KEY_MODEL, TrainingCoordinator

from conftest import CATEGORY_LAYER, POLITICS_SENTENCES, SPORTS_SENTENCES


def make_fake_model():
    """Model that prefers 'long' for sentences with more than two tokens."""
    model = MagicMock()
    model.categorize.side_effect = lambda tokens: (
        np.array([0.9, 0.1]) if len(tokens) > 2 else np.array([0.3, 0.7])
    )
    model.best_category.side_effect = lambda outcome: ["long", "short"][int(np.argmax(outcome))]
    return model


class TestPredictionEngine:
    """Test cases for PredictionEngine class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.context = ModelContext()
        self.context.put(KEY_MODEL, make_fake_model())
        self.context.mark_as_ready_for_prediction()
        self.document = AnnotatedDocument.from_sentences([
            ["one", "two", "three"],
            ["four", "five"],
            ["six", "seven", "eight", "nine"],
            ["ten"],
        ])

    def test_missing_model_raises(self):
        """Test predicting without a trained model fails with RecommendationError."""
        with pytest.raises(RecommendationError, match=r"Key \[model\] not found in context"):
            PredictionEngine(10).predict(ModelContext(), self.document)

    def test_predicts_every_sentence(self):
        """Test one prediction is made per sentence, in order."""
        predictions = PredictionEngine(10).predict(self.context, self.document)
        sentences = self.document.select(SENTENCE_LAYER)

        assert [p.label for p in predictions] == ["long", "short", "long", "short"]
        assert [p.confidence for p in predictions] == [0.9, 0.7, 0.9, 0.7]
        assert [(p.begin, p.end) for p in predictions] == [(s.begin, s.end) for s in sentences]

    def test_predictions_indexed_on_document(self):
        """Test predictions are added to the document's prediction layer."""
        PredictionEngine(10).predict(self.context, self.document)

        annotations = self.document.select(PREDICTION_LAYER)
        assert len(annotations) == 4
        assert annotations[0].features[LABEL_FEATURE] == "long"
        assert annotations[0].features[SCORE_FEATURE] == 0.9

    def test_sentence_tokens_passed_to_model(self):
        """Test the model sees the covered token texts of each sentence."""
        model = self.context.get(KEY_MODEL)
        PredictionEngine(1).predict(self.context, self.document)
        model.categorize.assert_called_once_with(["one", "two", "three"])

    def test_prediction_limit(self):
        """Test only the first sentences up to the limit are predicted."""
        predictions = PredictionEngine(2).predict(self.context, self.document)
        sentences = self.document.select(SENTENCE_LAYER)

        assert len(predictions) == 2
        assert [(p.begin, p.end) for p in predictions] == [(s.begin, s.end) for s in sentences[:2]]
        assert len(self.document.select(PREDICTION_LAYER)) == 2

    def test_zero_limit(self):
        """Test a limit of zero produces no predictions."""
        assert PredictionEngine(0).predict(self.context, self.document) == []

    def test_existing_annotations_untouched(self):
        """Test prediction only adds annotations."""
        sentence = self.document.select(SENTENCE_LAYER)[0]
        existing = self.document.add_annotation(CATEGORY_LAYER, sentence.begin, sentence.end, value="x")

        PredictionEngine(10).predict(self.context, self.document)

        assert self.document.select(CATEGORY_LAYER) == [existing]
        assert existing.features == {"value": "x"}
        assert len(self.document.select(SENTENCE_LAYER)) == 4

    def test_prediction_is_repeatable(self):
        """Test predicting twice with the same model yields the same predictions."""
        samples = (
            [Sample("sports", tokens) for tokens in SPORTS_SENTENCES]
            + [Sample("politics", tokens) for tokens in POLITICS_SENTENCES]
        )
        context = ModelContext()
        TrainingCoordinator(MaxentDoccatTrainer(), 3, TrainingParameters.default_params()).train(context, samples)
        document = AnnotatedDocument.from_sentences(SPORTS_SENTENCES[:2] + POLITICS_SENTENCES[:2])

        engine = PredictionEngine(10)
        first = engine.predict(context, document)
        second = engine.predict(context, document)

        assert first == second
        assert [p.label for p in first] == ["sports", "sports", "politics", "politics"]
