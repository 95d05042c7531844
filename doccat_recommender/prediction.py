"""
Sentence-level category prediction over annotated documents.
"""

import logging
from typing import List

import numpy as np

from .context import ModelContext
from .exceptions import RecommendationError
from .models import (
    LABEL_FEATURE,
    PREDICTION_LAYER,
    SCORE_FEATURE,
    SENTENCE_LAYER,
    TOKEN_LAYER,
    AnnotatedDocument,
    Prediction
)
from .training import KEY_MODEL


logger = logging.getLogger(__name__)


class PredictionEngine:
    """Writes the best category of each sentence onto a document."""

    def __init__(self, prediction_limit: int):
        self.prediction_limit = prediction_limit

    def predict(self, context: ModelContext, document: AnnotatedDocument) -> List[Prediction]:
        """
        Categorize sentences of a document in order, up to the prediction limit.

        Each prediction is added to the document's index as a prediction
        annotation spanning the sentence. Existing annotations are left as
        they are.

        Args:
            context: Session context holding a trained model
            document: Document to annotate

        Returns:
            The predictions that were added, in document order

        Raises:
            RecommendationError: If the context holds no model
        """
        model = context.get(KEY_MODEL)
        if model is None:
            raise RecommendationError(f"Key [{KEY_MODEL}] not found in context")

        predictions: List[Prediction] = []
        for sentence in document.select(SENTENCE_LAYER):
            if len(predictions) >= self.prediction_limit:
                break

            tokens = [
                document.covered_text(token)
                for token in document.select_covered(TOKEN_LAYER, sentence)
            ]

            outcome = model.categorize(tokens)
            label = model.best_category(outcome)
            confidence = float(np.max(outcome))

            document.add_annotation(
                PREDICTION_LAYER,
                sentence.begin,
                sentence.end,
                **{LABEL_FEATURE: label, SCORE_FEATURE: confidence}
            )
            predictions.append(Prediction(
                begin=sentence.begin,
                end=sentence.end,
                label=label,
                confidence=confidence
            ))

        logger.debug(f"Added {len(predictions)} predictions to document {document.name!r}")
        return predictions
