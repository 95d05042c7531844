"""
Maximum entropy document categorizer.

This module provides the default training capability of the recommender: a
bag-of-words multinomial logistic regression model trained with numpy batch
gradient ascent.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .exceptions import ConfigurationError
from .models import TrainingParameters
from .sample_stream import DocumentSampleStream
from .services.interfaces import DocumentCategorizerModel, DocumentCategorizerTrainer


logger = logging.getLogger(__name__)


# Smallest beam size the categorizer is trained with
DEFAULT_BEAM_SIZE = 3

SUPPORTED_ALGORITHMS = {"MAXENT"}


class BagOfWordsFeatureGenerator:
    """Generates one feature per token occurrence."""

    prefix = "bow="

    def extract_features(self, tokens: Sequence[str]) -> List[str]:
        return [self.prefix + token for token in tokens]


class MaxentDoccatModel(DocumentCategorizerModel):
    """
    Trained maximum entropy categorizer.

    The weight matrix has one row per known feature plus a final bias row,
    and one column per category. The beam size does not change the
    probabilities; it only bounds how many ranked categories
    sorted_categories returns.
    """

    def __init__(
        self,
        categories: List[str],
        feature_index: Dict[str, int],
        weights: np.ndarray,
        beam_size: int = DEFAULT_BEAM_SIZE,
        language: str = "unknown",
        feature_generator: Optional[BagOfWordsFeatureGenerator] = None
    ):
        if not categories:
            raise ValueError("Categories list cannot be empty")
        if weights.shape != (len(feature_index) + 1, len(categories)):
            raise ValueError(
                f"Weight matrix shape {weights.shape} doesn't match "
                f"{len(feature_index)} features and {len(categories)} categories"
            )

        self._categories = list(categories)
        self._feature_index = dict(feature_index)
        self._weights = weights
        self.beam_size = beam_size
        self.language = language
        self._feature_generator = feature_generator or BagOfWordsFeatureGenerator()

    @property
    def categories(self) -> List[str]:
        return list(self._categories)

    @property
    def num_features(self) -> int:
        return len(self._feature_index)

    def _feature_indices(self, tokens: Sequence[str]) -> np.ndarray:
        indices = [
            self._feature_index[feature]
            for feature in self._feature_generator.extract_features(tokens)
            # Features unseen during training carry no weight
            if feature in self._feature_index
        ]
        return np.array(indices, dtype=np.intp)

    def categorize(self, tokens: Sequence[str]) -> np.ndarray:
        scores = self._weights[-1] + self._weights[self._feature_indices(tokens)].sum(axis=0)
        return _softmax(scores)

    def score_map(self, outcome: np.ndarray) -> Dict[str, float]:
        """Map every category to its probability in an outcome."""
        return {category: float(score) for category, score in zip(self._categories, outcome)}

    def sorted_categories(self, outcome: np.ndarray) -> List[Tuple[str, float]]:
        """Best categories of an outcome, highest first, limited to the beam size."""
        order = np.argsort(outcome)[::-1][:self.beam_size]
        return [(self._categories[idx], float(outcome[idx])) for idx in order]


class MaxentDoccatTrainer(DocumentCategorizerTrainer):
    """Trains MaxentDoccatModel instances from a sample stream."""

    def __init__(self, feature_generator: Optional[BagOfWordsFeatureGenerator] = None):
        self.feature_generator = feature_generator or BagOfWordsFeatureGenerator()

    def train(self,
              language: str,
              stream: DocumentSampleStream,
              parameters: TrainingParameters) -> Optional[MaxentDoccatModel]:
        """
        Train a categorizer from the samples in a stream.

        Args:
            language: Language code recorded with the model
            stream: Open stream of samples
            parameters: Training parameters (Algorithm, Iterations, Cutoff, BeamSize, ...)

        Returns:
            Trained model, or None if the stream holds no labeled samples

        Raises:
            ConfigurationError: If the parameters are invalid
            OSError: If reading the stream fails
        """
        algorithm = parameters.get(TrainingParameters.ALGORITHM_PARAM, "MAXENT")
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ConfigurationError(f"Unsupported training algorithm: {algorithm}")

        iterations = parameters.get_int(TrainingParameters.ITERATIONS_PARAM, 100)
        cutoff = parameters.get_int(TrainingParameters.CUTOFF_PARAM, 0)
        learning_rate = parameters.get_float(TrainingParameters.LEARNING_RATE_PARAM, 1.0)
        l2_penalty = parameters.get_float(TrainingParameters.L2_PENALTY_PARAM, 0.01)
        tolerance = parameters.get_float(TrainingParameters.TOLERANCE_PARAM, 1e-6)
        beam_size = parameters.get_int(TrainingParameters.BEAM_SIZE_PARAMETER, DEFAULT_BEAM_SIZE)

        if iterations <= 0:
            raise ConfigurationError("Iterations must be positive")
        if learning_rate <= 0:
            raise ConfigurationError("Learning rate must be positive")

        events = []
        sample = stream.read()
        while sample is not None:
            if sample.category is not None:
                events.append((sample.category, self.feature_generator.extract_features(sample.tokens)))
            sample = stream.read()

        if not events:
            logger.info("No training samples available, no model trained")
            return None

        feature_counts = Counter(feature for _, features in events for feature in features)
        kept_features = sorted(f for f, count in feature_counts.items() if count >= cutoff)
        feature_index = {feature: i for i, feature in enumerate(kept_features)}

        categories = sorted({category for category, _ in events})
        category_index = {category: i for i, category in enumerate(categories)}

        # Feature occurrences as (row, column) coordinates; the last column is the bias
        bias = len(feature_index)
        rows = []
        cols = []
        y = np.zeros((len(events), len(categories)))
        for row, (category, features) in enumerate(events):
            y[row, category_index[category]] = 1.0
            rows.append(row)
            cols.append(bias)
            for feature in features:
                idx = feature_index.get(feature)
                if idx is not None:
                    rows.append(row)
                    cols.append(idx)
        rows = np.array(rows, dtype=np.intp)
        cols = np.array(cols, dtype=np.intp)

        logger.info(
            f"Training {algorithm} categorizer on {len(events)} samples "
            f"({len(categories)} categories, {len(feature_index)} features, {len(cols)} occurrences)"
        )

        weights = np.zeros((len(feature_index) + 1, len(categories)))
        for iteration in range(1, iterations + 1):
            scores = np.zeros_like(y)
            np.add.at(scores, rows, weights[cols])
            residual = y - _softmax(scores)

            gradient = np.zeros_like(weights)
            np.add.at(gradient, cols, residual[rows])
            gradient = gradient / len(events) - l2_penalty * weights

            weights += learning_rate * gradient
            if np.max(np.abs(gradient)) < tolerance:
                logger.debug(f"Converged after {iteration} iterations")
                break

        return MaxentDoccatModel(
            categories=categories,
            feature_index=feature_index,
            weights=weights,
            beam_size=beam_size,
            language=language,
            feature_generator=self.feature_generator
        )


def _softmax(scores: np.ndarray) -> np.ndarray:
    shifted = scores - np.max(scores, axis=-1, keepdims=True)
    exp = np.exp(shifted)
    return exp / np.sum(exp, axis=-1, keepdims=True)
