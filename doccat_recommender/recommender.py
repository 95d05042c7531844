"""
Document category recommender.

This module provides the DoccatRecommender, which wires sample extraction,
training, prediction and evaluation together behind the RecommendationEngine
interface.
"""

import logging
from typing import List, Optional

from .context import ModelContext
from .evaluation import EvaluationHarness
from .exceptions import InvalidInputError
from .maxent import MaxentDoccatTrainer
from .models import AnnotatedDocument, DoccatRecommenderTraits, EvaluationResult, Prediction, RecommenderDescriptor
from .prediction import PredictionEngine
from .sample_extractor import SampleExtractor
from .services.interfaces import DocumentCategorizerTrainer, RecommendationEngine, SplittingPolicy
from .training import TrainingCoordinator


logger = logging.getLogger(__name__)


class DoccatRecommender(RecommendationEngine):
    """
    Recommends a category for every sentence of a document.

    The recommender learns from annotations of one layer and feature: each
    such annotation labels the sentence it lies in. Trained models live in a
    ModelContext owned by the caller's session, so one recommender instance
    can serve several sessions.
    """

    def __init__(
        self,
        descriptor: RecommenderDescriptor,
        traits: Optional[DoccatRecommenderTraits] = None,
        trainer: Optional[DocumentCategorizerTrainer] = None
    ):
        """
        Initialize the recommender.

        Args:
            descriptor: Target layer, feature and maximum number of recommendations
            traits: Resource limits and training parameters (defaults from configuration)
            trainer: Training capability (defaults to the maximum entropy trainer)

        Raises:
            InvalidInputError: If the descriptor is missing
        """
        if descriptor is None:
            raise InvalidInputError("Recommender descriptor cannot be None")

        self.descriptor = descriptor
        self.traits = traits or DoccatRecommenderTraits()
        self.trainer = trainer or MaxentDoccatTrainer()

        self._extractor = SampleExtractor(
            layer_name=descriptor.layer_name,
            feature_name=descriptor.feature_name,
            training_set_size_limit=self.traits.training_set_size_limit
        )
        self._prediction_engine = PredictionEngine(self.traits.prediction_limit)

    @property
    def layer_name(self) -> str:
        return self.descriptor.layer_name

    @property
    def feature_name(self) -> str:
        return self.descriptor.feature_name

    def train(self, context: ModelContext, documents: List[AnnotatedDocument]) -> None:
        samples = self._extractor.extract_samples(documents)
        logger.debug(f"Extracted {len(samples)} samples from {len(documents)} documents")
        coordinator = TrainingCoordinator(
            trainer=self.trainer,
            max_recommendations=self.descriptor.max_recommendations,
            base_parameters=self.traits.get_parameters()
        )
        coordinator.train(context, samples)

    def predict(self, context: ModelContext, document: AnnotatedDocument) -> List[Prediction]:
        return self._prediction_engine.predict(context, document)

    def evaluate(self, documents: List[AnnotatedDocument], splitter: SplittingPolicy) -> EvaluationResult:
        samples = self._extractor.extract_samples(documents)
        harness = EvaluationHarness(self.trainer, self.traits.get_parameters())
        return harness.evaluate(samples, splitter)
