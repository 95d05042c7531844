"""
Training of document categorizer models into a session context.
"""

import logging
from typing import List, Optional

from .context import ContextKey, ModelContext
from .exceptions import RecommendationError
from .maxent import DEFAULT_BEAM_SIZE
from .models import Sample, TrainingParameters
from .sample_stream import DocumentSampleStream
from .services.interfaces import DocumentCategorizerModel, DocumentCategorizerTrainer


logger = logging.getLogger(__name__)


KEY_MODEL: ContextKey[DocumentCategorizerModel] = ContextKey("model")


def effective_beam_size(max_recommendations: int) -> int:
    """
    Beam size used for training.

    The beam size bounds how many results are returned, but training always
    uses at least the categorizer's default beam size.
    """
    return max(max_recommendations, DEFAULT_BEAM_SIZE)


def train_model(
    trainer: DocumentCategorizerTrainer,
    samples: List[Sample],
    parameters: TrainingParameters
) -> Optional[DocumentCategorizerModel]:
    """
    Run a trainer over samples through a closable stream.

    Args:
        trainer: Training capability to delegate to
        samples: Labeled samples
        parameters: Training parameters

    Returns:
        Trained model, or None if the trainer produced none

    Raises:
        RecommendationError: If the trainer fails with an I/O error
    """
    try:
        with DocumentSampleStream(samples) as stream:
            return trainer.train("unknown", stream, parameters)
    except OSError as e:
        raise RecommendationError(
            "Exception during training the document categorizer model."
        ) from e


class TrainingCoordinator:
    """Trains a model and stores it in the session context."""

    def __init__(
        self,
        trainer: DocumentCategorizerTrainer,
        max_recommendations: int,
        base_parameters: TrainingParameters
    ):
        self.trainer = trainer
        self.max_recommendations = max_recommendations
        self.base_parameters = base_parameters

    def train(self, context: ModelContext, samples: List[Sample]) -> Optional[DocumentCategorizerModel]:
        """
        Train on samples and populate the context.

        The context is only marked ready when a model was produced; an empty
        training outcome leaves it untouched.

        Args:
            context: Session context receiving the model
            samples: Labeled samples to train on

        Returns:
            The trained model, or None

        Raises:
            RecommendationError: If training fails with an I/O error
        """
        beam_size = effective_beam_size(self.max_recommendations)

        params = self.base_parameters.copy()
        params.put(TrainingParameters.BEAM_SIZE_PARAMETER, beam_size)

        logger.info(f"Training on {len(samples)} samples with beam size {beam_size}")
        model = train_model(self.trainer, samples, params)
        if model is None:
            logger.info("Training produced no model, context left unready")
            return None

        context.put(KEY_MODEL, model)
        context.mark_as_ready_for_prediction()
        return model
