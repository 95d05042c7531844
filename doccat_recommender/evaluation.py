"""
Held-out evaluation of document categorizers.
"""

import logging
from typing import Iterator, List, Optional

from .config import MIN_PARTITION_SIZE, config
from .exceptions import ConfigurationError
from .models import NO_CATEGORY, AnnotatedPair, EvaluationResult, LazyPairs, Sample, TargetSet, TrainingParameters
from .services.interfaces import DocumentCategorizerModel, DocumentCategorizerTrainer, SplittingPolicy
from .training import train_model


logger = logging.getLogger(__name__)


class EvaluationHarness:
    """
    Splits samples into training and test partitions, trains a throwaway
    model on the first and pairs actual with predicted categories on the second.
    """

    def __init__(
        self,
        trainer: DocumentCategorizerTrainer,
        parameters: TrainingParameters,
        min_partition_size: Optional[int] = None
    ):
        self.trainer = trainer
        self.parameters = parameters
        self.min_partition_size = (
            config.evaluation.min_partition_size if min_partition_size is None else min_partition_size
        )
        if self.min_partition_size < MIN_PARTITION_SIZE:
            raise ConfigurationError(
                f"min_partition_size must be at least {MIN_PARTITION_SIZE}, got {self.min_partition_size}"
            )

    def evaluate(self, samples: List[Sample], splitter: SplittingPolicy) -> EvaluationResult:
        """
        Evaluate on a per-sample split.

        Args:
            samples: Labeled samples to split
            splitter: Policy deciding TRAIN, TEST or OTHER for each sample

        Returns:
            EvaluationResult; skipped when either partition is too small
        """
        training_set: List[Sample] = []
        test_set: List[Sample] = []

        for sample in samples:
            target = splitter(sample)
            if target == TargetSet.TRAIN:
                training_set.append(sample)
            elif target == TargetSet.TEST:
                test_set.append(sample)

        training_set_size = len(training_set)
        test_set_size = len(test_set)

        if training_set_size < self.min_partition_size or test_set_size < self.min_partition_size:
            logger.info("Not enough data to evaluate, skipping!")
            return EvaluationResult.skipped_result(training_set_size, test_set_size)

        logger.info(
            f"Evaluating on {len(samples)} items "
            f"(training set size {training_set_size}, test set size {test_set_size})"
        )

        model = train_model(self.trainer, training_set, self.parameters.copy())
        if model is None:
            logger.warning("Training produced no model, skipping evaluation")
            return EvaluationResult.skipped_result(training_set_size, test_set_size)

        return EvaluationResult(
            labels={NO_CATEGORY},
            pairs=LazyPairs(lambda: _predict_pairs(model, test_set)),
            training_set_size=training_set_size,
            test_set_size=test_set_size
        )


def _predict_pairs(model: DocumentCategorizerModel, test_set: List[Sample]) -> Iterator[AnnotatedPair]:
    for sample in test_set:
        predicted = model.best_category(model.categorize(sample.tokens))
        yield AnnotatedPair(actual=sample.category, predicted=predicted)
