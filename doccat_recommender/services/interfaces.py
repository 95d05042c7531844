"""
Core interfaces for the document category recommender services.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Union

import numpy as np

from ..context import ModelContext
from ..models import AnnotatedDocument, EvaluationResult, Sample, TargetSet, TrainingParameters
from ..sample_stream import DocumentSampleStream


class DocumentCategorizerModel(ABC):
    """Interface for a trained, read-only document categorization model."""

    @property
    @abstractmethod
    def categories(self) -> List[str]:
        """Categories known to the model, in outcome order."""
        pass

    @abstractmethod
    def categorize(self, tokens: Sequence[str]) -> np.ndarray:
        """
        Score a token sequence against every known category.

        Args:
            tokens: Token texts of the text to categorize

        Returns:
            Probability distribution aligned with `categories`
        """
        pass

    def best_category(self, outcome: np.ndarray) -> str:
        """Category with the highest probability in an outcome."""
        return self.categories[int(np.argmax(outcome))]


class DocumentCategorizerTrainer(ABC):
    """Interface for the training capability behind the recommender."""

    @abstractmethod
    def train(self,
              language: str,
              stream: DocumentSampleStream,
              parameters: TrainingParameters) -> Optional[DocumentCategorizerModel]:
        """
        Train a model from a stream of labeled samples.

        Args:
            language: Language code recorded with the model
            stream: Open stream of samples to read from
            parameters: Training parameters

        Returns:
            Trained model, or None if the samples carry no usable signal

        Raises:
            OSError: If reading the stream fails
        """
        pass


class DataSplitter(ABC):
    """Interface for routing samples to the training or test partition."""

    @abstractmethod
    def get_target_set(self, sample: Sample) -> TargetSet:
        """
        Decide which partition a sample belongs to.

        Args:
            sample: Sample to route

        Returns:
            TRAIN, TEST or OTHER (discarded)
        """
        pass

    def __call__(self, sample: Sample) -> TargetSet:
        return self.get_target_set(sample)


SplittingPolicy = Union[DataSplitter, Callable[[Sample], TargetSet]]


class RecommendationEngine(ABC):
    """Interface shared by all trainable recommenders."""

    @abstractmethod
    def train(self, context: ModelContext, documents: List[AnnotatedDocument]) -> None:
        """
        Train a model from annotated documents and store it in the context.

        Args:
            context: Session context receiving the model
            documents: Annotated training documents
        """
        pass

    @abstractmethod
    def predict(self, context: ModelContext, document: AnnotatedDocument):
        """
        Add predictions to a document using the model in the context.

        Args:
            context: Session context holding a trained model
            document: Document to annotate with predictions
        """
        pass

    @abstractmethod
    def evaluate(self, documents: List[AnnotatedDocument], splitter: SplittingPolicy) -> EvaluationResult:
        """
        Estimate model quality on a held-out split of the documents.

        Args:
            documents: Annotated documents to split
            splitter: Policy routing each sample to TRAIN, TEST or OTHER

        Returns:
            EvaluationResult, possibly marked as skipped
        """
        pass

    def is_ready_for_prediction(self, context: ModelContext) -> bool:
        return context.is_ready_for_prediction()
