"""
Trainable document category recommender with a maximum entropy categorizer.
"""

from .models import (
    NO_CATEGORY,
    TargetSet,
    Sample,
    Prediction,
    AnnotatedPair,
    LazyPairs,
    EvaluationResult,
    TrainingParameters,
    RecommenderDescriptor,
    DoccatRecommenderTraits,
    Annotation,
    AnnotatedDocument
)
from .context import ContextKey, ModelContext
from .sample_stream import DocumentSampleStream
from .sample_extractor import SampleExtractor
from .maxent import DEFAULT_BEAM_SIZE, MaxentDoccatModel, MaxentDoccatTrainer
from .training import KEY_MODEL, TrainingCoordinator, effective_beam_size
from .prediction import PredictionEngine
from .evaluation import EvaluationHarness
from .splitters import PercentageBasedSplitter, CallableSplitter
from .metrics import EvaluationMetrics, compute_metrics
from .recommender import DoccatRecommender
from .exceptions import (
    RecommenderError,
    InvalidInputError,
    ConfigurationError,
    RecommendationError
)

__version__ = "0.1.0"
__all__ = [
    "NO_CATEGORY",
    "TargetSet",
    "Sample",
    "Prediction",
    "AnnotatedPair",
    "LazyPairs",
    "EvaluationResult",
    "TrainingParameters",
    "RecommenderDescriptor",
    "DoccatRecommenderTraits",
    "Annotation",
    "AnnotatedDocument",
    "ContextKey",
    "ModelContext",
    "DocumentSampleStream",
    "SampleExtractor",
    "DEFAULT_BEAM_SIZE",
    "MaxentDoccatModel",
    "MaxentDoccatTrainer",
    "KEY_MODEL",
    "TrainingCoordinator",
    "effective_beam_size",
    "PredictionEngine",
    "EvaluationHarness",
    "PercentageBasedSplitter",
    "CallableSplitter",
    "EvaluationMetrics",
    "compute_metrics",
    "DoccatRecommender",
    "RecommenderError",
    "InvalidInputError",
    "ConfigurationError",
    "RecommendationError"
]
