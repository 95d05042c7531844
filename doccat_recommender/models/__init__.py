"""
Data models for the document category recommender.
"""

from .data_models import (
    NO_CATEGORY,
    TargetSet,
    Sample,
    Prediction,
    AnnotatedPair,
    LazyPairs,
    EvaluationResult,
    TrainingParameters,
    RecommenderDescriptor,
    DoccatRecommenderTraits
)
from .document import (
    Annotation,
    AnnotatedDocument,
    SENTENCE_LAYER,
    TOKEN_LAYER,
    PREDICTION_LAYER,
    LABEL_FEATURE,
    SCORE_FEATURE
)

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
    "SENTENCE_LAYER",
    "TOKEN_LAYER",
    "PREDICTION_LAYER",
    "LABEL_FEATURE",
    "SCORE_FEATURE"
]
