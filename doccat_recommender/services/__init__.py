"""
Service interfaces for the document category recommender.
"""

from .interfaces import (
    DocumentCategorizerModel,
    DocumentCategorizerTrainer,
    DataSplitter,
    SplittingPolicy,
    RecommendationEngine
)

__all__ = [
    "DocumentCategorizerModel",
    "DocumentCategorizerTrainer",
    "DataSplitter",
    "SplittingPolicy",
    "RecommendationEngine"
]
