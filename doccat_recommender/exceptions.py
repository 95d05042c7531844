"""
Exception classes for the document category recommender.
"""


class RecommenderError(Exception):
    """Base exception for recommender errors."""
    pass


class InvalidInputError(RecommenderError):
    """Raised when input documents or parameters are invalid."""
    pass


class ConfigurationError(RecommenderError):
    """Raised when configuration is invalid."""
    pass


class RecommendationError(RecommenderError):
    """Raised when training or prediction cannot be completed."""
    pass
