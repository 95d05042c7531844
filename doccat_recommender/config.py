"""
Configuration for the document category recommender library.
Values are read from the environment once, at import time.
"""

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError


# Largest value used for "no limit" on sample and prediction counts
UNLIMITED = 2 ** 31 - 1

# Smallest partition size an evaluation may run with
MIN_PARTITION_SIZE = 2


@dataclass
class TrainingConfig:
    """Default training parameters for the maximum entropy categorizer."""
    algorithm: str = "MAXENT"
    iterations: int = 100
    cutoff: int = 0

    # Gradient ascent settings
    learning_rate: float = 1.0
    l2_penalty: float = 0.01
    tolerance: float = 1e-6

    @classmethod
    def from_env(cls) -> 'TrainingConfig':
        """Create training config from environment variables."""
        return cls(
            algorithm=os.getenv('DOCCAT_ALGORITHM', cls.algorithm),
            iterations=int(os.getenv('DOCCAT_ITERATIONS', cls.iterations)),
            cutoff=int(os.getenv('DOCCAT_CUTOFF', cls.cutoff)),
            learning_rate=float(os.getenv('DOCCAT_LEARNING_RATE', cls.learning_rate)),
            l2_penalty=float(os.getenv('DOCCAT_L2_PENALTY', cls.l2_penalty)),
            tolerance=float(os.getenv('DOCCAT_TOLERANCE', cls.tolerance)),
        )


@dataclass
class LimitsConfig:
    """Resource limits applied during extraction and prediction."""
    training_set_size_limit: int = UNLIMITED
    prediction_limit: int = UNLIMITED

    @classmethod
    def from_env(cls) -> 'LimitsConfig':
        """Create limits config from environment variables."""
        return cls(
            training_set_size_limit=int(
                os.getenv('DOCCAT_TRAINING_SET_SIZE_LIMIT', cls.training_set_size_limit)
            ),
            prediction_limit=int(os.getenv('DOCCAT_PREDICTION_LIMIT', cls.prediction_limit)),
        )


@dataclass
class EvaluationConfig:
    """Configuration for held-out evaluation."""
    # Partitions smaller than this are considered statistically meaningless
    min_partition_size: int = MIN_PARTITION_SIZE

    # Share of samples routed to the training set by the default splitter
    train_percentage: float = 0.8

    def __post_init__(self):
        """Validate evaluation config after initialization."""
        if self.min_partition_size < MIN_PARTITION_SIZE:
            raise ConfigurationError(
                f"min_partition_size must be at least {MIN_PARTITION_SIZE}, got {self.min_partition_size}"
            )

    @classmethod
    def from_env(cls) -> 'EvaluationConfig':
        """Create evaluation config from environment variables."""
        return cls(
            min_partition_size=int(os.getenv('DOCCAT_MIN_PARTITION_SIZE', cls.min_partition_size)),
            train_percentage=float(os.getenv('DOCCAT_TRAIN_PERCENTAGE', cls.train_percentage)),
        )


@dataclass
class RecommenderConfig:
    """Configuration for the recommender library."""
    training: TrainingConfig
    limits: LimitsConfig
    evaluation: EvaluationConfig

    @classmethod
    def from_env(cls) -> 'RecommenderConfig':
        """Create recommender config from environment variables."""
        return cls(
            training=TrainingConfig.from_env(),
            limits=LimitsConfig.from_env(),
            evaluation=EvaluationConfig.from_env(),
        )


# Global configuration instance
config = RecommenderConfig.from_env()
