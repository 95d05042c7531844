"""
Core data models for the document category recommender.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Set

from ..config import config


# Category assigned to samples whose label annotation carries no value
NO_CATEGORY = "<NO_CATEGORY>"


class TargetSet(Enum):
    """Partition a sample is routed to during evaluation."""
    TRAIN = "train"
    TEST = "test"
    OTHER = "other"


@dataclass
class Sample:
    """A labeled token sequence used for training and evaluation."""
    category: Optional[str]
    tokens: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate sample after initialization."""
        if not isinstance(self.tokens, (list, tuple)):
            raise ValueError("Sample tokens must be a list of strings")
        self.tokens = list(self.tokens)


@dataclass
class Prediction:
    """A confidence-scored category prediction anchored at a sentence span."""
    begin: int
    end: int
    label: str
    confidence: float

    def __post_init__(self):
        """Validate prediction span after initialization."""
        if self.begin < 0 or self.end < self.begin:
            raise ValueError(f"Invalid prediction span [{self.begin}, {self.end})")


@dataclass(frozen=True)
class AnnotatedPair:
    """Actual and predicted category of a single test sample."""
    actual: str
    predicted: str


class LazyPairs:
    """
    Lazy sequence of actual/predicted pairs.

    Iterating calls the factory again, so every pass recomputes the pairs.
    Callers that need a single pass over a large test set can iterate once;
    callers that need repeated access should use materialize().
    """

    def __init__(self, factory: Callable[[], Iterator[AnnotatedPair]]):
        self._factory = factory
        self._materialized: Optional[List[AnnotatedPair]] = None

    def __iter__(self) -> Iterator[AnnotatedPair]:
        if self._materialized is not None:
            return iter(self._materialized)
        return self._factory()

    def materialize(self) -> List[AnnotatedPair]:
        """Compute all pairs once and cache them for later iterations."""
        if self._materialized is None:
            self._materialized = list(self._factory())
        return self._materialized

    @classmethod
    def of(cls, pairs: Iterable[AnnotatedPair]) -> 'LazyPairs':
        """Wrap an already computed collection of pairs."""
        items = list(pairs)
        return cls(lambda: iter(items))


@dataclass
class EvaluationResult:
    """Outcome of a held-out evaluation run."""
    labels: Set[str] = field(default_factory=set)
    pairs: Optional[LazyPairs] = None
    training_set_size: int = 0
    test_set_size: int = 0
    skipped: bool = False

    @classmethod
    def skipped_result(cls, training_set_size: int, test_set_size: int) -> 'EvaluationResult':
        """Create a result for an evaluation that did not run."""
        return cls(
            labels=set(),
            pairs=None,
            training_set_size=training_set_size,
            test_set_size=test_set_size,
            skipped=True
        )

    def compute_metrics(self, ignore_labels: Optional[Iterable[str]] = None):
        """
        Aggregate the pairs into classification metrics.

        Args:
            ignore_labels: Labels excluded from scoring (defaults to this result's labels)

        Returns:
            EvaluationMetrics for the pairs

        Raises:
            ValueError: If the evaluation was skipped
        """
        from ..metrics import compute_metrics

        if self.skipped or self.pairs is None:
            raise ValueError("Cannot compute metrics for a skipped evaluation")

        ignored = self.labels if ignore_labels is None else set(ignore_labels)
        return compute_metrics(self.pairs, ignored)


class TrainingParameters:
    """
    String-keyed training parameters handed to a trainer.

    Values are stored as strings so any trainer can read them back with
    the typed getters.
    """

    ALGORITHM_PARAM = "Algorithm"
    ITERATIONS_PARAM = "Iterations"
    CUTOFF_PARAM = "Cutoff"
    BEAM_SIZE_PARAMETER = "BeamSize"
    LEARNING_RATE_PARAM = "LearningRate"
    L2_PENALTY_PARAM = "L2Penalty"
    TOLERANCE_PARAM = "Tolerance"

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, str] = {}
        for key, value in (values or {}).items():
            self.put(key, value)

    @classmethod
    def default_params(cls) -> 'TrainingParameters':
        """Create parameters from the library training configuration."""
        training = config.training
        return cls({
            cls.ALGORITHM_PARAM: training.algorithm,
            cls.ITERATIONS_PARAM: training.iterations,
            cls.CUTOFF_PARAM: training.cutoff,
            cls.LEARNING_RATE_PARAM: training.learning_rate,
            cls.L2_PENALTY_PARAM: training.l2_penalty,
            cls.TOLERANCE_PARAM: training.tolerance,
        })

    def put(self, key: str, value: Any) -> None:
        if not key:
            raise ValueError("Parameter key cannot be empty")
        self._values[key] = str(value)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        value = self._values.get(key)
        return default if value is None else int(value)

    def get_float(self, key: str, default: float) -> float:
        value = self._values.get(key)
        return default if value is None else float(value)

    def copy(self) -> 'TrainingParameters':
        return TrainingParameters(dict(self._values))

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrainingParameters):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"TrainingParameters({self._values!r})"


@dataclass(frozen=True)
class RecommenderDescriptor:
    """Describes which layer and feature a recommender learns to fill in."""
    layer_name: str
    feature_name: str
    max_recommendations: int = 3

    def __post_init__(self):
        """Validate descriptor after initialization."""
        if not self.layer_name or not self.layer_name.strip():
            raise ValueError("Layer name cannot be empty")
        if not self.feature_name or not self.feature_name.strip():
            raise ValueError("Feature name cannot be empty")
        if not isinstance(self.max_recommendations, int) or self.max_recommendations <= 0:
            raise ValueError("max_recommendations must be a positive integer")


@dataclass
class DoccatRecommenderTraits:
    """Resource limits and training parameters of a document categorizer recommender."""
    training_set_size_limit: int = field(default_factory=lambda: config.limits.training_set_size_limit)
    prediction_limit: int = field(default_factory=lambda: config.limits.prediction_limit)
    parameter_overrides: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate traits after initialization."""
        if not isinstance(self.training_set_size_limit, int) or self.training_set_size_limit < 0:
            raise ValueError("training_set_size_limit must be a non-negative integer")
        if not isinstance(self.prediction_limit, int) or self.prediction_limit < 0:
            raise ValueError("prediction_limit must be a non-negative integer")

    def get_parameters(self) -> TrainingParameters:
        """
        Build the training parameters for one training run.

        A new instance is returned on every call, so callers may modify it
        without affecting later runs.
        """
        params = TrainingParameters.default_params()
        for key, value in self.parameter_overrides.items():
            params.put(key, value)
        return params
