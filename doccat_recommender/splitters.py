"""
Data splitters routing samples to training and test partitions.
"""

import math
from typing import Callable, Optional

from .config import config
from .models import Sample, TargetSet
from .services.interfaces import DataSplitter


class PercentageBasedSplitter(DataSplitter):
    """
    Deterministic splitter routing a fixed share of samples to training.

    Samples are counted in blocks of `increment`; within each block the
    first floor(train_percentage * increment) samples go to TRAIN and the
    rest to TEST. Both partitions get at least one slot per block. With
    the defaults (0.8, 10) the pattern is eight TRAIN then two TEST,
    repeated.
    """

    def __init__(self, train_percentage: Optional[float] = None, increment: int = 10):
        if train_percentage is None:
            train_percentage = config.evaluation.train_percentage
        if not (0.0 < train_percentage < 1.0):
            raise ValueError("train_percentage must be between 0.0 and 1.0 (exclusive)")
        if increment <= 0:
            raise ValueError("increment must be positive")

        self.train_percentage = train_percentage
        self.increment = increment
        # Rounded first so 0.29 * 100 counts as 29, not 28.999...
        train_slots = math.floor(round(train_percentage * increment, 6))
        if train_slots < 1 or train_slots >= increment:
            raise ValueError(
                f"train_percentage {train_percentage} leaves a partition empty "
                f"with increment {increment}"
            )
        self._train_slots = train_slots
        self._count = 0

    def get_target_set(self, sample: Sample) -> TargetSet:
        position = self._count % self.increment
        self._count += 1
        return TargetSet.TRAIN if position < self._train_slots else TargetSet.TEST

    def reset(self) -> None:
        self._count = 0


class CallableSplitter(DataSplitter):
    """Adapts a plain function to the DataSplitter interface."""

    def __init__(self, policy: Callable[[Sample], TargetSet]):
        self.policy = policy

    def get_target_set(self, sample: Sample) -> TargetSet:
        return self.policy(sample)
