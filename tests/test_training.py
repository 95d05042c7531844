"""
Tests for the training coordinator.
"""

from unittest.mock import MagicMock

import pytest

from doccat_recommender.context import ModelContext
from doccat_recommender.exceptions import RecommendationError
from doccat_recommender.maxent import DEFAULT_BEAM_SIZE, MaxentDoccatTrainer
from doccat_recommender.models import Sample, TrainingParameters
from doccat_recommender.training import KEY_MODEL, TrainingCoordinator, effective_beam_size, train_model


class TestEffectiveBeamSize:
    """Test cases for beam size reconciliation."""

    @pytest.mark.parametrize("max_recommendations", [1, 2, 3, 4, 10, 100])
    def test_never_below_default(self, max_recommendations):
        """Test the beam size is the larger of the request and the default."""
        assert effective_beam_size(max_recommendations) == max(max_recommendations, DEFAULT_BEAM_SIZE)


class TestTrainingCoordinator:
    """Test cases for TrainingCoordinator class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.samples = [Sample("a", ["x"]), Sample("b", ["y"])]
        self.context = ModelContext()
        self.base_parameters = TrainingParameters({TrainingParameters.ITERATIONS_PARAM: 10})

    def make_coordinator(self, trainer, max_recommendations=3):
        return TrainingCoordinator(trainer, max_recommendations, self.base_parameters)

    def test_beam_size_injected_into_parameters(self):
        """Test the reconciled beam size is passed to the trainer."""
        trainer = MagicMock()
        trainer.train.return_value = MagicMock()

        self.make_coordinator(trainer, max_recommendations=1).train(self.context, self.samples)
        params = trainer.train.call_args[0][2]
        assert params.get_int(TrainingParameters.BEAM_SIZE_PARAMETER, 0) == DEFAULT_BEAM_SIZE

        self.make_coordinator(trainer, max_recommendations=8).train(self.context, self.samples)
        params = trainer.train.call_args[0][2]
        assert params.get_int(TrainingParameters.BEAM_SIZE_PARAMETER, 0) == 8

    def test_base_parameters_not_modified(self):
        """Test the beam size is set on a copy of the base parameters."""
        trainer = MagicMock()
        trainer.train.return_value = MagicMock()

        self.make_coordinator(trainer, max_recommendations=8).train(self.context, self.samples)

        assert TrainingParameters.BEAM_SIZE_PARAMETER not in self.base_parameters

    def test_successful_training_populates_context(self):
        """Test a trained model is stored and the context marked ready."""
        trainer = MagicMock()
        model = MagicMock()
        trainer.train.return_value = model

        result = self.make_coordinator(trainer).train(self.context, self.samples)

        assert result is model
        assert self.context.get(KEY_MODEL) is model
        assert self.context.is_ready_for_prediction()

    def test_no_model_leaves_context_unready(self):
        """Test an empty training outcome is not an error and leaves the context empty."""
        trainer = MagicMock()
        trainer.train.return_value = None

        result = self.make_coordinator(trainer).train(self.context, self.samples)

        assert result is None
        assert self.context.get(KEY_MODEL) is None
        assert not self.context.is_ready_for_prediction()

    def test_io_error_is_wrapped(self):
        """Test trainer I/O errors surface as RecommendationError with the cause."""
        trainer = MagicMock()
        cause = OSError("disk gone")
        trainer.train.side_effect = cause

        with pytest.raises(RecommendationError, match="Exception during training") as exc_info:
            self.make_coordinator(trainer).train(self.context, self.samples)

        assert exc_info.value.__cause__ is cause
        assert not self.context.is_ready_for_prediction()

    def test_other_errors_propagate_unwrapped(self):
        """Test non-I/O errors are not wrapped."""
        trainer = MagicMock()
        trainer.train.side_effect = ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            self.make_coordinator(trainer).train(self.context, self.samples)

    def test_trains_with_default_trainer(self):
        """Test training end to end with the maximum entropy trainer."""
        model = self.make_coordinator(MaxentDoccatTrainer(), max_recommendations=5).train(
            self.context, self.samples
        )

        assert self.context.get(KEY_MODEL) is model
        assert model.beam_size == 5


class TestTrainModel:
    """Test cases for the train_model helper."""

    @pytest.mark.parametrize("outcome", ["model", None, OSError("io"), ValueError("bad")])
    def test_stream_closed_on_every_exit_path(self, outcome):
        """Test the sample stream is closed on success, empty result and failure."""
        streams = []

        def fake_train(language, stream, parameters):
            streams.append(stream)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        trainer = MagicMock()
        trainer.train.side_effect = fake_train

        try:
            train_model(trainer, [Sample("a", ["x"])], TrainingParameters())
        except (RecommendationError, ValueError):
            pass

        assert len(streams) == 1
        assert streams[0].closed
