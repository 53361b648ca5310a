"""Exceptions raised by the ranking engine."""


class RankerError(Exception):
    """Base class for ranking engine failures."""


class ModelLoadError(RankerError):
    """A model artifact exists but cannot be used.

    Distinct from a missing artifact, which is the normal state before the
    first training run and makes the engine score with rules.
    """


class PredictionError(RankerError):
    """The loaded model failed to score a batch of feature vectors."""


class TrainingDataError(RankerError, ValueError):
    """Historical data is unusable for training (empty, unlabeled, non-finite)."""
