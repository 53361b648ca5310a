"""Abstract base class for candidate scorers."""

from abc import ABC, abstractmethod
from typing import Sequence

from applicant_ranker.models.responses import ScoreResult
from applicant_ranker.models.schemas.feature_vector import FeatureVector


class BaseScorer(ABC):
    """Base class for the two scoring paths (rules and trained model).

    Subclasses must implement:
        - scoring_method: tag copied onto every ScoreResult
        - score_batch(features): score a whole batch with one path
    """

    scoring_method: str = ""

    @abstractmethod
    def score_batch(self, features: Sequence[FeatureVector]) -> list[ScoreResult]:
        """Score every vector, preserving input order."""

    def score(self, features: FeatureVector) -> ScoreResult:
        return self.score_batch([features])[0]
