"""Model scorer: wraps a fitted regression pipeline.

The raw prediction is multiplied by 100 and left unclipped. Experience match
and reasoning come from the rule-based helpers so both paths return the same
result shape.
"""

import logging
from typing import Any, Sequence

import numpy as np

from applicant_ranker.errors import PredictionError
from applicant_ranker.models.responses import MODEL, ScoreResult
from applicant_ranker.models.schemas.feature_vector import FEATURE_NAMES, FeatureVector
from applicant_ranker.services.pipeline.base import BaseScorer
from applicant_ranker.services.pipeline.rule_scorer import (
    calculate_experience_match,
    generate_reasoning,
)

logger = logging.getLogger(__name__)

SCORE_SCALE = 100.0


def build_feature_matrix(features: Sequence[FeatureVector]) -> np.ndarray:
    """Stack vectors into an (n, len(FEATURE_NAMES)) matrix in column order."""
    if not features:
        return np.empty((0, len(FEATURE_NAMES)), dtype=np.float64)
    return np.array([fv.to_row() for fv in features], dtype=np.float64)


class ModelScorer(BaseScorer):
    scoring_method = MODEL

    def __init__(self, model: Any) -> None:
        self._model = model

    @property
    def model(self) -> Any:
        return self._model

    def score_batch(self, features: Sequence[FeatureVector]) -> list[ScoreResult]:
        if not features:
            return []

        predictions = self._predict(build_feature_matrix(features))
        return [
            ScoreResult(
                candidate_id=fv.candidate_id,
                score=float(pred) * SCORE_SCALE,
                experience_match=calculate_experience_match(fv),
                matched_skills=list(fv.matched_skills),
                missing_skills=list(fv.missing_skills),
                reasoning=generate_reasoning(fv),
                scoring_method=self.scoring_method,
            )
            for fv, pred in zip(features, predictions)
        ]

    def _predict(self, matrix: np.ndarray) -> np.ndarray:
        try:
            predictions = np.asarray(self._model.predict(matrix), dtype=np.float64).reshape(-1)
        except Exception as e:
            logger.error("Model prediction failed for %d candidates: %s", len(matrix), e)
            raise PredictionError(f"Model prediction failed: {e}") from e

        if predictions.shape[0] != matrix.shape[0]:
            raise PredictionError(
                f"Model returned {predictions.shape[0]} predictions for {matrix.shape[0]} rows"
            )
        if not np.all(np.isfinite(predictions)):
            raise PredictionError("Model returned non-finite predictions")
        return predictions

    def feature_importances(self) -> dict[str, float]:
        """Importances of the final regressor keyed by feature name, {} if unavailable."""
        estimator = self._model
        steps = getattr(estimator, "steps", None)
        if steps:
            estimator = steps[-1][1]
        raw = getattr(estimator, "feature_importances_", None)
        if raw is None:
            return {}
        return {name: float(imp) for name, imp in zip(FEATURE_NAMES, raw)}
