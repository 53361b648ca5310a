"""Builds and fits the gradient-boosted ranking regressor.

Pipeline: feature concatenation (FeatureVector.to_row) -> min-max scaling
-> LightGBM regressor fitted on FeatureVector.label.
"""

import logging
import math
from typing import Any, Sequence

import numpy as np
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import MinMaxScaler

from applicant_ranker.config import settings
from applicant_ranker.errors import TrainingDataError
from applicant_ranker.models.schemas.feature_vector import FEATURE_NAMES, FeatureVector
from applicant_ranker.services.pipeline.model_scorer import build_feature_matrix

logger = logging.getLogger(__name__)


def build_pipeline(params: dict[str, Any] | None = None) -> Pipeline:
    """Unfitted scaler + regressor pipeline; params override the settings defaults."""
    import lightgbm as lgb

    regressor_params = {**settings.training_params(), **(params or {})}
    return Pipeline([
        ("scale", MinMaxScaler()),
        ("regressor", lgb.LGBMRegressor(objective="regression", verbose=-1, **regressor_params)),
    ])


def prepare_training_data(
    historical_data: Sequence[FeatureVector],
) -> tuple[np.ndarray, np.ndarray]:
    """Validate labeled vectors and return (X, y)."""
    if not historical_data:
        raise TrainingDataError("Training data is empty")

    labels: list[float] = []
    for i, fv in enumerate(historical_data):
        if fv.label is None:
            raise TrainingDataError(f"Training example {i} ({fv.candidate_id!r}) has no label")
        if not math.isfinite(fv.label):
            raise TrainingDataError(f"Training example {i} ({fv.candidate_id!r}) has a non-finite label")
        labels.append(float(fv.label))

    X = build_feature_matrix(historical_data)
    if not np.all(np.isfinite(X)):
        raise TrainingDataError("Training features contain non-finite values")
    return X, np.array(labels, dtype=np.float64)


def fit_model(
    historical_data: Sequence[FeatureVector],
    params: dict[str, Any] | None = None,
) -> Pipeline:
    X, y = prepare_training_data(historical_data)
    logger.info("Training ranking model on %d examples, features: %s", len(y), FEATURE_NAMES)

    pipeline = build_pipeline(params)
    pipeline.fit(X, y)
    return pipeline
