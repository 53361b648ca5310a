"""Applicant ranking engine: lexical feature extraction plus rule/model scoring."""

from applicant_ranker.errors import (
    ModelLoadError,
    PredictionError,
    RankerError,
    TrainingDataError,
)
from applicant_ranker.models.requests import LabeledPair, ResumeDocument
from applicant_ranker.models.responses import ScoreResult
from applicant_ranker.models.schemas.feature_vector import FEATURE_NAMES, FeatureVector
from applicant_ranker.services.feature_extractor import extract_features
from applicant_ranker.services.pipeline.engine import RankingEngine

__all__ = [
    "RankingEngine",
    "ResumeDocument",
    "LabeledPair",
    "FeatureVector",
    "FEATURE_NAMES",
    "ScoreResult",
    "extract_features",
    "RankerError",
    "ModelLoadError",
    "PredictionError",
    "TrainingDataError",
]
