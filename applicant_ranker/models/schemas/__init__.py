"""Feature contracts shared by extraction, scoring and training."""

from applicant_ranker.models.schemas.feature_vector import FEATURE_NAMES, FeatureVector

__all__ = [
    "FEATURE_NAMES",
    "FeatureVector",
]
