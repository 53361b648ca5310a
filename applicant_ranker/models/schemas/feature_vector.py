"""Per-candidate features derived from one job description and one resume."""

from pydantic import BaseModel, ConfigDict

# Model column order. Training and prediction both go through to_row(), so
# reordering this list invalidates every saved artifact.
FEATURE_NAMES = [
    "skill_match_ratio",
    "experience_years",
    "education_level",
    "keyword_density",
    "title_match_score",
]


class FeatureVector(BaseModel):
    """Structured output of the feature extractor.

    ``label`` is only set on historical training examples.
    """
    model_config = ConfigDict(frozen=True)

    candidate_id: str = ""
    skill_match_ratio: float = 0.0  # 0.0-1.0
    experience_years: float = 0.0
    education_level: float = 0.2  # 0.2, 0.4, 0.6, 0.8 or 1.0
    keyword_density: float = 0.0  # 0.0-1.0
    title_match_score: float = 0.0  # 0.0-1.0
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    label: float | None = None

    def to_row(self) -> list[float]:
        return [float(getattr(self, name)) for name in FEATURE_NAMES]
