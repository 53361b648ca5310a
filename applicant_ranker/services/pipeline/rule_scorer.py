"""Rule-based scorer: deterministic weighted sum over the feature vector.

Used whenever no trained model is loaded. Weights sum to 100, so every
score lies in [0, 100].
"""

from typing import Sequence

from applicant_ranker.models.responses import RULE_BASED, ScoreResult
from applicant_ranker.models.schemas.feature_vector import FeatureVector
from applicant_ranker.services.pipeline.base import BaseScorer

WEIGHTS = {
    "skill_match_ratio": 40.0,
    "experience": 30.0,
    "education_level": 15.0,
    "keyword_density": 10.0,
    "title_match_score": 5.0,
}

# Years of experience at which the experience component saturates.
EXPERIENCE_CAP_YEARS = 10.0


def calculate_experience_match(features: FeatureVector) -> float:
    return min(features.experience_years / EXPERIENCE_CAP_YEARS, 1.0)


def calculate_score(features: FeatureVector) -> float:
    return (
        features.skill_match_ratio * WEIGHTS["skill_match_ratio"]
        + calculate_experience_match(features) * WEIGHTS["experience"]
        + features.education_level * WEIGHTS["education_level"]
        + features.keyword_density * WEIGHTS["keyword_density"]
        + features.title_match_score * WEIGHTS["title_match_score"]
    )


def _format_years(years: float) -> str:
    years = float(years)
    return str(int(years)) if years.is_integer() else f"{years:g}"


def generate_reasoning(features: FeatureVector) -> str:
    """Short fixed-template justification shared by both scoring paths."""
    n_matched = len(features.matched_skills)
    reasons: list[str] = []

    if features.skill_match_ratio >= 0.8:
        reasons.append(f"Strong skill match({n_matched} matched)")
    elif features.skill_match_ratio >= 0.5:
        reasons.append(f"Moderate skill match({n_matched} matched)")
    else:
        reasons.append(f"Limited skill match({n_matched} matched)")

    years = features.experience_years
    if years >= 5:
        reasons.append(f"Extensive experience ({_format_years(years)} years)")
    elif years >= 2:
        reasons.append(f"Relevant experience ({_format_years(years)} years)")

    if features.education_level >= 0.8:
        reasons.append("Strong educational background")

    if features.title_match_score >= 0.7:
        reasons.append("Relevant job match")

    return ". ".join(reasons)


class RuleBasedScorer(BaseScorer):
    scoring_method = RULE_BASED

    def score_batch(self, features: Sequence[FeatureVector]) -> list[ScoreResult]:
        return [
            ScoreResult(
                candidate_id=fv.candidate_id,
                score=calculate_score(fv),
                experience_match=calculate_experience_match(fv),
                matched_skills=list(fv.matched_skills),
                missing_skills=list(fv.missing_skills),
                reasoning=generate_reasoning(fv),
                scoring_method=self.scoring_method,
            )
            for fv in features
        ]
