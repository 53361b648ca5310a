"""Sample texts and labeled data shared across test modules."""

from applicant_ranker.models.schemas.feature_vector import FeatureVector

JOB_DESCRIPTION = (
    "Senior Software Engineer\n"
    "Requires 5+ years experience with C#, SQL, and Azure. Bachelor's degree required."
)

STRONG_RESUME = (
    "8 years of experience with C#, SQL, Azure, Docker. "
    "Master's degree in Computer Science. Software Engineer at Acme."
)

WEAK_RESUME = "Cashier with 1 year of retail experience. Friendly and reliable."


def make_training_set(n: int = 60) -> list[FeatureVector]:
    """Deterministic labeled vectors whose label follows the rule weights."""
    edu_levels = [0.2, 0.4, 0.6, 0.8, 1.0]
    records = []
    for i in range(n):
        ratio = (i % 6) / 5
        years = float(i % 12)
        edu = edu_levels[i % 5]
        density = (i % 4) / 3
        title = (i % 3) / 2
        label = (
            0.4 * ratio
            + 0.3 * min(years / 10, 1.0)
            + 0.15 * edu
            + 0.1 * density
            + 0.05 * title
        )
        records.append(FeatureVector(
            candidate_id=f"hist-{i}",
            skill_match_ratio=ratio,
            experience_years=years,
            education_level=edu,
            keyword_density=density,
            title_match_score=title,
            label=label,
        ))
    return records
