"""Lexical feature extraction for one (job description, resume) pair.

Every function here is total over str input: empty or malformed text yields
zero-valued features rather than an error.
"""

import math
import re

from applicant_ranker.models.requests import ResumeDocument
from applicant_ranker.models.schemas.feature_vector import FeatureVector
from applicant_ranker.services.skill_lexicon import SKILL_LEXICON, find_skills

# "5 years", "10+ yrs", "3yr"
_EXPERIENCE_RE = re.compile(r"(\d+)\+?\s*(?:years?|yrs?)", re.IGNORECASE)

# Checked in order; the first family with a hit decides the level.
EDUCATION_LEVELS: list[tuple[float, tuple[str, ...]]] = [
    (1.0, ("phd", "ph.d", "doctorate")),
    (0.8, ("master", "mba", "m.s")),
    (0.6, ("bachelor", "b.s", "b.a")),
    (0.4, ("associate", "diploma")),
]
BASE_EDUCATION_LEVEL = 0.2

_TOKEN_SPLIT_RE = re.compile(r"[ ,.;\n]+")
_MIN_KEYWORD_LEN = 4

ROLE_INDICATORS = ("engineer", "developer", "manager", "analyst")


def compute_skill_match(
    job_text: str,
    resume_text: str,
    lexicon: tuple[str, ...] = SKILL_LEXICON,
) -> tuple[float, list[str], list[str]]:
    """Return (match ratio, matched skills, missing skills)."""
    job_skills = find_skills(job_text, lexicon)
    resume_skills = {s.lower() for s in find_skills(resume_text, lexicon)}

    matched = [s for s in job_skills if s.lower() in resume_skills]
    missing = [s for s in job_skills if s.lower() not in resume_skills]
    ratio = len(matched) / len(job_skills) if job_skills else 0.0
    return ratio, matched, missing


def extract_experience_years(text: str) -> float:
    """Largest "N years" / "N+ yrs" figure mentioned in the text, 0 if none."""
    # Digit runs too long for a float come back as inf and are ignored.
    years = [float(m.group(1)) for m in _EXPERIENCE_RE.finditer(text or "")]
    years = [y for y in years if math.isfinite(y)]
    return max(years) if years else 0.0


def extract_education_level(text: str) -> float:
    lowered = (text or "").lower()
    for level, keywords in EDUCATION_LEVELS:
        if any(kw in lowered for kw in keywords):
            return level
    return BASE_EDUCATION_LEVEL


def _tokenize(text: str) -> list[str]:
    return [t for t in _TOKEN_SPLIT_RE.split((text or "").lower()) if t]


def compute_keyword_density(job_text: str, resume_text: str) -> float:
    """Fraction of distinct job-description words (4+ chars) present in the resume."""
    job_words = {w for w in _tokenize(job_text) if len(w) >= _MIN_KEYWORD_LEN}
    if not job_words:
        return 0.0
    resume_words = set(_tokenize(resume_text))
    return len(job_words & resume_words) / len(job_words)


def extract_job_title(job_text: str) -> str:
    """First non-empty line of the job description."""
    for line in (job_text or "").split("\n"):
        stripped = line.strip()
        if stripped:
            return stripped
    return ""


def extract_candidate_titles(resume_text: str) -> list[str]:
    """Resume lines that look like job titles (mention a role word)."""
    titles: list[str] = []
    for line in (resume_text or "").split("\n"):
        lowered = line.lower()
        if any(role in lowered for role in ROLE_INDICATORS):
            titles.append(line.strip())
    return titles


def compute_title_match(job_title: str, candidate_titles: list[str]) -> float:
    """Best share of job-title words found in any candidate title line."""
    job_words = job_title.lower().split()
    if not job_words or not candidate_titles:
        return 0.0

    job_set = set(job_words)
    best = 0.0
    for title in candidate_titles:
        common = job_set & set(title.lower().split())
        best = max(best, len(common) / len(job_words))
    return best


def extract_features(
    job_description: str,
    resume: ResumeDocument,
    lexicon: tuple[str, ...] = SKILL_LEXICON,
) -> FeatureVector:
    """Build the feature vector of one resume against one job description."""
    job_description = job_description or ""
    resume_text = resume.text or ""

    ratio, matched, missing = compute_skill_match(job_description, resume_text, lexicon)
    job_title = extract_job_title(job_description)
    candidate_titles = extract_candidate_titles(resume_text)

    return FeatureVector(
        candidate_id=resume.candidate_id,
        skill_match_ratio=ratio,
        experience_years=extract_experience_years(resume_text),
        education_level=extract_education_level(resume_text),
        keyword_density=compute_keyword_density(job_description, resume_text),
        title_match_score=compute_title_match(job_title, candidate_titles),
        matched_skills=matched,
        missing_skills=missing,
    )
