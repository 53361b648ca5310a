from pydantic import BaseModel

RULE_BASED = "rule_based"
MODEL = "model"


class ScoreResult(BaseModel):
    candidate_id: str
    score: float = 0.0  # rule-based 0-100, model-based unclipped
    experience_match: float = 0.0  # 0.0-1.0
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    reasoning: str = ""
    scoring_method: str = RULE_BASED  # rule_based | model
