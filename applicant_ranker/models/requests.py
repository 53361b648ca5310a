from pydantic import BaseModel, ConfigDict


class ResumeDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    candidate_id: str
    text: str = ""


class LabeledPair(BaseModel):
    """A historical (job, resume) pair with its observed outcome label."""
    job_description: str = ""
    resume_text: str = ""
    label: float
    candidate_id: str = ""
