from pydantic import BaseModel

from resumatch.schemas.base import CamelModel


class ParseResumeRequest(CamelModel):
    text: str | None = None


class MatchJobRequest(CamelModel):
    resume_text: str | None = None
    job_description: str | None = None


class ErrorResponse(BaseModel):
    error: str
