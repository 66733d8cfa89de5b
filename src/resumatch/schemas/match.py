from pydantic import Field, field_serializer, field_validator

from resumatch.schemas.base import CamelModel, none_to_empty


class MatchResult(CamelModel):
    score: float = Field(description="Match score from 0 to 100")
    matching_skills: list[str]
    missing_skills: list[str]
    strengths: list[str] = []
    weaknesses: list[str] = []
    improvement_suggestions: str = Field(description="Markdown formatted suggestions")
    overall_feedback: str = ""

    @field_serializer("score")
    def _whole_score(self, score: float) -> int | float:
        # Whole scores go out as integers, e.g. 72 rather than 72.0
        return int(score) if score.is_integer() else score

    @field_validator("strengths", "weaknesses", mode="before")
    @classmethod
    def _empty_lists(cls, value):
        return none_to_empty(value, [])

    @field_validator("overall_feedback", mode="before")
    @classmethod
    def _empty_string(cls, value):
        return none_to_empty(value, "")
