from pydantic import Field, field_validator

from resumatch.schemas.base import CamelModel, none_to_empty


class ExperienceEntry(CamelModel):
    company: str = ""
    role: str
    duration: str = ""
    description: str = ""

    @field_validator("company", "duration", "description", mode="before")
    @classmethod
    def _empty_strings(cls, value):
        return none_to_empty(value, "")


class EducationEntry(CamelModel):
    institution: str = ""
    degree: str
    year: str = ""

    @field_validator("institution", "year", mode="before")
    @classmethod
    def _empty_strings(cls, value):
        return none_to_empty(value, "")


class ResumeData(CamelModel):
    name: str = Field(description="Full name of the candidate")
    email: str = ""
    phone: str = ""
    skills: list[str]
    experience: list[ExperienceEntry]
    education: list[EducationEntry] = []
    summary: str = ""

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("email", "phone", "summary", mode="before")
    @classmethod
    def _empty_strings(cls, value):
        return none_to_empty(value, "")

    @field_validator("education", mode="before")
    @classmethod
    def _empty_list(cls, value):
        return none_to_empty(value, [])

    @property
    def latest_role(self) -> ExperienceEntry | None:
        return self.experience[0] if self.experience else None

    @property
    def latest_education(self) -> EducationEntry | None:
        return self.education[0] if self.education else None
