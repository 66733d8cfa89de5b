"""Unit tests for UI formatting helpers."""

import pytest

from resumatch.schemas.resume import ResumeData
from resumatch.ui import views
from tests.conftest import make_resume_payload

pytestmark = pytest.mark.unit


class TestScore:
    @pytest.mark.parametrize(
        ("score", "expected"), [(72, "72%"), (72.0, "72%"), (0, "0%"), (88.4, "88.4%")]
    )
    def test_format_score(self, score: float, expected: str) -> None:
        assert views.format_score(score) == expected

    @pytest.mark.parametrize(
        ("score", "band"), [(95, "strong"), (80, "strong"), (79.9, "fair"), (60, "fair"), (10, "weak")]
    )
    def test_score_band(self, score: float, band: str) -> None:
        assert views.score_band(score) == band

    def test_score_progress_clamps_for_display_only(self) -> None:
        assert views.score_progress(72) == 0.72
        assert views.score_progress(140) == 1.0
        assert views.score_progress(-5) == 0.0


class TestSkills:
    def test_skill_preview_limits(self) -> None:
        skills = [f"skill{i}" for i in range(11)]
        shown, more = views.skill_preview(skills)
        assert shown == skills[:8]
        assert more == 3

    def test_skill_preview_short_list(self) -> None:
        assert views.skill_preview(["Python", "AWS"]) == (["Python", "AWS"], 0)

    def test_skill_badges(self) -> None:
        assert views.skill_badges(["Python", "AWS"]) == "`Python` `AWS`"
        assert views.skill_badges([]) == "_None_"

    def test_bullet_list(self) -> None:
        assert views.bullet_list(["a", "b"]) == "- a\n- b"


class TestResumeLines:
    def test_latest_role_line(self) -> None:
        resume = ResumeData.model_validate(make_resume_payload())
        assert views.latest_role_line(resume) == "Software Engineer at Acme Corp"

    def test_latest_role_line_without_experience(self) -> None:
        resume = ResumeData.model_validate(make_resume_payload(experience=[]))
        assert views.latest_role_line(resume) == "No experience listed"

    def test_contact_line_skips_empty_parts(self) -> None:
        resume = ResumeData.model_validate(make_resume_payload(phone=""))
        assert views.contact_line(resume) == "john@example.com"

    def test_education_line(self) -> None:
        resume = ResumeData.model_validate(make_resume_payload())
        assert views.education_line(resume) == "**BS Computer Science**  \nMIT • 2019"
        assert views.education_line(ResumeData.model_validate(make_resume_payload(education=[]))) is None
