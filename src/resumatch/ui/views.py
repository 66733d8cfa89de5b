from resumatch.schemas.resume import ResumeData

SKILL_PREVIEW_LIMIT = 8


def format_score(score: float) -> str:
    if float(score).is_integer():
        return f"{int(score)}%"
    return f"{score:.1f}%"


def score_band(score: float) -> str:
    if score >= 80:
        return "strong"
    if score >= 60:
        return "fair"
    return "weak"


def score_progress(score: float) -> float:
    """Fraction for a progress bar; the score itself is never clamped."""
    return max(0.0, min(1.0, score / 100))


def skill_preview(skills: list[str], limit: int = SKILL_PREVIEW_LIMIT) -> tuple[list[str], int]:
    """First ``limit`` skills and how many were left out."""
    return skills[:limit], max(0, len(skills) - limit)


def skill_badges(skills: list[str]) -> str:
    if not skills:
        return "_None_"
    return " ".join(f"`{skill}`" for skill in skills)


def bullet_list(items: list[str]) -> str:
    if not items:
        return "_None_"
    return "\n".join(f"- {item}" for item in items)


def latest_role_line(resume: ResumeData) -> str:
    role = resume.latest_role
    if role is None:
        return "No experience listed"
    if role.company:
        return f"{role.role} at {role.company}"
    return role.role


def contact_line(resume: ResumeData) -> str:
    return " · ".join(part for part in (resume.email, resume.phone) if part)


def education_line(resume: ResumeData) -> str | None:
    edu = resume.latest_education
    if edu is None:
        return None
    details = " • ".join(part for part in (edu.institution, edu.year) if part)
    return f"**{edu.degree}**  \n{details}" if details else f"**{edu.degree}**"
