from google import genai

from resumatch.schemas.match import MatchResult
from resumatch.services.generation import generate_structured

MATCH_PROMPT = (
    "Compare the following resume against the job description.\n"
    "Provide a detailed analysis including a match score (0-100), "
    "matching skills, missing skills, strengths, weaknesses, "
    "and specific suggestions to improve the resume for this role.\n"
    "Write the improvement suggestions as Markdown.\n\n"
    "Resume:\n{resume_text}\n\n"
    "Job Description:\n{job_description}"
)


def build_match_prompt(resume_text: str, job_description: str) -> str:
    return MATCH_PROMPT.format(resume_text=resume_text, job_description=job_description)


async def match_resume_to_job(
    client: genai.Client,
    resume_text: str,
    job_description: str,
    model: str,
    temperature: float | None = None,
) -> MatchResult:
    """Ask Gemini how well a resume fits a job description."""
    return await generate_structured(
        client,
        build_match_prompt(resume_text, job_description),
        MatchResult,
        model=model,
        temperature=temperature,
    )
