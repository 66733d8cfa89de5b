from google import genai

from resumatch.schemas.resume import ResumeData
from resumatch.services.generation import generate_structured

PARSE_PROMPT = (
    "Extract structured information from the following resume text. "
    "Return a JSON object.\n"
    "Include the candidate's name, contact details, every skill, "
    "each work experience entry and each education entry.\n"
    "If a field is not found, leave it as an empty string or empty list.\n\n"
    "Resume Text:\n{text}"
)


def build_parse_prompt(text: str) -> str:
    return PARSE_PROMPT.format(text=text)


async def parse_resume(
    client: genai.Client,
    text: str,
    model: str,
    temperature: float | None = None,
) -> ResumeData:
    """Send resume text to Gemini and get structured resume data back."""
    return await generate_structured(
        client,
        build_parse_prompt(text),
        ResumeData,
        model=model,
        temperature=temperature,
    )
