import logging

from fastapi import APIRouter, Depends
from google import genai

from resumatch.api.deps import get_app_settings, get_llm_client
from resumatch.core.config import Settings
from resumatch.core.exceptions import InvalidInputError, UpstreamError
from resumatch.schemas.match import MatchResult
from resumatch.schemas.requests import ErrorResponse, MatchJobRequest, ParseResumeRequest
from resumatch.schemas.resume import ResumeData
from resumatch.services.job_matcher import match_resume_to_job
from resumatch.services.resume_parser import parse_resume

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _require_client(llm_client: genai.Client | None) -> genai.Client:
    if llm_client is None:
        raise RuntimeError("GEMINI_API_KEY is not set in environment variables")
    return llm_client


@router.post("/parse-resume", response_model=ResumeData, responses=ERROR_RESPONSES)
async def parse_resume_endpoint(
    body: ParseResumeRequest,
    settings: Settings = Depends(get_app_settings),
    llm_client: genai.Client | None = Depends(get_llm_client),
) -> ResumeData:
    """Extract structured fields from resume text."""
    if _is_blank(body.text):
        raise InvalidInputError("No text provided")

    try:
        return await parse_resume(
            _require_client(llm_client),
            body.text,
            settings.gemini_model,
            temperature=settings.gemini_temperature,
        )
    except Exception as e:
        logger.exception("Error parsing resume")
        raise UpstreamError(str(e)) from e


@router.post("/match-job", response_model=MatchResult, responses=ERROR_RESPONSES)
async def match_job_endpoint(
    body: MatchJobRequest,
    settings: Settings = Depends(get_app_settings),
    llm_client: genai.Client | None = Depends(get_llm_client),
) -> MatchResult:
    """Score a resume against a job description."""
    if _is_blank(body.resume_text) or _is_blank(body.job_description):
        raise InvalidInputError("Resume text and job description are required")

    try:
        return await match_resume_to_job(
            _require_client(llm_client),
            body.resume_text,
            body.job_description,
            settings.gemini_model,
            temperature=settings.gemini_temperature,
        )
    except Exception as e:
        logger.exception("Error matching job")
        raise UpstreamError(str(e)) from e
