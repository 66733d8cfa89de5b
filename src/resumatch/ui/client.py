import logging
from typing import Any

import httpx
from pydantic import ValidationError

from resumatch.core.config import Settings
from resumatch.schemas.match import MatchResult
from resumatch.schemas.resume import ResumeData

logger = logging.getLogger(__name__)

PARSE_RESUME_PATH = "/api/parse-resume"
MATCH_JOB_PATH = "/api/match-job"


class ApiError(Exception):
    """A backend call failed. ``message`` is safe to show to the user."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ResumatchClient:
    """Talks to the analysis backend on behalf of the UI."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResumatchClient":
        return cls(settings.backend_url, timeout=settings.backend_timeout)

    async def parse_resume(self, text: str) -> ResumeData:
        data = await self._post(PARSE_RESUME_PATH, {"text": text}, "Failed to parse resume")
        return self._validate(ResumeData, data)

    async def match_job(self, resume_text: str, job_description: str) -> MatchResult:
        data = await self._post(
            MATCH_JOB_PATH,
            {"resumeText": resume_text, "jobDescription": job_description},
            "Failed to match job",
        )
        return self._validate(MatchResult, data)

    async def _post(self, path: str, payload: dict[str, Any], fallback: str) -> Any:
        # A fresh client per call: Streamlit callbacks each run in their own event loop
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(path, json=payload)
            except httpx.HTTPError as e:
                logger.warning("Request to %s failed: %s", path, e)
                raise ApiError(f"{fallback}: {e}") from e

        if response.is_error:
            raise ApiError(_error_message(response, fallback), response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"{fallback}: response was not JSON", response.status_code) from e

    @staticmethod
    def _validate(schema, data: Any):
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise ApiError(f"Malformed {schema.__name__} response: {e}") from e


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return fallback
