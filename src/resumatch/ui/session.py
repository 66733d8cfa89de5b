"""Client-side orchestration of the upload -> job info -> analysis flow.

``MatchSession`` owns everything the UI shows: the extracted resume text,
the parsed ``ResumeData``, the current ``MatchResult`` and the last error.
It knows nothing about Streamlit so it can be driven directly from tests.
"""

import logging
from enum import IntEnum
from typing import Protocol

from resumatch.core.exceptions import ExtractionError
from resumatch.schemas.match import MatchResult
from resumatch.schemas.resume import ResumeData
from resumatch.ui.client import ApiError
from resumatch.ui.text_extraction import extract_text

logger = logging.getLogger(__name__)

PARSE_FAILED_MESSAGE = "Failed to parse resume. Please try again or use a different file."
MATCH_FAILED_MESSAGE = "Failed to analyze match. Please try again."


class Step(IntEnum):
    IDLE = 1
    PARSED = 2
    MATCHED = 3


class AnalysisClient(Protocol):
    async def parse_resume(self, text: str) -> ResumeData: ...

    async def match_job(self, resume_text: str, job_description: str) -> MatchResult: ...


class SessionBusyError(RuntimeError):
    """Raised when an operation starts while another is still in flight."""


class MatchSession:
    def __init__(self, client: AnalysisClient) -> None:
        self.client = client
        self.busy = False
        self._clear()

    def _clear(self) -> None:
        self.step = Step.IDLE
        self.filename: str | None = None
        self.resume_text = ""
        self.job_description = ""
        self.resume_data: ResumeData | None = None
        self.match_result: MatchResult | None = None
        self.error: str | None = None
        self.error_detail: str | None = None

    def _start(self) -> None:
        if self.busy:
            raise SessionBusyError("Another request is already in progress")
        self.busy = True
        self.error = None
        self.error_detail = None

    def _fail(self, message: str, exc: Exception) -> None:
        self.error = message
        self.error_detail = getattr(exc, "message", None) or str(exc)

    @property
    def can_analyze(self) -> bool:
        return (
            self.step >= Step.PARSED
            and not self.busy
            and bool(self.resume_text)
            and bool(self.job_description.strip())
        )

    async def load_resume(self, filename: str, data: bytes) -> bool:
        """Extract and parse a dropped file. Returns True on success."""
        self._start()
        try:
            text = extract_text(filename, data)
            parsed = await self.client.parse_resume(text)
        except (ExtractionError, ApiError) as e:
            logger.error("Resume %s could not be parsed: %s", filename, e)
            self._clear()
            self._fail(PARSE_FAILED_MESSAGE, e)
            return False
        finally:
            self.busy = False

        self.filename = filename
        self.resume_text = text
        self.resume_data = parsed
        self.match_result = None
        self.step = Step.PARSED
        return True

    async def analyze_match(self, job_description: str | None = None) -> bool:
        """Score the loaded resume against the job description."""
        if job_description is not None:
            self.job_description = job_description
        if not self.resume_text or not self.job_description.strip():
            return False

        self._start()
        try:
            result = await self.client.match_job(self.resume_text, self.job_description)
        except ApiError as e:
            logger.error("Job match failed: %s", e)
            self.match_result = None
            self.step = Step.PARSED
            self._fail(MATCH_FAILED_MESSAGE, e)
            return False
        finally:
            self.busy = False

        self.match_result = result
        self.step = Step.MATCHED
        return True

    def try_another_job(self) -> None:
        if self.step != Step.MATCHED:
            return
        self.match_result = None
        self.error = None
        self.error_detail = None
        self.step = Step.PARSED

    def reset(self) -> None:
        # An in-flight call is not cancelled; only local state is dropped
        self._clear()
