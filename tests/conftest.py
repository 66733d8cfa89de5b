import json
from collections.abc import AsyncIterator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from resumatch.api.deps import get_llm_client
from resumatch.core.config import Settings
from resumatch.main import create_app
from resumatch.schemas.match import MatchResult
from resumatch.schemas.resume import ResumeData
from resumatch.ui.client import ResumatchClient

TEST_MODEL = "gemini-test-model"
BASE_URL = "http://test"


def make_resume_payload(**overrides) -> dict:
    """Helper to create a ResumeData-shaped dict, as Gemini would return it."""
    data = {
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "+1234567890",
        "skills": ["Python", "AWS"],
        "experience": [
            {
                "company": "Acme Corp",
                "role": "Software Engineer",
                "duration": "2020 - 2023",
                "description": "Built APIs",
            }
        ],
        "education": [
            {
                "institution": "MIT",
                "degree": "BS Computer Science",
                "year": "2019",
            }
        ],
        "summary": "Experienced developer",
    }
    data.update(overrides)
    return data


def make_match_payload(**overrides) -> dict:
    """Helper to create a MatchResult-shaped dict in wire (camelCase) form."""
    data = {
        "score": 72,
        "matchingSkills": ["Python"],
        "missingSkills": ["Go"],
        "strengths": ["Solid backend experience"],
        "weaknesses": ["No Go experience"],
        "improvementSuggestions": "- add Go",
        "overallFeedback": "Good fit overall.",
    }
    data.update(overrides)
    return data


def make_gemini_response(data: dict | list | str | None) -> MagicMock:
    """Create a mock Gemini generate_content response.

    Strings are used verbatim so tests can feed malformed JSON.
    """
    response = MagicMock()
    if data is None or isinstance(data, str):
        response.text = data
    else:
        response.text = json.dumps(data)
    return response


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,  # Prevent reading .env file during tests
        gemini_api_key="",
        gemini_model=TEST_MODEL,
    )


@pytest.fixture
def mock_gemini_client() -> MagicMock:
    """Return a mocked google.genai.Client that parses resumes."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=make_gemini_response(make_resume_payload())
    )
    return client


@pytest.fixture
def app(settings, mock_gemini_client) -> FastAPI:
    app = create_app(settings)
    app.dependency_overrides[get_llm_client] = lambda: mock_gemini_client
    return app


@pytest_asyncio.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as ac:
        yield ac


@pytest.fixture
def api_client(app) -> ResumatchClient:
    """The UI's backend client, wired straight to the ASGI app."""
    return ResumatchClient(BASE_URL, transport=ASGITransport(app=app))


class FakeAnalysisClient:
    """Stands in for ResumatchClient: canned results or canned errors."""

    def __init__(self, resume=None, match=None, parse_error=None, match_error=None) -> None:
        self.resume = resume or ResumeData.model_validate(make_resume_payload())
        self.match = match or MatchResult.model_validate(make_match_payload())
        self.parse_error = parse_error
        self.match_error = match_error
        self.parse_calls: list[str] = []
        self.match_calls: list[tuple[str, str]] = []

    async def parse_resume(self, text: str) -> ResumeData:
        self.parse_calls.append(text)
        if self.parse_error:
            raise self.parse_error
        return self.resume

    async def match_job(self, resume_text: str, job_description: str) -> MatchResult:
        self.match_calls.append((resume_text, job_description))
        if self.match_error:
            raise self.match_error
        return self.match
