from fastapi import Request
from google import genai

from resumatch.core.config import Settings

__all__ = ["get_app_settings", "get_llm_client"]


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm_client(request: Request) -> genai.Client | None:
    """The client built at startup, or None when no API key was configured."""
    return request.app.state.llm_client
