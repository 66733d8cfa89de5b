from google import genai

from resumatch.core.config import Settings


def get_gemini_client(settings: Settings) -> genai.Client:
    """Create a Gemini API client using the configured API key."""
    return genai.Client(api_key=settings.gemini_api_key)
