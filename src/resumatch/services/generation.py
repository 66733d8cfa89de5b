import json
import logging
from typing import TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def generate_structured(
    client: genai.Client,
    prompt: str,
    schema: type[SchemaT],
    model: str,
    temperature: float | None = None,
) -> SchemaT:
    """Run a schema-constrained Gemini call and validate the JSON it returns.

    The same pydantic model is sent as ``response_schema`` and then used to
    validate the response, so a reply that ignores the schema raises
    ``pydantic.ValidationError`` instead of reaching the caller.
    """
    config = types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=schema,
        temperature=temperature,
    )
    response = await client.aio.models.generate_content(
        model=model,
        contents=prompt,
        config=config,
    )

    raw = response.text or "{}"
    logger.debug("Gemini returned %d characters for %s", len(raw), schema.__name__)
    data = json.loads(raw)
    return schema.model_validate(data)
