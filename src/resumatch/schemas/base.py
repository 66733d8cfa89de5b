from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def none_to_empty(value, empty):
    # Gemini sometimes emits null for optional fields it could not find
    return empty if value is None else value
