from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    llm_configured: bool
    model: str
    version: str


class StatusResponse(BaseModel):
    status: str
