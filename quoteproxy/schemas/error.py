from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(description="Machine-readable error code (e.g. upstream_unavailable)")
    detail: str = Field(description="Human-readable error message")
