from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class ModelProvider(str, Enum):
    """Generative-text providers a tailoring request can be routed to."""

    GEMINI = "gemini"
    OPENAI = "openai"


class OutputFormat(str, Enum):
    """Prompt variant sent to the provider."""

    JSON = "json"
    MARKDOWN = "markdown"


class TailorRequest(BaseModel):
    """Request to tailor a CV for a job description.

    Fields are optional on the wire so a missing value is reported by the
    tailoring handler with a 400 error envelope instead of a framework 422.
    """

    cv_text: Optional[str] = Field(None, description="Original CV text")
    job_description: Optional[str] = Field(None, description="Target job description")
    selected_model: Optional[str] = Field(None, description="Provider to use: gemini or openai")


class TailorResult(BaseModel):
    """Normalized output of one tailoring request."""

    provider: ModelProvider = Field(..., description="Provider that generated the CV")
    output_format: OutputFormat = Field(..., description="Prompt variant that was used")
    tailored_cv_object: Any = Field(..., description="Parsed JSON document, or raw markdown text")


class TailorSuccessResponse(BaseModel):
    """Success envelope returned by POST /api/tailor."""

    success: bool = Field(True, description="Always true for a successful response")
    tailored_cv_object: Any = Field(..., description="Tailored CV as a JSON object or markdown string")


class ErrorResponse(BaseModel):
    """Error envelope for every 4xx/5xx response."""

    error: str = Field(..., description="Human-readable error message")
