from .tailor import (
    ModelProvider,
    OutputFormat,
    TailorRequest,
    TailorResult,
    TailorSuccessResponse,
    ErrorResponse,
)

__all__ = [
    "ModelProvider",
    "OutputFormat",
    "TailorRequest",
    "TailorResult",
    "TailorSuccessResponse",
    "ErrorResponse",
]
