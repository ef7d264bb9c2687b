"""
Error taxonomy for CV tailoring.

Every error carries the HTTP status and the message that is safe to show the
client. Provider details stay in the server logs.
"""

PROVIDER_ERROR_MESSAGE = "An internal API error occurred while generating the CV"
INVALID_JSON_MESSAGE = "AI output was not a valid JSON, please try again with a simpler prompt!"
MISSING_FIELD_MESSAGE = "Missing required field: cv_text, job_description, or selected_model."
INVALID_MODEL_MESSAGE = "Invalid model selected: Choose openai or gemini"


class TailorError(Exception):
    """Base class for failures surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(TailorError):
    """Missing field or unknown provider in the request."""

    status_code = 400


class OutputContractError(TailorError):
    """The provider answered but its output was not valid JSON."""

    def __init__(self, message: str = INVALID_JSON_MESSAGE):
        super().__init__(message)


class ProviderError(TailorError):
    """The provider call failed (network, auth, quota, timeout, bad response)."""

    def __init__(self, message: str = PROVIDER_ERROR_MESSAGE):
        super().__init__(message)


class ProviderConfigurationError(RuntimeError):
    """Raised by an adapter when its API key is not configured."""
