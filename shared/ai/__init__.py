from .errors import (
    TailorError,
    ClientInputError,
    OutputContractError,
    ProviderError,
    ProviderConfigurationError,
)
from .prompts import build_prompt, STRICT_JSON_PROMPT, MARKDOWN_PROMPT
from .providers import ProviderAdapter, GeminiAdapter, OpenAIAdapter
from .tailor import TailorHandler, parse_json_output

__all__ = [
    "TailorError",
    "ClientInputError",
    "OutputContractError",
    "ProviderError",
    "ProviderConfigurationError",
    "build_prompt",
    "STRICT_JSON_PROMPT",
    "MARKDOWN_PROMPT",
    "ProviderAdapter",
    "GeminiAdapter",
    "OpenAIAdapter",
    "TailorHandler",
    "parse_json_output",
]
