"""
Provider adapters for CV tailoring.

Each adapter turns (cv_text, job_description) into a prompt, calls its
vendor once and returns the raw text. Adapters do not validate input and do
not retry; vendor errors propagate to the caller unchanged.
"""
import logging
from typing import Optional, Protocol

from google import genai
from google.genai import types
from openai import AsyncOpenAI

from shared.schemas.tailor import OutputFormat
from .errors import ProviderConfigurationError
from .prompts import SYSTEM_INSTRUCTION, build_prompt

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_OPENAI_MODEL = "gpt-5-nano"


class ProviderAdapter(Protocol):
    """Anything the tailoring handler can dispatch a request to."""

    async def generate(self, cv_text: str, job_description: str) -> str:
        ...


class GeminiAdapter:
    """Google Gemini adapter built on the google-genai SDK."""

    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_GEMINI_MODEL,
        output_format: OutputFormat = OutputFormat.JSON,
        client: Optional[genai.Client] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.output_format = OutputFormat(output_format)
        self._client = client

    def get_client(self) -> genai.Client:
        """Get or create the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise ProviderConfigurationError(
                    "Gemini API key not set. Set GEMINI_API_KEY environment variable."
                )
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def _generation_config(self) -> types.GenerateContentConfig:
        if self.output_format == OutputFormat.JSON:
            return types.GenerateContentConfig(
                system_instruction=SYSTEM_INSTRUCTION,
                response_mime_type="application/json",
            )
        return types.GenerateContentConfig(system_instruction=SYSTEM_INSTRUCTION)

    async def generate(self, cv_text: str, job_description: str) -> str:
        client = self.get_client()
        prompt = build_prompt(cv_text, job_description, self.output_format)

        logger.debug(f"Calling Gemini (model={self.model}, format={self.output_format.value})")
        response = await client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=self._generation_config(),
        )
        return response.text or ""


class OpenAIAdapter:
    """OpenAI adapter built on the Chat Completions API."""

    name = "openai"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_OPENAI_MODEL,
        output_format: OutputFormat = OutputFormat.JSON,
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.output_format = OutputFormat(output_format)
        self.base_url = base_url
        self._client = client

    def get_client(self) -> AsyncOpenAI:
        """Get or create the OpenAI client."""
        if self._client is None:
            if not self.api_key:
                raise ProviderConfigurationError(
                    "OpenAI API key not set. Set OPENAI_API_KEY environment variable."
                )
            self._client = AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._client

    async def generate(self, cv_text: str, job_description: str) -> str:
        client = self.get_client()
        prompt = build_prompt(cv_text, job_description, self.output_format)

        kwargs = {}
        if self.output_format == OutputFormat.JSON:
            kwargs["response_format"] = {"type": "json_object"}

        logger.debug(f"Calling OpenAI (model={self.model}, format={self.output_format.value})")
        response = await client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": prompt},
            ],
            **kwargs,
        )
        return response.choices[0].message.content or ""
