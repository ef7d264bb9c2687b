import asyncio
import json
import logging
import re
from typing import Any, Mapping, Optional

from shared.schemas.tailor import ModelProvider, OutputFormat, TailorRequest, TailorResult
from .errors import (
    ClientInputError,
    OutputContractError,
    ProviderError,
    INVALID_MODEL_MESSAGE,
    MISSING_FIELD_MESSAGE,
)
from .providers import ProviderAdapter

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_json_output(raw: str) -> Any:
    """
    Parse provider output as a JSON document.

    Surrounding whitespace and a single wrapping markdown code fence are
    removed first. NaN and Infinity literals are rejected.

    Raises:
        OutputContractError: if the text is not valid JSON
    """
    cleaned = raw.strip()
    match = _CODE_FENCE.match(cleaned)
    if match:
        cleaned = match.group(1).strip()

    try:
        return json.loads(cleaned, parse_constant=_reject_constant)
    # ValueError covers JSONDecodeError and the integer digit limit
    except (ValueError, RecursionError, TypeError) as e:
        logger.error(f"Failed to parse AI output as JSON: {e}. Raw output: {raw[:500]!r}")
        raise OutputContractError() from e


class TailorHandler:
    """
    Validates a tailoring request, routes it to one provider adapter and
    normalizes the provider's output.

    Adapters are long-lived and shared by all requests; the handler keeps no
    per-request state.
    """

    def __init__(
        self,
        adapters: Mapping[ModelProvider, ProviderAdapter],
        output_format: OutputFormat = OutputFormat.JSON,
        provider_timeout: Optional[float] = None,
    ):
        self.adapters = dict(adapters)
        self.output_format = OutputFormat(output_format)
        self.provider_timeout = provider_timeout

    def resolve_provider(self, selected_model: str) -> ModelProvider:
        try:
            provider = ModelProvider(selected_model)
        except ValueError:
            raise ClientInputError(INVALID_MODEL_MESSAGE) from None
        if provider not in self.adapters:
            raise ClientInputError(INVALID_MODEL_MESSAGE)
        return provider

    async def handle(self, request: TailorRequest) -> TailorResult:
        """
        Run one tailoring request.

        Raises:
            ClientInputError: missing field or unknown provider (nothing is called)
            ProviderError: the provider call failed or timed out
            OutputContractError: JSON was requested but the provider returned something else
        """
        if not request.cv_text or not request.job_description or not request.selected_model:
            raise ClientInputError(MISSING_FIELD_MESSAGE)

        provider = self.resolve_provider(request.selected_model)
        adapter = self.adapters[provider]
        logger.info(f"Routing request to {provider.value} model")

        raw = await self._call_provider(provider, adapter, request.cv_text, request.job_description)

        if self.output_format == OutputFormat.JSON:
            tailored = parse_json_output(raw)
        else:
            tailored = raw

        return TailorResult(
            provider=provider,
            output_format=self.output_format,
            tailored_cv_object=tailored,
        )

    async def _call_provider(
        self,
        provider: ModelProvider,
        adapter: ProviderAdapter,
        cv_text: str,
        job_description: str,
    ) -> str:
        try:
            call = adapter.generate(cv_text, job_description)
            if self.provider_timeout is not None:
                return await asyncio.wait_for(call, timeout=self.provider_timeout)
            return await call
        except asyncio.TimeoutError as e:
            logger.error(f"{provider.value} call timed out after {self.provider_timeout}s")
            raise ProviderError() from e
        except Exception as e:
            logger.error(f"API ERROR ({provider.value}): {e}")
            raise ProviderError() from e
