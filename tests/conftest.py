import pytest
from fastapi.testclient import TestClient

from services.api.app import create_app
from services.api.config import APIConfig
from shared.ai import TailorHandler
from shared.schemas.tailor import ModelProvider, OutputFormat

ALLOWED_ORIGIN = "http://localhost:3000"

VALID_CV_JSON = '{"summary": "x"}'


class FakeAdapter:
    """Provider adapter double that records calls and returns canned output."""

    def __init__(self, output: str = VALID_CV_JSON, error: Exception = None):
        self.output = output
        self.error = error
        self.calls = []

    async def generate(self, cv_text: str, job_description: str) -> str:
        self.calls.append((cv_text, job_description))
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def gemini_adapter():
    return FakeAdapter()


@pytest.fixture
def openai_adapter():
    return FakeAdapter()


@pytest.fixture
def make_client(gemini_adapter, openai_adapter):
    """Build a TestClient around fake adapters for the given output format."""

    def _make(output_format: OutputFormat = OutputFormat.JSON, provider_timeout=None) -> TestClient:
        config = APIConfig(cors_origins=ALLOWED_ORIGIN, output_format=output_format)
        handler = TailorHandler(
            {
                ModelProvider.GEMINI: gemini_adapter,
                ModelProvider.OPENAI: openai_adapter,
            },
            output_format=output_format,
            provider_timeout=provider_timeout,
        )
        return TestClient(create_app(config=config, tailor_handler=handler))

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
