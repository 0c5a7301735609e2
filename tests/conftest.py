import asyncio
import httpx
import pytest

from config import Config
from services.document_service import DocumentService


class StubConfig(Config):
    API_BASE_URL = "http://query-api.test/api/v1"
    AUTH_TOKEN = "test-token"
    DEFAULT_DOCUMENT_URL = "https://example.test/sample-policy.pdf"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def answers_handler(answers, status_code=200):
    def handler(request):
        return httpx.Response(status_code, json={"answers": answers})
    return handler


@pytest.fixture
def make_service():
    def factory(handler, **overrides):
        config = type("Config", (StubConfig,), overrides)()
        transport = RecordingTransport(handler)
        return DocumentService(config, transport=transport), transport
    return factory


@pytest.fixture
def failing_service(make_service):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)
    service, _ = make_service(handler)
    return service


async def hang(request):
    await asyncio.sleep(3600)
