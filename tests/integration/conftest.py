from collections.abc import Callable

import httpx
import pytest

from app.config.settings import Settings
from app.processor.processor import DocumentPipeline, build_pipeline


class FakeServer:
    """Routes request paths to (status, content-type, body) and records requests."""

    def __init__(self, routes: dict[str, tuple[int, str, bytes]]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, content_type, body = self.routes.get(
            request.url.path, (404, "text/plain", b"not found")
        )
        return httpx.Response(status, headers={"content-type": content_type}, content=body)


@pytest.fixture
def settings() -> Settings:
    return Settings(generative_provider="example", document_understanding_engine="pdfplumber")


@pytest.fixture
def serve(
    settings: Settings,
) -> Callable[[dict[str, tuple[int, str, bytes]]], tuple[DocumentPipeline, FakeServer]]:
    """Build a pipeline whose HTTP traffic is answered by a FakeServer."""

    def _serve(
        routes: dict[str, tuple[int, str, bytes]],
    ) -> tuple[DocumentPipeline, FakeServer]:
        server = FakeServer(routes)
        return build_pipeline(settings, transport=httpx.MockTransport(server)), server

    return _serve
