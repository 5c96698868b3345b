"""
Pytest Configuration and Fixtures
"""

import json
from typing import Callable, List

import httpx
import pytest

from fyp_report.config import Settings
from fyp_report.docx_engine.models import DocumentTree
from fyp_report.models import ChapterContent


class FakeEncoder:
    """Records the trees it is given instead of writing DOCX."""

    def __init__(self, payload: bytes = b"fake-docx"):
        self.payload = payload
        self.trees: List[DocumentTree] = []

    def encode(self, tree: DocumentTree) -> bytes:
        self.trees.append(tree)
        return self.payload


class RecordingHandler:
    """MockTransport handler that counts calls and replays a fixed response."""

    def __init__(self, status_code: int = 200, body=None, content: bytes = None):
        self.status_code = status_code
        self.body = body
        self.content = content
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def payload(self, index: int = 0) -> dict:
        return json.loads(self.requests[index].content)


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def settings():
    """Test settings pointing at a fake generation service"""
    return Settings(GENERATE_API_URL="http://testserver", GENERATE_PATH="/api/generate")


@pytest.fixture
def fake_encoder():
    return FakeEncoder()


@pytest.fixture
def sample_chapters():
    """Two generated chapters"""
    return [
        ChapterContent(title="Chapter 1", content=["Objective text", "Problem text"]),
        ChapterContent(title="Chapter 2", content=["Review text"]),
    ]


@pytest.fixture
def handler_factory():
    """Build a RecordingHandler: handler_factory(status_code=..., body=...)"""
    return RecordingHandler


@pytest.fixture
def client_factory():
    """Build an httpx.AsyncClient backed by a MockTransport handler"""
    return make_client
