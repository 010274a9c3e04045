import os

# Settings are read at import time
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from cvexport.api.deps import get_renderer
from cvexport.auth.jwt import create_access_token
from cvexport.main import app
from cvexport.render.types import PageOptions


class FakeRenderer:
    def __init__(self, pdf_bytes: bytes):
        self.pdf_bytes = pdf_bytes
        self.calls: list[tuple[str, PageOptions]] = []

    def render_to_pdf(self, html: str, options: PageOptions) -> bytes:
        self.calls.append((html, options))
        return self.pdf_bytes


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    token = create_access_token(user_id="user-1", email="jane@example.com", tier="Premium")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def use_renderer():
    def _install(pdf_bytes: bytes) -> FakeRenderer:
        renderer = FakeRenderer(pdf_bytes)
        app.dependency_overrides[get_renderer] = lambda: renderer
        return renderer

    return _install
