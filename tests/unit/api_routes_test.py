"""Tests for the FastAPI routes."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi.testclient import TestClient

from doc_xref.api.app import create_app
from doc_xref.api.dependencies import get_highlighter
from doc_xref.core.ports.highlighter import Highlighter
from doc_xref.highlighter.tree_sitter_adapter import TreeSitterHighlighter
from doc_xref.models import SourceFile, TokenTree


@pytest.fixture
def client(highlighter: TreeSitterHighlighter) -> TestClient:
    app = create_app()

    async def _override() -> AsyncIterator[Highlighter]:
        yield highlighter

    app.dependency_overrides[get_highlighter] = _override
    return TestClient(app)


class _BrokenHighlighter:
    async def tokenize(self, code: str, language: str, theme: str) -> TokenTree:
        return TokenTree(language=language, theme=theme)


class TestRootRoute:
    def test_root_returns_discovery(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        body = resp.json()
        assert body["meta"]["title"] == "Doc Xref API"
        assert body["links"]["render"] == "/highlight/render"


class TestHealthRoutes:
    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_liveness_returns_ok(self, client: TestClient) -> None:
        resp = client.get("/healthz/live")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_readiness_ok(self, client: TestClient) -> None:
        resp = client.get("/healthz/ready")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "highlighter": "up"}

    def test_readiness_degraded(self) -> None:
        app = create_app()

        async def _override() -> AsyncIterator[Highlighter]:
            yield _BrokenHighlighter()

        app.dependency_overrides[get_highlighter] = _override
        resp = TestClient(app).get("/healthz/ready")
        assert resp.status_code == 503
        assert resp.json()["highlighter"] == "down"


class TestIdentifierRoute:
    def test_highlights_occurrences(self, client: TestClient, counter_source: SourceFile) -> None:
        resp = client.post("/highlight/identifier", json={"source": counter_source.content, "raw": "FHE.add()"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["identifier"] == "FHE.add"
        assert body["config"] == {"lines": [11], "tokens": [{"line": 11, "column": 17, "length": 7}]}

    def test_empty_identifier_returns_empty_config(self, client: TestClient) -> None:
        resp = client.post("/highlight/identifier", json={"source": "a;", "raw": ";"})
        assert resp.status_code == 200
        assert resp.json() == {"identifier": "", "config": {"lines": [], "tokens": []}}

    def test_missing_field_is_rejected(self, client: TestClient) -> None:
        assert client.post("/highlight/identifier", json={"raw": "x"}).status_code == 422


class TestBlockRoute:
    def test_finds_snippet(self, client: TestClient, counter_source: SourceFile) -> None:
        snippet = "  _count = FHE.add(_count, encryptedEuint32);\n    FHE.allowThis(_count);  "
        resp = client.post("/highlight/block", json={"source": counter_source.content, "snippet": snippet})
        assert resp.json() == {"lines": [11, 12]}

    def test_missing_snippet_returns_no_lines(self, client: TestClient, counter_source: SourceFile) -> None:
        resp = client.post("/highlight/block", json={"source": counter_source.content, "snippet": "nope();"})
        assert resp.json() == {"lines": []}


class TestRenderRoute:
    def test_renders_with_highlight(self, client: TestClient) -> None:
        resp = client.post(
            "/highlight/render",
            json={
                "code": "x = 1\ny = x",
                "language": "py",
                "config": {"lines": [2], "tokens": [{"line": 2, "column": 4, "length": 1}]},
            },
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["tree"]["language"] == "python"
        assert body["tree"]["lines"][1]["markers"] == ["subtle"]
        assert 'data-line="2"' in body["html"]
        assert body["html"].count("bg-amber-400/30") == 1

    def test_explicit_theme(self, client: TestClient) -> None:
        resp = client.post("/highlight/render", json={"code": "x", "theme": "github-light"})
        assert resp.json()["tree"]["theme"] == "github-light"

    def test_theme_from_environment(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DOC_XREF_THEME", "github-light")
        resp = client.post("/highlight/render", json={"code": "x"})
        assert resp.json()["tree"]["theme"] == "github-light"

    def test_rejects_line_numbers_below_one(self, client: TestClient) -> None:
        resp = client.post("/highlight/render", json={"code": "x", "config": {"lines": [0, -3]}})
        assert resp.status_code == 422

    def test_unsupported_language(self, client: TestClient) -> None:
        resp = client.post("/highlight/render", json={"code": "x", "language": "cobol"})
        assert resp.status_code == 422
        assert "Unsupported language" in resp.json()["detail"]
