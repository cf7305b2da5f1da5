"""Tests for the /api/summarise endpoint.

The pipeline is injected through ``create_app(pipeline=...)`` with a fake
fetcher and recording sinks, so no network or storage is touched.
"""

from __future__ import annotations

from typing import Generator, Optional

import pytest
from fastapi.testclient import TestClient

from backend.api.app import create_app
from backend.errors import FetchError
from backend.scraper.models import RawPage
from backend.summary.models import SummaryRecord
from backend.summary.pipeline import SummaryPipeline

_ARTICLE_HTML = (
    "<html><body><article><p>React is a library. It simplifies development. "
    "You can use it with hooks. Extra sentence ignored.</p></article></body></html>"
)


class FakeFetcher:
    def __init__(self, html: str = _ARTICLE_HTML, error: Optional[Exception] = None) -> None:
        self.html = html
        self.error = error
        self.calls: list[str] = []

    def __call__(self, url: str) -> RawPage:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return RawPage(url=url, html=self.html, status_code=200)


class RecordingSink:
    def __init__(self, name: str, error: Optional[Exception] = None) -> None:
        self.name = name
        self.error = error
        self.saved: list[SummaryRecord] = []

    def save(self, record: SummaryRecord) -> None:
        if self.error is not None:
            raise self.error
        self.saved.append(record)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture()
def sinks() -> tuple[RecordingSink, RecordingSink]:
    return RecordingSink("sqlite"), RecordingSink("mongodb")


@pytest.fixture()
def client(fetcher, sinks, no_trafilatura) -> Generator[TestClient, None, None]:
    pipeline = SummaryPipeline(fetch=fetcher, sinks=sinks)
    with TestClient(create_app(pipeline=pipeline), raise_server_exceptions=True) as c:
        yield c


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestSummarise:
    def test_success_returns_summary_and_urdu(self, client: TestClient, sinks) -> None:
        resp = client.post("/api/summarise", json={"url": "https://blog.example/react"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["summary"] == (
            "React is a library. It simplifies development. You can use it with hooks."
        )
        assert data["urdu"].startswith("ری ایکٹ ہے ایک [library.]")
        assert set(data) == {"summary", "urdu"}

    def test_success_persists_to_both_sinks(self, client: TestClient, sinks) -> None:
        client.post("/api/summarise", json={"url": "https://blog.example/react"})

        sqlite_sink, mongo_sink = sinks
        assert [r.url for r in sqlite_sink.saved] == ["https://blog.example/react"]
        assert [r.url for r in mongo_sink.saved] == ["https://blog.example/react"]
        assert "Extra sentence ignored." in mongo_sink.saved[0].full_text

    def test_failing_sink_does_not_change_response(self, fetcher, no_trafilatura) -> None:
        good = RecordingSink("sqlite")
        bad = RecordingSink("mongodb", error=RuntimeError("down"))
        pipeline = SummaryPipeline(fetch=fetcher, sinks=(good, bad))
        with TestClient(create_app(pipeline=pipeline)) as c:
            resp = c.post("/api/summarise", json={"url": "https://blog.example/react"})

        assert resp.status_code == 200
        assert resp.json()["summary"].startswith("React is a library.")
        assert len(good.saved) == 1

    @pytest.mark.parametrize("payload", [{"url": "ftp://example.com"}, {"url": ""}, {}, {"url": 7}])
    def test_invalid_url_is_400_without_fetch(self, client: TestClient, fetcher, sinks, payload) -> None:
        resp = client.post("/api/summarise", json=payload)

        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid URL"}
        assert fetcher.calls == []
        assert all(not s.saved for s in sinks)

    def test_fetch_failure_is_500(self, client: TestClient, fetcher, sinks) -> None:
        fetcher.error = FetchError("https://blog.example/", "timed out")
        resp = client.post("/api/summarise", json={"url": "https://blog.example/"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to fetch the page: timed out"}
        assert all(not s.saved for s in sinks)

    def test_short_content_is_400(self, client: TestClient, fetcher) -> None:
        fetcher.html = "<html><body><p>Short page content!!</p></body></html>"
        resp = client.post("/api/summarise", json={"url": "https://blog.example/"})

        assert resp.status_code == 400
        assert resp.json() == {"error": "Blog content is too short."}

    def test_unexpected_error_is_generic_500(self, client: TestClient, fetcher) -> None:
        fetcher.error = KeyError("internal detail")
        resp = client.post("/api/summarise", json={"url": "https://blog.example/"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to summarize the blog."}
        assert "internal detail" not in resp.text


class TestAppLifespan:
    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_default_pipeline_writes_to_sqlite_only(self, isolated_settings) -> None:
        with TestClient(create_app()) as c:
            pipeline = c.app.state.pipeline
            assert [s.name for s in pipeline.sinks] == ["sqlite"]
        assert isolated_settings.db_path.exists()
