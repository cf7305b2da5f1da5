"""Shared fixtures.

Every test runs against a throwaway workspace directory with MongoDB and the
relay disabled, so nothing touches ``~/.blog_summariser`` or the network.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from backend.config import settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "workspace_dir", tmp_path)
    monkeypatch.setattr(settings, "mongodb_uri", "")
    monkeypatch.setattr(settings, "relay_url", "")
    monkeypatch.setattr(settings, "log_dir", "")
    return settings


@pytest.fixture()
def no_trafilatura():
    """Force the BeautifulSoup scorer by making trafilatura find nothing."""
    with patch("backend.scraper.extractor.trafilatura.extract", return_value=None) as mock:
        yield mock
