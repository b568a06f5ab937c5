import json

import pytest

from blog_studio.core import logger
from blog_studio.core.errors import NoImageReturnedError
from blog_studio.core.progress import NullProgress, ProgressSink


@pytest.fixture(autouse=True)
def event_log(tmp_path, monkeypatch):
    path = tmp_path / "log.json"
    monkeypatch.setattr(logger, "LOG_FILE", str(path))
    return path


@pytest.fixture
def logged_events(event_log):
    """Entries written to the test's event log, optionally filtered by type."""

    def read(event_type=None):
        if not event_log.exists():
            return []
        entries = [json.loads(line) for line in event_log.read_text(encoding="utf-8").splitlines() if line.strip()]
        return [e for e in entries if event_type is None or e["type"] == event_type]

    return read


class RecordingProgress(ProgressSink):
    def __init__(self):
        self.messages = []

    def emit(self, message):
        self.messages.append(message)


@pytest.fixture
def progress():
    return RecordingProgress()


class FakeRequester:
    """Stands in for GeminiClient; answers come from queues."""

    def __init__(self, articles=None, image=None, urls=None, api_key="test-key"):
        self.articles = list(articles or [])
        self.image = image
        self.urls = list(urls or [])
        self.api_key = api_key
        self.prompts = []
        self.image_prompts = []
        self.url_queries = []

    def use_api_key(self, api_key):
        self.api_key = api_key

    def request_article_text(self, prompt):
        self.prompts.append(prompt)
        result = self.articles.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def request_image(self, prompt):
        self.image_prompts.append(prompt)
        if self.image is None:
            raise NoImageReturnedError("No image data returned from API.")
        return self.image

    def request_url_for_query(self, platform, query, progress=None):
        (progress or NullProgress()).emit(f"Searching for a relevant {platform} link...")
        self.url_queries.append((platform, query))
        return self.urls.pop(0) if self.urls else None


@pytest.fixture
def fake_requester():
    return FakeRequester
