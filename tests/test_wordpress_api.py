import pytest
import requests

from blog_studio.config import AppConfig
from blog_studio.core import wordpress_api
from blog_studio.core.errors import PublishError, SettingsSaveError
from blog_studio.core.wordpress_api import WordPressClient
from blog_studio.models.article import PublishPayload

CONFIG = AppConfig(api_key="k", rest_url="https://blog.example.com/wp-json", nonce="n0nce")


class FakeResponse:
    def __init__(self, status_code, data=None):
        self.status_code = status_code
        self._data = data

    def json(self):
        if self._data is None:
            raise ValueError("No JSON object could be decoded")
        return self._data


@pytest.fixture
def post(monkeypatch):
    calls = []
    responses = []

    def fake_post(url, headers=None, json=None, timeout=None):
        calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        result = responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(wordpress_api.requests, "post", fake_post)
    fake_post.calls = calls
    fake_post.responses = responses
    return fake_post


def test_save_api_key_request(post):
    post.responses.append(FakeResponse(200, {"success": True}))

    assert WordPressClient(CONFIG).save_api_key("secret") == {"success": True}
    call = post.calls[0]
    assert call["url"] == "https://blog.example.com/wp-json/ai-blog-generator/v1/settings"
    assert call["headers"]["X-WP-Nonce"] == "n0nce"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["json"] == {"apiKey": "secret"}


def test_save_api_key_failure_uses_server_message(post):
    post.responses.append(FakeResponse(403, {"message": "Sorry, you are not allowed to do that."}))

    with pytest.raises(SettingsSaveError) as exc:
        WordPressClient(CONFIG).save_api_key("secret")
    assert str(exc.value) == "Sorry, you are not allowed to do that."
    assert exc.value.status_code == 403


def test_save_api_key_failure_without_body(post):
    post.responses.append(FakeResponse(500))

    with pytest.raises(SettingsSaveError, match="Failed to save API key."):
        WordPressClient(CONFIG).save_api_key("secret")


def test_publish_post(post):
    post.responses.append(FakeResponse(200, {
        "success": True,
        "message": "Draft created",
        "post_id": 42,
        "edit_link": "https://blog.example.com/wp-admin/post.php?post=42&action=edit",
        "view_link": "https://blog.example.com/?p=42",
    }))
    payload = PublishPayload(title="T", content="<p>x</p>", image_base64=None)

    response = WordPressClient(CONFIG).publish_post(payload)

    assert response.post_id == 42
    assert response.view_link == "https://blog.example.com/?p=42"
    call = post.calls[0]
    assert call["url"] == "https://blog.example.com/wp-json/ai-blog-generator/v1/publish"
    assert call["json"] == {"title": "T", "content": "<p>x</p>", "imageBase64": None}


def test_publish_failure_messages(post):
    post.responses.extend([
        FakeResponse(400, {"message": "Title is required."}),
        FakeResponse(500, {"code": "internal_error"}),
        FakeResponse(502),
    ])
    client = WordPressClient(CONFIG)
    payload = PublishPayload(title="T", content="c")

    messages = []
    for _ in range(3):
        with pytest.raises(PublishError) as exc:
            client.publish_post(payload)
        messages.append(str(exc.value))

    assert messages == [
        "Title is required.",
        "Failed to publish post.",
        "An unknown error occurred while publishing.",
    ]


def test_publish_rejects_malformed_success_body(post):
    post.responses.append(FakeResponse(200, {"success": True}))

    with pytest.raises(PublishError):
        WordPressClient(CONFIG).publish_post(PublishPayload(title="T", content="c"))


def test_network_error_is_classified(post):
    post.responses.append(requests.ConnectionError("refused"))

    with pytest.raises(PublishError, match="Failed to publish post."):
        WordPressClient(CONFIG).publish_post(PublishPayload(title="T", content="c"))


def test_base_url_with_trailing_slash():
    client = WordPressClient(AppConfig(rest_url="https://blog.example.com/wp-json/", nonce="n"))
    assert client._url("publish") == "https://blog.example.com/wp-json/ai-blog-generator/v1/publish"
