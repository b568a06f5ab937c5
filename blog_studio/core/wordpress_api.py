import jsonschema
import requests

from blog_studio.config import AppConfig
from blog_studio.core.errors import PublishError, SettingsSaveError
from blog_studio.core.logger import log_event
from blog_studio.models.article import PublishPayload, PublishResponse

NAMESPACE = "ai-blog-generator/v1"

PUBLISH_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "success": {"type": "boolean"},
        "message": {"type": "string"},
        "post_id": {"type": "integer"},
        "edit_link": {"type": "string"},
        "view_link": {"type": "string"},
    },
    "required": ["success", "post_id", "edit_link", "view_link"],
}


def _is_success(response) -> bool:
    return 200 <= response.status_code < 300


def _error_message(response, fallback: str, undecodable: str) -> str:
    try:
        data = response.json()
    except ValueError:
        return undecodable
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return fallback


class WordPressClient:
    """Client for the ai-blog-generator plugin routes, authenticated with the REST nonce."""

    def __init__(self, config: AppConfig):
        self.base_url = config.rest_url.rstrip("/") + "/"
        self.timeout = config.request_timeout
        self.headers = {
            "Content-Type": "application/json",
            "X-WP-Nonce": config.nonce,
        }

    def _url(self, route: str) -> str:
        return f"{self.base_url}{NAMESPACE}/{route}"

    def _post(self, route: str, payload: dict, error_cls, fallback: str):
        try:
            return requests.post(self._url(route), headers=self.headers, json=payload, timeout=self.timeout)
        except requests.RequestException as err:
            log_event("ERROR", f"Request to {route} failed: {err}")
            raise error_cls(fallback) from err

    def save_api_key(self, api_key: str) -> dict:
        fallback = "Failed to save API key."
        response = self._post("settings", {"apiKey": api_key}, SettingsSaveError, fallback)
        if not _is_success(response):
            message = _error_message(response, fallback, fallback)
            log_event("ERROR", "Failed to save API key", {"status": response.status_code, "message": message})
            raise SettingsSaveError(message, response.status_code)

        try:
            return response.json()
        except ValueError as err:
            raise SettingsSaveError(fallback, response.status_code) from err

    def publish_post(self, payload: PublishPayload) -> PublishResponse:
        response = self._post("publish", payload.to_json(), PublishError, "Failed to publish post.")
        if not _is_success(response):
            message = _error_message(
                response,
                "Failed to publish post.",
                "An unknown error occurred while publishing.",
            )
            log_event("ERROR", "Publish failed", {"status": response.status_code, "message": message})
            raise PublishError(message, response.status_code)

        try:
            data = response.json()
            jsonschema.validate(data, PUBLISH_RESPONSE_SCHEMA)
        except (ValueError, jsonschema.ValidationError) as err:
            log_event("ERROR", f"Unexpected publish response: {err}")
            raise PublishError("An unknown error occurred while publishing.", response.status_code) from err

        log_event("SUCCESS", "Post published", {"post_id": data["post_id"], "title": payload.title})
        return PublishResponse(
            success=data["success"],
            message=data.get("message", ""),
            post_id=data["post_id"],
            edit_link=data["edit_link"],
            view_link=data["view_link"],
        )
