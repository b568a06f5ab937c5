import base64
from typing import Optional
from urllib.parse import urlparse

from google import genai
from google.genai import types

from blog_studio.config import AppConfig
from blog_studio.core.errors import (
    GenerationFailedError,
    InvalidCredentialsError,
    NoImageReturnedError,
)
from blog_studio.core.logger import log_event
from blog_studio.core.progress import NullProgress, ProgressSink
from blog_studio.core.prompt_builder import build_url_lookup_prompt

MISSING_KEY_MESSAGE = "API Key is not configured. Please add it in the settings."
INVALID_KEY_MESSAGE = "Your Gemini API Key is not valid. Please check it in the settings."
GENERATION_FAILED_MESSAGE = (
    "Failed to generate blog post. The model may have refused the prompt or an API error occurred."
)

PLATFORM_DOMAINS = {
    "YouTube": ("youtube.com", "youtu.be"),
}


def is_invalid_key_error(err: Exception) -> bool:
    text = str(err)
    return "API key not valid" in text or "API_KEY_INVALID" in text


def validate_platform_url(platform: str, text: str) -> Optional[str]:
    """
    Accept `text` only when it is a bare http(s) URL on one of the
    platform's domains. Anything else means "not found".
    """
    url = (text or "").strip()
    if not url or any(ch.isspace() for ch in url):
        return None
    if not (url.startswith("http://") or url.startswith("https://")):
        return None

    host = (urlparse(url).hostname or "").lower()
    for domain in PLATFORM_DOMAINS.get(platform, ()):
        if host == domain or host.endswith("." + domain):
            return url
    return None


class GeminiClient:
    """Text, image and search-grounded lookups against the Gemini API."""

    def __init__(self, config: AppConfig, client=None):
        self.config = config
        self._client = client

    @property
    def api_key(self) -> str:
        return self.config.api_key

    def use_api_key(self, api_key: str):
        self.config = self.config.with_api_key(api_key)
        self._client = None

    @property
    def client(self):
        if not self.config.api_key:
            raise InvalidCredentialsError(MISSING_KEY_MESSAGE)
        if self._client is None:
            self._client = genai.Client(api_key=self.config.api_key)
        return self._client

    def request_article_text(self, prompt: str) -> str:
        client = self.client
        try:
            response = client.models.generate_content(
                model=self.config.text_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    tools=[types.Tool(google_search=types.GoogleSearch())],
                ),
            )
        except Exception as err:
            log_event("ERROR", f"Error calling Gemini API: {err}")
            if is_invalid_key_error(err):
                raise InvalidCredentialsError(INVALID_KEY_MESSAGE) from err
            raise GenerationFailedError(GENERATION_FAILED_MESSAGE) from err

        text = (response.text or "").strip()
        if not text:
            log_event("ERROR", "Gemini returned an empty article")
            raise GenerationFailedError(GENERATION_FAILED_MESSAGE)
        return text

    def request_image(self, prompt: str) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.config.image_model,
                contents=prompt,
                config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
            )
        except Exception as err:
            log_event("ERROR", f'Error generating image for prompt "{prompt}": {err}')
            raise NoImageReturnedError(
                "Failed to generate image. The model may have refused the prompt."
            ) from err

        inline = _first_inline_data(response)
        if inline is None or not inline.data:
            raise NoImageReturnedError("No image data returned from API.")

        data = inline.data
        if isinstance(data, bytes):
            data = base64.b64encode(data).decode("ascii")
        mime_type = inline.mime_type or "image/png"
        return f"data:{mime_type};base64,{data}"

    def request_url_for_query(self, platform: str, query: str,
                              progress: ProgressSink = None) -> Optional[str]:
        progress = progress or NullProgress()
        progress.emit(f"Searching for a relevant {platform} link...")
        try:
            response = self.client.models.generate_content(
                model=self.config.search_model,
                contents=build_url_lookup_prompt(platform, query),
                config=types.GenerateContentConfig(
                    tools=[types.Tool(google_search=types.GoogleSearch())],
                    temperature=0,
                ),
            )
        except Exception as err:
            log_event("ERROR", f'Error finding {platform} URL for query "{query}": {err}')
            return None

        text = (response.text or "").strip()
        url = validate_platform_url(platform, text)
        if url is None:
            log_event("WARNING", f'Gemini returned a non-URL for {platform} search with query "{query}"',
                      {"response": text})
        return url


def _first_inline_data(response):
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return None
    return getattr(parts[0], "inline_data", None)
