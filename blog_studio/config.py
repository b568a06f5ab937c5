# blog_studio/config.py
import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from blog_studio.core.errors import ConfigError

DEFAULT_TEXT_MODEL = "gemini-2.5-pro"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_SEARCH_MODEL = "gemini-2.5-pro"


@dataclass(frozen=True)
class AppConfig:
    """
    Everything the host used to inject globally: the Gemini key,
    the plugin REST base and the nonce, plus local paths.
    """
    api_key: str = ""
    rest_url: str = ""
    nonce: str = ""
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    search_model: str = DEFAULT_SEARCH_MODEL
    sitemap_store_path: str = "data/sitemaps.json"
    drafts_dir: str = "data/drafts"
    log_file: str = "log.json"
    request_timeout: Optional[float] = None

    def with_api_key(self, api_key: str) -> "AppConfig":
        return replace(self, api_key=api_key)


_FIELDS = set(AppConfig.__dataclass_fields__)


def load_config(config_path: str) -> AppConfig:
    """
    Load configuration from JSON file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open("r", encoding="utf-8") as f:
        config = json.load(f)

    required_keys = [
        "rest_url",
        "nonce"
    ]

    for key in required_keys:
        if key not in config or not config[key]:
            raise ConfigError(f"Missing required config key: {key}")

    unknown = set(config) - _FIELDS
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    return AppConfig(**config)


def config_from_env() -> AppConfig:
    load_dotenv()

    overrides = {
        "text_model": os.getenv("GEMINI_TEXT_MODEL"),
        "image_model": os.getenv("GEMINI_IMAGE_MODEL"),
        "search_model": os.getenv("GEMINI_SEARCH_MODEL"),
        "sitemap_store_path": os.getenv("SITEMAP_STORE_PATH"),
        "drafts_dir": os.getenv("DRAFTS_DIR"),
        "log_file": os.getenv("LOG_FILE"),
    }
    timeout = os.getenv("REQUEST_TIMEOUT")
    if timeout:
        try:
            overrides["request_timeout"] = float(timeout)
        except ValueError:
            raise ConfigError(f"REQUEST_TIMEOUT must be a number, got {timeout!r}")

    return AppConfig(
        api_key=os.getenv("GEMINI_API_KEY", ""),
        rest_url=os.getenv("WORDPRESS_REST_URL", ""),
        nonce=os.getenv("WORDPRESS_NONCE", ""),
        **{k: v for k, v in overrides.items() if v is not None}
    )
