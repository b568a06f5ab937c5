import html
import re
from typing import Callable, Optional

import markdown
from bs4 import BeautifulSoup

from blog_studio.models.article import PublishPayload

DEFAULT_TITLE = "Untitled Post"

DATA_URI_IMAGE_PATTERN = re.compile(r"!\[.*?\]\((data:image/.*?;base64,.*?)\)")
IMG_TAG_PATTERN = re.compile(r"<img\b[^>]*>", re.IGNORECASE)

MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


def _default_renderer(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def render_markdown(markdown_text: str,
                    renderer: Optional[Callable[[str], str]] = _default_renderer) -> str:
    """
    Convert finalized Markdown to HTML. Passing renderer=None means no
    converter is available and the text is shown preformatted.
    """
    if renderer is None:
        return f"<pre>{html.escape(markdown_text)}</pre>"
    return renderer(markdown_text)


def extract_title(article_html: str) -> str:
    soup = BeautifulSoup(article_html, "html.parser")
    heading = soup.find("h1")
    title = heading.get_text().strip() if heading else ""
    return title or DEFAULT_TITLE


def strip_first_image(article_html: str) -> str:
    """Remove the first <img> element and leave the rest of the markup byte-for-byte."""
    soup = BeautifulSoup(article_html, "html.parser")
    img = soup.find("img")
    if img is None:
        return article_html

    lines = article_html.split("\n")
    offset = sum(len(line) + 1 for line in lines[:img.sourceline - 1]) + img.sourcepos
    match = IMG_TAG_PATTERN.match(article_html, offset)
    if match is None:
        match = IMG_TAG_PATTERN.search(article_html)
    return article_html[:match.start()] + article_html[match.end():]


def extract_image_data_uri(markdown_text: str) -> Optional[str]:
    match = DATA_URI_IMAGE_PATTERN.search(markdown_text or "")
    return match.group(1) if match else None


def build_publish_payload(article_html: str, markdown_text: str) -> PublishPayload:
    return PublishPayload(
        title=extract_title(article_html),
        content=strip_first_image(article_html),
        image_base64=extract_image_data_uri(markdown_text),
    )
