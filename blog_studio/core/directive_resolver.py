"""
Post-processing of the raw Markdown returned by Gemini.

The model is asked to leave two kinds of directives in its output:

    [FEATURED_IMAGE_PROMPT: ...]   once, at the very start of the article
    [YOUTUBE_SEARCH_QUERY: ...]    zero or more times, anywhere in the body

`DirectiveResolver` replaces them with a featured image, video embeds or
HTML comments recording why a video could not be embedded. Steps run in a
fixed order: resolve_image -> resolve_videos -> finalize.
"""
import html
import re
from enum import Enum
from typing import Optional

from blog_studio.core.errors import (
    InvalidTransitionError,
    NoImageReturnedError,
    VideoIdUnextractableError,
)
from blog_studio.core.logger import log_event
from blog_studio.core.progress import NullProgress, ProgressSink
from blog_studio.models.article import ArticleConfig, Directive, DirectiveKind

IMAGE_DIRECTIVE_PATTERN = re.compile(r"^\[FEATURED_IMAGE_PROMPT:(.*?)\]\s*\n?")
VIDEO_DIRECTIVE_PATTERN = re.compile(r"\[YOUTUBE_SEARCH_QUERY:(.*?)\]\n?")
VIDEO_ID_PATTERN = re.compile(r"(?:v=|v%3D|/embed/|\.be/)([a-zA-Z0-9_-]{11})")

VIDEO_PLATFORM = "YouTube"

EMBED_TEMPLATE = """<iframe
  title="{title}"
  width="600"
  height="338"
  src="https://www.youtube-nocookie.com/embed/{video_id}"
  frameborder="0"
  allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture; web-share"
  referrerpolicy="strict-origin-when-cross-origin"
  allowfullscreen
  style="width: 100%; aspect-ratio: 16 / 9; border: none; border-radius: 12px; margin: 1.5rem 0; box-shadow: 0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1);">
</iframe>"""


class ResolverState(Enum):
    UNPROCESSED = "unprocessed"
    IMAGE_RESOLVED = "image_resolved"
    VIDEO_DIRECTIVES_RESOLVED = "video_directives_resolved"
    FINALIZED = "finalized"


def _directive(kind: DirectiveKind, match) -> Directive:
    return Directive(kind, match.group(1).strip(), match.group(0))


def extract_video_id(url: str) -> str:
    match = VIDEO_ID_PATTERN.search(url or "")
    if not match:
        raise VideoIdUnextractableError(url)
    return match.group(1)


def build_video_embed(video_id: str, title: str) -> str:
    return EMBED_TEMPLATE.format(title=html.escape(title, quote=True), video_id=video_id)


def unextractable_video_comment(url: str) -> str:
    return f"<!-- YouTube embed failed: Could not extract a valid video ID from the URL: {url} -->"


def video_not_found_comment(topic: str) -> str:
    return f'<!-- YouTube embed failed: No relevant video was found for the topic "{topic}" -->'


class DirectiveResolver:
    def __init__(self, requester, config: ArticleConfig, text: str, progress: ProgressSink = None):
        self.requester = requester
        self.config = config
        self.text = text
        self.progress = progress or NullProgress()
        self.state = ResolverState.UNPROCESSED

    def _advance(self, expected: ResolverState, target: ResolverState):
        if self.state is not expected:
            raise InvalidTransitionError(
                f"Cannot move to {target.value} from {self.state.value}; expected {expected.value}"
            )
        self.state = target

    def resolve_image(self) -> str:
        self._advance(ResolverState.UNPROCESSED, ResolverState.IMAGE_RESOLVED)

        match = IMAGE_DIRECTIVE_PATTERN.match(self.text)
        if not match:
            return self.text

        self.text = self.text[match.end():]
        if not self.config.generate_images:
            return self.text

        image_prompt = _directive(DirectiveKind.FEATURED_IMAGE_PROMPT, match).payload
        self.progress.emit("Generating featured image...")
        try:
            data_uri = self.requester.request_image(image_prompt)
        except NoImageReturnedError as err:
            log_event("ERROR", f'Failed to generate featured image for prompt: "{image_prompt}"',
                      {"error": str(err)})
            return self.text

        self.text = f"![{self.config.topic}]({data_uri})\n\n" + self.text
        return self.text

    def resolve_videos(self) -> str:
        self._advance(ResolverState.IMAGE_RESOLVED, ResolverState.VIDEO_DIRECTIVES_RESOLVED)

        position = 0
        while True:
            match = VIDEO_DIRECTIVE_PATTERN.search(self.text, position)
            if not match:
                break
            replacement = self._resolve_video(_directive(DirectiveKind.YOUTUBE_SEARCH_QUERY, match))
            self.text = self.text[:match.start()] + replacement + self.text[match.end():]
            position = match.start() + len(replacement)
        return self.text

    def _resolve_video(self, directive: Directive) -> str:
        # The lookup key is the article topic; the directive payload is only logged.
        topic = self.config.topic
        self.progress.emit("Embedding a relevant video...")
        video_url = self.requester.request_url_for_query(VIDEO_PLATFORM, topic, self.progress)
        if not video_url:
            log_event("WARNING", "No relevant video found", {"topic": topic, "query": directive.payload})
            return video_not_found_comment(topic)

        try:
            video_id = extract_video_id(video_url)
        except VideoIdUnextractableError as err:
            log_event("WARNING", str(err), {"topic": topic})
            return unextractable_video_comment(video_url)
        return build_video_embed(video_id, topic)

    def finalize(self) -> str:
        self._advance(ResolverState.VIDEO_DIRECTIVES_RESOLVED, ResolverState.FINALIZED)
        self.progress.emit("Finalizing article...")
        return self.text

    def resolve(self) -> str:
        self.resolve_image()
        self.resolve_videos()
        return self.finalize()


def resolve_directives(requester, config: ArticleConfig, text: str,
                       progress: Optional[ProgressSink] = None) -> str:
    return DirectiveResolver(requester, config, text, progress).resolve()
