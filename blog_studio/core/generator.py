from typing import Callable, List, Optional, Sequence, Tuple

from blog_studio.core.directive_resolver import resolve_directives
from blog_studio.core.errors import PublishError, SettingsSaveError
from blog_studio.core.logger import log_event
from blog_studio.core.presentation import build_publish_payload
from blog_studio.core.progress import CallbackProgress, NullProgress, ProgressSink
from blog_studio.core.prompt_builder import build_article_prompt
from blog_studio.models.article import (
    ArticleConfig,
    GenerationState,
    GenerationStatus,
    PublishState,
)

MISSING_KEY_ERROR = "API Key is not configured. Please add your key in the API Settings section."
UNKNOWN_ERROR = "An unknown error occurred."


def generate_blog_post(requester, config: ArticleConfig, progress: ProgressSink = None) -> str:
    """
    Prompt -> article text -> resolved directives. Only a failure of the
    text request is raised; image and video problems stay inside the article.
    """
    progress = progress or NullProgress()
    prompt = build_article_prompt(config)

    progress.emit("Researching and writing article...")
    raw_text = requester.request_article_text(prompt)
    log_event("INFO", f"Article text received for: {config.topic}", {"chars": len(raw_text)})

    return resolve_directives(requester, config, raw_text, progress)


class GenerationSession:
    """
    Observable state for a series of generation and publish requests.
    Topics in a batch run one at a time and the first failure stops the batch.
    """

    def __init__(self, requester, publisher=None, on_progress: Optional[Callable[[str], None]] = None):
        self.requester = requester
        self.publisher = publisher
        self.state = GenerationState()
        self.publish_state = PublishState()
        self.progress_message: Optional[str] = None
        self.completed: List[Tuple[ArticleConfig, str]] = []
        self._on_progress = on_progress

    def _set_progress(self, message: Optional[str]):
        self.progress_message = message
        if message and self._on_progress:
            self._on_progress(message)

    def generate(self, configs: Sequence[ArticleConfig]) -> GenerationState:
        if not configs:
            return self.state

        if not self.requester.api_key:
            self.state = GenerationState(GenerationStatus.ERROR, None, MISSING_KEY_ERROR)
            return self.state

        self.publish_state = PublishState()
        self.state = GenerationState(GenerationStatus.LOADING)
        self.completed = []
        total = len(configs)

        for i, config in enumerate(configs, start=1):
            prefix = f"({i}/{total}) " if total > 1 else ""
            self._set_progress(f'{prefix}Generating article for "{config.topic}"...')
            try:
                article = generate_blog_post(self.requester, config, CallbackProgress(self._set_progress, prefix))
            except Exception as err:
                log_event("ERROR", f"Generation failed for: {config.topic}", {"error": repr(err)})
                self.state = GenerationState(GenerationStatus.ERROR, None, str(err) or UNKNOWN_ERROR)
                return self.state

            self.completed.append((config, article))
            self.state = GenerationState(GenerationStatus.SUCCESS, article, None)
            log_event("SUCCESS", f"Article generated: {config.topic}")

        if total > 1:
            self._set_progress(f"Completed generation of {total} articles.")
        else:
            self._set_progress(None)
        return self.state

    def publish(self, article_html: str, article_markdown: str) -> PublishState:
        self.publish_state = PublishState("publishing", "Publishing post...")
        payload = build_publish_payload(article_html, article_markdown)
        try:
            response = self.publisher.publish_post(payload)
        except PublishError as err:
            self.publish_state = PublishState("error", f"Failed to publish: {err}")
            return self.publish_state

        self.publish_state = PublishState(
            "success",
            f"Post published successfully! Edit Draft: {response.edit_link} Preview Post: {response.view_link}",
        )
        return self.publish_state

    def save_api_key(self, api_key: str) -> bool:
        try:
            self.publisher.save_api_key(api_key)
        except SettingsSaveError as err:
            log_event("ERROR", "Failed to save API key", {"error": str(err)})
            return False
        self.requester.use_api_key(api_key)
        return True
