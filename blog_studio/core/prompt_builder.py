from langchain_core.prompts import PromptTemplate

from blog_studio.models.article import ArticleConfig
from blog_studio.templates.article_prompt import (
    ARTICLE_PROMPT,
    AUTHOR_BIO,
    INTERNAL_LINKS_FROM_LIST,
    INTERNAL_LINKS_PLACEHOLDER,
    MEDICAL_DISCLAIMER,
    URL_LOOKUP_PROMPT,
)

_article_template = PromptTemplate.from_template(ARTICLE_PROMPT)
_url_lookup_template = PromptTemplate.from_template(URL_LOOKUP_PROMPT)


def build_internal_links_instruction(internal_links=None):
    if internal_links and internal_links.strip():
        return INTERNAL_LINKS_FROM_LIST.format(internal_links=internal_links.strip())
    return INTERNAL_LINKS_PLACEHOLDER


def build_article_prompt(config: ArticleConfig) -> str:
    """Instruction prompt for one article: topic, link clause and the fixed structure."""
    if not config.topic or not config.topic.strip():
        raise ValueError("Article topic must not be empty")

    return _article_template.format(
        topic=config.topic,
        internal_links_instruction=build_internal_links_instruction(config.internal_links),
        author_bio=AUTHOR_BIO,
        disclaimer=MEDICAL_DISCLAIMER,
    )


def build_url_lookup_prompt(platform: str, query: str) -> str:
    return _url_lookup_template.format(platform=platform, query=query)
