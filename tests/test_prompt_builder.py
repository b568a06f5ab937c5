import pytest

from blog_studio.core.prompt_builder import build_article_prompt, build_url_lookup_prompt
from blog_studio.models.article import ArticleConfig
from blog_studio.templates.article_prompt import AUTHOR_BIO, MEDICAL_DISCLAIMER


def test_prompt_embeds_topic_and_structure():
    prompt = build_article_prompt(ArticleConfig("Mindful Communication"))

    assert 'Write a blog post on the topic: "Mindful Communication".' in prompt
    assert "[FEATURED_IMAGE_PROMPT: A simple, text-free, illustrative image representing the concept of: Mindful Communication]" in prompt
    assert "[YOUTUBE_SEARCH_QUERY: your concise search query here]" in prompt
    assert "maximum 67 characters" in prompt
    assert AUTHOR_BIO in prompt
    assert MEDICAL_DISCLAIMER in prompt


def test_placeholder_links_without_sitemap():
    for links in (None, "", "   \n "):
        prompt = build_article_prompt(ArticleConfig("Topic", internal_links=links))
        assert "[Internal Link: descriptive-slug-for-relevant-page]" in prompt
        assert "You MUST choose relevant links" not in prompt


def test_literal_links_from_sitemap():
    links = "\nhttps://example.com/a\nhttps://example.com/b\n"
    prompt = build_article_prompt(ArticleConfig("Topic", internal_links=links))

    assert "You MUST choose relevant links" in prompt
    assert "https://example.com/a\nhttps://example.com/b" in prompt
    assert "[Internal Link:" not in prompt


def test_topic_with_braces_is_kept_literally():
    prompt = build_article_prompt(ArticleConfig("Sets {and} dicts"))
    assert '"Sets {and} dicts"' in prompt


def test_empty_topic_rejected():
    with pytest.raises(ValueError):
        build_article_prompt(ArticleConfig("  "))


def test_url_lookup_prompt():
    prompt = build_url_lookup_prompt("YouTube", "Test Topic")
    assert "most relevant YouTube URL" in prompt
    assert "'Test Topic'" in prompt
    assert "ONLY the raw URL" in prompt
