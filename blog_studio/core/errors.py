class BlogStudioError(Exception):
    """Base class for every error raised by blog_studio."""


class ConfigError(BlogStudioError, ValueError):
    pass


# Article generation. Only this family aborts an article.

class ArticleGenerationError(BlogStudioError):
    pass


class InvalidCredentialsError(ArticleGenerationError):
    pass


class GenerationFailedError(ArticleGenerationError):
    pass


# Directive resolution. Never fatal: the resolver logs these or turns them into comments.

class NoImageReturnedError(BlogStudioError):
    pass


class VideoIdUnextractableError(BlogStudioError):
    def __init__(self, url: str):
        super().__init__(f"Could not extract a valid video ID from the URL: {url}")
        self.url = url


class InvalidTransitionError(BlogStudioError):
    pass


# WordPress plugin endpoints

class WordPressError(BlogStudioError):
    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class SettingsSaveError(WordPressError):
    pass


class PublishError(WordPressError):
    pass


# Sitemap uploads, reported per file

class SitemapError(BlogStudioError):
    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class SitemapParseError(SitemapError):
    pass


class DuplicateSitemapError(SitemapError):
    def __init__(self, name: str):
        super().__init__(name, f'Sitemap "{name}" already exists.')
