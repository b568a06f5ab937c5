# blog_studio/models/article.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class ArticleConfig:
    topic: str
    generate_images: bool = True
    internal_links: Optional[str] = None


class GenerationStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class GenerationState:
    status: GenerationStatus = GenerationStatus.IDLE
    article: Optional[str] = None
    error: Optional[str] = None


@dataclass
class PublishState:
    # idle | publishing | success | error
    status: str = "idle"
    message: Optional[str] = None


class DirectiveKind(Enum):
    FEATURED_IMAGE_PROMPT = "FEATURED_IMAGE_PROMPT"
    YOUTUBE_SEARCH_QUERY = "YOUTUBE_SEARCH_QUERY"


@dataclass(frozen=True)
class Directive:
    kind: DirectiveKind
    payload: str
    raw: str


@dataclass
class SitemapFile:
    name: str
    added_date: str
    urls: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"name": self.name, "addedDate": self.added_date, "urls": list(self.urls)}

    @classmethod
    def from_dict(cls, data: dict) -> "SitemapFile":
        return cls(name=data["name"], added_date=data["addedDate"], urls=list(data["urls"]))


@dataclass
class PublishPayload:
    title: str
    content: str
    image_base64: Optional[str] = None

    def to_json(self) -> dict:
        return {"title": self.title, "content": self.content, "imageBase64": self.image_base64}


@dataclass
class PublishResponse:
    success: bool
    message: str
    post_id: int
    edit_link: str
    view_link: str
