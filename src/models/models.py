"""Data models for the describer project."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator


class DescriptionType(str, Enum):
    """Where a description is going to be shown."""

    SEARCH = "search"
    OPENGRAPH = "opengraph"
    TWITTER = "twitter"

    @classmethod
    def coerce(cls, value) -> "DescriptionType":
        """Unknown types fall back to the search description."""
        try:
            return cls(getattr(value, "value", value))
        except ValueError:
            return cls.SEARCH


def _clean(v: Optional[str]) -> str:
    return v.strip() if v else ""


class ContentItem(BaseModel):
    """Страница или запись."""

    id: int
    title: str = ""
    excerpt: str = ""
    content: str = ""
    custom_description: str = ""
    open_graph_description: str = ""
    twitter_description: str = ""
    protected: bool = False
    uses_page_builder: bool = False
    is_front_page: bool = False
    is_blog_page: bool = False

    @field_validator("id")
    @classmethod
    def check_id(cls, v: int) -> int:
        """Проверка id."""
        if v < 0:
            raise ValueError("ID cannot be negative")
        return v

    @field_validator(
        "title",
        "excerpt",
        "custom_description",
        "open_graph_description",
        "twitter_description",
        mode="before",
    )
    @classmethod
    def clean_text(cls, v: Optional[str]) -> str:
        """Очистка текстовых полей."""
        return _clean(v)

    @field_validator("content", mode="before")
    @classmethod
    def clean_content(cls, v: Optional[str]) -> str:
        """Контент хранится как есть, кроме None."""
        return v or ""


class Term(BaseModel):
    """Термин таксономии: рубрика, метка и т.п."""

    id: int
    taxonomy: str
    name: str = ""
    description: str = ""
    custom_description: str = ""
    open_graph_description: str = ""
    twitter_description: str = ""

    @field_validator("taxonomy")
    @classmethod
    def clean_taxonomy(cls, v: str) -> str:
        """Очистка таксономии."""
        if not v.strip():
            raise ValueError("Taxonomy cannot be empty")
        return v.strip()

    @field_validator(
        "name",
        "description",
        "custom_description",
        "open_graph_description",
        "twitter_description",
        mode="before",
    )
    @classmethod
    def clean_text(cls, v: Optional[str]) -> str:
        """Очистка текстовых полей."""
        return _clean(v)


class SiteSettings(BaseModel):
    """Настройки сайта, влияющие на описания."""

    blogname: str = ""
    tagline: str = ""
    homepage_description: str = ""
    homepage_open_graph_description: str = ""
    homepage_twitter_description: str = ""
    auto_description: bool = True

    @field_validator(
        "blogname",
        "tagline",
        "homepage_description",
        "homepage_open_graph_description",
        "homepage_twitter_description",
        mode="before",
    )
    @classmethod
    def clean_text(cls, v: Optional[str]) -> str:
        """Очистка текстовых полей."""
        return _clean(v)
