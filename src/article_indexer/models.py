"""Data models for article-indexer."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Article:
    """A single published document."""

    title: str
    slug: str
    root_path: str
    raw_url: str = ""
    tags: Optional[list[str]] = None
    created_at: Optional[str] = None
    description: Optional[str] = None
    serie: Optional[str] = None  # series display title, set for series members
    author: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialise with the camelCase keys of the metadata files.

        Optional fields that were never set are left out.
        """
        data = {
            "title": self.title,
            "slug": self.slug,
            "rootPath": self.root_path,
            "tags": self.tags,
            "createdAt": self.created_at,
            "description": self.description,
            "serie": self.serie,
            "author": self.author,
            "rawUrl": self.raw_url,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass
class Series:
    """A named collection of articles described by an info.json file."""

    title: str
    slug: str
    description: str = ""
    num_articles: int = 0
    type: str = "unordered"  # ordered | unordered
    root_path: str = ""

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "slug": self.slug,
            "description": self.description,
            "numArticles": self.num_articles,
            "type": self.type,
            "rootPath": self.root_path,
        }


@dataclass
class Catalog:
    """Everything collected by one scan of the article tree."""

    articles: list[Article] = field(default_factory=list)
    series: list[Series] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def slugs(self) -> list[str]:
        """Slugs of every collected article, in traversal order."""
        return [article.slug for article in self.articles]
