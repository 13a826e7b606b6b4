"""Front-matter parsing and article metadata extraction.

Documents start with a YAML block fenced by ``---`` lines, followed by the
MDX/markdown body. Only the front matter is read; the body is returned by
``split_front_matter`` but never stored in the index.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from .exceptions import MetadataError
from .models import Article
from .utils import slugify

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\n(.*?)^---[ \t]*$", re.DOTALL | re.MULTILINE)


@dataclass
class FrontMatter:
    """Recognised front-matter fields. Every field may be absent."""

    title: Optional[str] = None
    tags: Optional[list[str]] = None
    created_at: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: dict) -> "FrontMatter":
        tags = data.get("tags")
        if tags is not None and not isinstance(tags, list):
            tags = [tags]

        return cls(
            title=_as_text(data.get("title")),
            tags=[str(tag) for tag in tags if tag is not None] if tags is not None else None,
            created_at=_as_text(data.get("createdAt")),
            description=_as_text(data.get("description")),
            author=_as_text(data.get("author")),
        )


def _as_text(value: Any) -> Optional[str]:
    """Coerce a YAML scalar back to text; YAML turns bare dates into date objects."""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def split_front_matter(text: str) -> tuple[dict, str]:
    """Split a document into its front-matter mapping and body.

    A leading BOM is dropped and CRLF line endings are normalised first.
    Returns an empty mapping when the document has no front matter.

    Raises:
        MetadataError: If the front-matter block is not valid YAML.
    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n")
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise MetadataError(f"Invalid front matter: {e}") from e

    body = text[match.end():].lstrip("\r\n")
    if not isinstance(data, dict):
        return {}, body
    return data, body


def extract_article(path: Path, scan_root: Path, raw_url: str = "") -> Optional[Article]:
    """Read a document and build its Article record.

    Args:
        path: Document to read.
        scan_root: Root of the scan; ``rootPath`` is recorded relative to it.
        raw_url: Raw-source URL built by the caller for this document.

    Returns:
        The Article, or None when the path is not a file or the front
        matter has no title.

    Raises:
        MetadataError: If the file cannot be decoded, its front matter is
            malformed, or its title has no characters left to form a slug.
    """
    path = Path(path)
    if not path.is_file():
        return None

    try:
        text = path.read_bytes().decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MetadataError(f"{path} is not valid UTF-8") from e

    try:
        data, _body = split_front_matter(text)
    except MetadataError as e:
        raise MetadataError(f"{path}: {e}") from e

    meta = FrontMatter.from_mapping(data)
    if not meta.title:
        return None

    slug = slugify(meta.title)
    if not slug:
        raise MetadataError(f"{path}: title {meta.title!r} gives an empty slug")

    return Article(
        title=meta.title,
        slug=slug,
        root_path=_relative_parent(path, scan_root),
        raw_url=raw_url,
        tags=[tag.upper() for tag in meta.tags] if meta.tags is not None else None,
        created_at=meta.created_at,
        description=meta.description,
        author=meta.author,
    )


def _relative_parent(path: Path, scan_root: Path) -> str:
    parent = path.parent
    try:
        return parent.relative_to(scan_root).as_posix()
    except ValueError:
        return parent.as_posix()
