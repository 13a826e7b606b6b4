"""Group articles by primary tag for the README digest."""

import locale
from typing import Optional

from .models import Article
from .utils import capitalize

OTHERS = "Others"


def primary_tag(article: Article) -> Optional[str]:
    """First tag of the article, or None when it has no tags."""
    if article.tags:
        return article.tags[0]
    return None


def tag_label(tag: str) -> str:
    """Display form of a stored tag: ``"RUST"`` becomes ``"Rust"``."""
    return capitalize(tag.lower())


def group_key(article: Article) -> str:
    tag = primary_tag(article)
    return tag_label(tag) if tag else OTHERS


def distinct_primary_tags(articles: list[Article]) -> list[str]:
    """Distinct primary tag labels, sorted with ``locale.strxfrm``.

    The order follows the process LC_COLLATE setting; the CLI adopts the
    user's locale at startup, otherwise this is code-point order.

    Untagged articles contribute nothing here.
    """
    labels = {tag_label(tag) for tag in map(primary_tag, articles) if tag}
    return sorted(labels, key=locale.strxfrm)


def group_by_tag(articles: list[Article]) -> dict[str, list[Article]]:
    """Group articles under their primary tag label, or "Others".

    Groups appear in the order their first article was encountered and
    articles keep their traversal order inside a group.
    """
    groups: dict[str, list[Article]] = {}
    for article in articles:
        groups.setdefault(group_key(article), []).append(article)
    return groups
