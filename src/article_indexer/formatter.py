"""JSON and README markdown formatting."""

import json
import re
from datetime import datetime
from typing import Iterable, Optional

from .models import Article

_REDUCED_DATE_RE = re.compile(r"(\d{4})(?:-(\d{2}))?")


def parse_created_at(created_at: Optional[str], now: Optional[datetime] = None) -> datetime:
    """Parse an ISO-8601 date, falling back to now when absent or unparsable.

    Reduced-precision dates (``2023``, ``2023-01``) resolve to the first day
    of the year or month.
    """
    if created_at:
        value = created_at.strip()
        reduced = _REDUCED_DATE_RE.fullmatch(value)
        if reduced:
            year, month = reduced.groups()
            try:
                return datetime(int(year), int(month or 1), 1)
            except ValueError:
                return now or datetime.now()
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            pass
    return now or datetime.now()


def format_date(created_at: Optional[str], now: Optional[datetime] = None) -> str:
    """Format a creation date as ``DD Mon,YYYY``, e.g. ``05 Jan,2023``."""
    return parse_created_at(created_at, now).strftime("%d %b,%Y")


def format_entry(article: Article, now: Optional[datetime] = None) -> str:
    """Format one digest entry: date, bold title and description.

    The date and title lines end in a backslash so markdown renders a hard
    line break.
    """
    date = format_date(article.created_at, now)
    description = article.description or ""
    return f"{date}\\\n**{article.title}**\\\n{description}\n\n"


def render_readme(
    intro: str,
    groups: dict[str, list[Article]],
    now: Optional[datetime] = None,
) -> str:
    """Append one section per tag group to the static introduction."""
    parts = [intro]
    for tag, articles in groups.items():
        parts.append(f"\n## {tag}\n")
        parts.extend(format_entry(article, now) for article in articles)
    return "".join(parts)


def format_json(records: Iterable) -> str:
    """Serialise records with a ``to_dict`` method as a compact JSON array."""
    return json.dumps([record.to_dict() for record in records], ensure_ascii=False)
