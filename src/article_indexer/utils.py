"""Utility functions for article-indexer."""

import re


def slugify(text: str) -> str:
    """Convert a title to a URL-safe slug."""
    text = text.lower().strip()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"[\s_-]+", "-", text)
    return text.strip("-")


def capitalize(text: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def build_raw_url(base_url: str, *segments: str) -> str:
    """Join a raw-source base URL with path segments."""
    parts = [base_url.rstrip("/")]
    parts.extend(segment.strip("/") for segment in segments if segment)
    return "/".join(parts)
