"""Walk the article tree and collect article and series metadata.

Layout::

    <root>/<topic>/<article-dir>/article.mdx
    <root>/<topic>/series/<series-dir>/info.json
    <root>/<topic>/series/<series-dir>/<member documents>

Entries are visited in sorted order so repeated runs over the same tree
produce identical output.
"""

import json
from pathlib import Path
from typing import Iterator, Optional

import click

from .config import Config
from .exceptions import MetadataError
from .metadata import extract_article
from .models import Article, Catalog, Series
from .utils import build_raw_url, slugify


def iter_topics(root: Path) -> Iterator[Path]:
    """Yield the topic folders directly under the root."""
    for entry in sorted(Path(root).iterdir()):
        if entry.is_dir():
            yield entry


def iter_article_dirs(topic: Path, series_dirname: str = "series") -> Iterator[Path]:
    """Yield standalone article folders of a topic, skipping the series folder."""
    for entry in sorted(topic.iterdir()):
        if entry.is_dir() and entry.name != series_dirname:
            yield entry


def _try_extract(path: Path, config: Config, raw_url: str, catalog: Catalog) -> Optional[Article]:
    try:
        return extract_article(path, config.article_root, raw_url)
    except MetadataError as e:
        catalog.skipped.append(str(path))
        if config.verbose:
            click.echo(f"  Skipping {path}: {e}", err=True)
        return None


def load_series_descriptor(path: Path) -> Optional[dict]:
    """Read an info.json descriptor, or None when the file does not exist.

    Raises:
        MetadataError: If the descriptor is not a JSON object.
    """
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MetadataError(f"Invalid series descriptor {path}: {e}") from e
    if not isinstance(data, dict):
        raise MetadataError(f"Series descriptor {path} must be a JSON object")
    return data


def resolve_series(
    series_dir: Path,
    topic: str,
    config: Config,
    catalog: Catalog,
) -> tuple[list[Article], Optional[Series]]:
    """Collect the member articles of one series folder.

    Every entry of the folder is offered to the extractor. Members are
    returned even when the descriptor has no title; only the Series record
    itself is dropped in that case.
    """
    descriptor_path = series_dir / config.series_descriptor
    try:
        descriptor = load_series_descriptor(descriptor_path)
    except MetadataError as e:
        catalog.skipped.append(str(series_dir))
        if config.verbose:
            click.echo(f"  Skipping series {series_dir.name}: {e}", err=True)
        return [], None

    if descriptor is None:
        if config.verbose:
            click.echo(f"  No {config.series_descriptor} in {series_dir}, skipping", err=True)
        return [], None

    title = descriptor.get("title")
    title = str(title) if title else None

    members: list[Article] = []
    for entry in sorted(series_dir.iterdir()):
        raw_url = build_raw_url(
            config.raw_base_url, topic, config.series_dirname, series_dir.name, entry.name
        )
        article = _try_extract(entry, config, raw_url, catalog)
        if article:
            article.serie = title
            members.append(article)

    if not title:
        if config.verbose:
            click.echo(
                f"  Series {series_dir.name} has no title; "
                f"keeping its {len(members)} article(s) without a series record",
                err=True,
            )
        return members, None

    series = Series(
        title=title,
        slug=slugify(title),
        description=descriptor.get("description") or "",
        num_articles=len(members),
        type=descriptor.get("type") or "unordered",
        root_path=series_dir.name,
    )
    if config.verbose:
        click.echo(f"  Series {title}: {series.num_articles} article(s)")
    return members, series


def scan_topic(topic: Path, config: Config, catalog: Catalog) -> None:
    """Add a topic's standalone articles and series to the catalog."""
    for article_dir in iter_article_dirs(topic, config.series_dirname):
        raw_url = build_raw_url(
            config.raw_base_url, topic.name, article_dir.name, config.article_filename
        )
        article = _try_extract(article_dir / config.article_filename, config, raw_url, catalog)
        if article:
            catalog.articles.append(article)
        elif config.verbose:
            click.echo(f"  No titled {config.article_filename} in {article_dir}", err=True)

    series_root = topic / config.series_dirname
    if not series_root.is_dir():
        return

    for series_dir in sorted(series_root.iterdir()):
        if not series_dir.is_dir():
            continue
        members, series = resolve_series(series_dir, topic.name, config, catalog)
        catalog.articles.extend(members)
        if series:
            catalog.series.append(series)


def build_catalog(config: Config) -> Catalog:
    """Scan the configured article root and return everything found."""
    catalog = Catalog()
    for topic in iter_topics(config.article_root):
        if config.verbose:
            click.echo(f"Scanning topic: {topic.name}")
        scan_topic(topic, config, catalog)
    return catalog
