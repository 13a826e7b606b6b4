"""Write the catalog outputs to the filesystem."""

from pathlib import Path

from .config import Config
from .formatter import format_json, render_readme
from .grouping import group_by_tag
from .models import Catalog


def write_json(records: list, path: Path) -> Path:
    """Overwrite path with the JSON array of records."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_json(records), encoding="utf-8")
    return path


def write_readme(catalog: Catalog, intro_path: Path, readme_path: Path) -> Path:
    """Render the static intro plus the tag-grouped digest into readme_path."""
    intro = intro_path.read_text(encoding="utf-8")
    content = render_readme(intro, group_by_tag(catalog.articles))
    readme_path.parent.mkdir(parents=True, exist_ok=True)
    readme_path.write_text(content, encoding="utf-8")
    return readme_path


def write_catalog(catalog: Catalog, config: Config) -> list[Path]:
    """Write the article JSON, series JSON and README.

    Returns the paths written, in that order.
    """
    return [
        write_json(catalog.articles, config.articles_json_path),
        write_json(catalog.series, config.series_json_path),
        write_readme(catalog, config.resolved_intro_path, config.readme_path),
    ]
