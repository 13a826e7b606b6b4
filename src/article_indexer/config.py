"""Configuration loading and validation."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

DEFAULT_RAW_BASE_URL = "https://raw.githubusercontent.com/filipmacek/resources/articles"


@dataclass
class Config:
    """Application configuration."""

    article_root: Optional[Path] = None
    output_dir: Optional[Path] = None
    intro_path: Optional[Path] = None
    raw_base_url: str = DEFAULT_RAW_BASE_URL
    article_filename: str = "article.mdx"
    series_dirname: str = "series"
    series_descriptor: str = "info.json"
    articles_json: str = "metadata_articles.json"
    series_json: str = "metadata_series.json"
    readme_name: str = "README.md"
    verbose: bool = False

    @property
    def resolved_output_dir(self) -> Path:
        if self.output_dir is not None:
            return self.output_dir
        return self.article_root.resolve().parent

    @property
    def resolved_intro_path(self) -> Path:
        if self.intro_path is not None:
            return self.intro_path
        return self.resolved_output_dir / "intro.md"

    @property
    def articles_json_path(self) -> Path:
        return self.resolved_output_dir / self.articles_json

    @property
    def series_json_path(self) -> Path:
        return self.resolved_output_dir / self.series_json

    @property
    def readme_path(self) -> Path:
        return self.resolved_output_dir / self.readme_name

    def validate(self) -> None:
        """Validate required configuration."""
        if self.article_root is None:
            raise ConfigError(
                "ARTICLE_ROOT environment variable not set. "
                "Set it in .env, the environment, or pass --root."
            )
        if not self.article_root.is_dir():
            raise ConfigError(f"Article root is not a directory: {self.article_root}")
        if not self.raw_base_url:
            raise ConfigError("Raw base URL cannot be empty.")
        if not self.article_filename:
            raise ConfigError("Article filename cannot be empty.")


def load_config(
    article_root: Optional[str] = None,
    output_dir: Optional[str] = None,
    intro_path: Optional[str] = None,
    raw_base_url: Optional[str] = None,
    verbose: bool = False,
) -> Config:
    """Load config from .env and apply CLI overrides."""
    load_dotenv()

    root = article_root or os.getenv("ARTICLE_ROOT")
    output = output_dir or os.getenv("ARTICLE_OUTPUT_DIR")

    config = Config(
        article_root=Path(root) if root else None,
        output_dir=Path(output) if output else None,
        intro_path=Path(intro_path) if intro_path else None,
        raw_base_url=raw_base_url or os.getenv("ARTICLE_RAW_BASE_URL", DEFAULT_RAW_BASE_URL),
        verbose=verbose,
    )

    config.validate()
    return config
