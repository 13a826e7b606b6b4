"""Tests for article_indexer.config module."""

from pathlib import Path

import pytest

from article_indexer.config import DEFAULT_RAW_BASE_URL, Config, load_config
from article_indexer.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ARTICLE_ROOT", "ARTICLE_OUTPUT_DIR", "ARTICLE_RAW_BASE_URL"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_missing_root_raises(self) -> None:
        with pytest.raises(ConfigError, match="ARTICLE_ROOT"):
            load_config()

    def test_root_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("ARTICLE_ROOT", str(tmp_path))
        config = load_config()

        assert config.article_root == tmp_path
        assert config.raw_base_url == DEFAULT_RAW_BASE_URL

    def test_cli_override_wins(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        other = tmp_path / "other"
        other.mkdir()
        monkeypatch.setenv("ARTICLE_ROOT", str(tmp_path))

        config = load_config(article_root=str(other), raw_base_url="https://r.example")

        assert config.article_root == other
        assert config.raw_base_url == "https://r.example"

    def test_root_must_be_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not a directory"):
            load_config(article_root=str(tmp_path / "missing"))


class TestOutputPaths:
    def test_defaults_to_parent_of_root(self, tmp_path: Path) -> None:
        root = tmp_path / "articles"
        root.mkdir()
        config = Config(article_root=root)

        assert config.resolved_output_dir == tmp_path.resolve()
        assert config.resolved_intro_path == tmp_path.resolve() / "intro.md"
        assert config.readme_path == tmp_path.resolve() / "README.md"

    def test_explicit_output_dir(self, tmp_path: Path) -> None:
        config = Config(article_root=tmp_path, output_dir=tmp_path / "out")

        assert config.articles_json_path == tmp_path / "out" / "metadata_articles.json"
        assert config.series_json_path == tmp_path / "out" / "metadata_series.json"
