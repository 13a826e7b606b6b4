import json
from pathlib import Path

import pytest

from article_indexer.config import Config


def _write_doc(path: Path, front_matter: str, body: str = "Body text.\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{front_matter}---\n{body}", encoding="utf-8")
    return path


def _write_descriptor(series_dir: Path, data: dict) -> Path:
    series_dir.mkdir(parents=True, exist_ok=True)
    path = series_dir / "info.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def write_doc():
    """Write a document with the given front matter and return its path."""
    return _write_doc


@pytest.fixture
def write_descriptor():
    """Write a series info.json and return its path."""
    return _write_descriptor


@pytest.fixture
def article_tree(tmp_path: Path) -> Path:
    """A small tree with standalone articles, one series and an untitled document."""
    root = tmp_path / "articles"

    _write_doc(
        root / "backend" / "intro-to-rust" / "article.mdx",
        "title: Intro to Rust\n"
        "tags: [rust, go]\n"
        "createdAt: '2023-01-05'\n"
        "description: First steps\n"
        "author: Filip\n",
    )
    _write_doc(
        root / "backend" / "untitled" / "article.mdx",
        "tags: [rust]\ndescription: No title here\n",
    )
    _write_doc(
        root / "frontend" / "css-grid" / "article.mdx",
        "title: CSS Grid\n"
        "tags: [css]\n"
        "createdAt: '2023-03-10'\n"
        "description: Layouts\n",
    )
    _write_doc(
        root / "frontend" / "notes" / "article.mdx",
        "title: Loose Notes\ncreatedAt: '2022-12-01'\ndescription: Misc\n",
    )
    (root / "frontend" / "empty-folder").mkdir(parents=True)

    series_dir = root / "backend" / "series" / "my-series"
    _write_descriptor(
        series_dir, {"title": "My Series", "description": "d", "type": "ordered"}
    )
    _write_doc(
        series_dir / "part-1.mdx",
        "title: Part One\ntags: [rust]\ncreatedAt: '2023-02-01'\ndescription: p1\n",
    )
    _write_doc(
        series_dir / "part-2.mdx",
        "title: Part Two\ntags: [rust]\ncreatedAt: '2023-02-08'\ndescription: p2\n",
    )

    return root


@pytest.fixture
def config(article_tree: Path, tmp_path: Path) -> Config:
    out = tmp_path / "out"
    out.mkdir()
    (out / "intro.md").write_text("# Articles\n\nIntro text.\n", encoding="utf-8")
    return Config(
        article_root=article_tree,
        output_dir=out,
        raw_base_url="https://raw.example.com/articles",
    )
