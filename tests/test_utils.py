"""Tests for article_indexer.utils module."""

from article_indexer.utils import build_raw_url, capitalize, slugify


class TestSlugify:
    def test_punctuation_removed(self) -> None:
        assert slugify("Hello, World!") == "hello-world"

    def test_runs_collapse(self) -> None:
        assert slugify("  Multiple   Spaces_and-dashes  ") == "multiple-spaces-and-dashes"

    def test_leading_and_trailing_hyphens_stripped(self) -> None:
        assert slugify("--Rust -- Ownership--") == "rust-ownership"

    def test_deterministic(self) -> None:
        assert slugify("Async in Python 3") == slugify("Async in Python 3")

    def test_keeps_digits(self) -> None:
        assert slugify("Top 10 Tips") == "top-10-tips"


class TestCapitalize:
    def test_first_character_only(self) -> None:
        assert capitalize("hELLO") == "HELLO"

    def test_lowercase_word(self) -> None:
        assert capitalize("rust") == "Rust"

    def test_empty_string(self) -> None:
        assert capitalize("") == ""


class TestBuildRawUrl:
    def test_joins_segments(self) -> None:
        url = build_raw_url("https://raw.example.com/articles/", "backend", "a", "article.mdx")
        assert url == "https://raw.example.com/articles/backend/a/article.mdx"
