"""Custom exceptions for article-indexer."""


class ArticleIndexerError(Exception):
    """Base exception for article-indexer."""


class ConfigError(ArticleIndexerError):
    """Raised when configuration is missing or invalid."""


class MetadataError(ArticleIndexerError):
    """Raised when a front-matter block or series descriptor cannot be parsed."""
