"""I/O adapters for article documents."""

from .article_files import ArticleFileStore, sort_newest_first

__all__ = ["ArticleFileStore", "sort_newest_first"]
