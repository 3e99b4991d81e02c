"""Quiz Source - Fonte externa de texto das surahs."""

from .chapter_source import ChapterTextSource, HttpChapterTextSource

__all__ = ["ChapterTextSource", "HttpChapterTextSource"]
