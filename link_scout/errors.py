"""
Exception hierarchy for LinkScout.

Crawl branches fail with :class:`NetworkError` or :class:`ParseError`;
per-attribute URL problems raise :class:`InvalidURL` and are skipped by the
extractor.
"""
from __future__ import annotations

from typing import Optional


class LinkScoutError(Exception):
    """Base class for every error raised by LinkScout."""


class InvalidURL(LinkScoutError, ValueError):
    """A base or candidate URL could not be parsed."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"invalid URL {url!r}" + (f": {reason}" if reason else ""))


class CrawlError(LinkScoutError):
    """A single crawl branch failed."""

    _what = "crawl failed for"

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{self._what} {url}{detail}")


class NetworkError(CrawlError):
    """Request construction or transport failure."""

    _what = "request failed for"


class ParseError(CrawlError):
    """The HTML token stream could not be processed."""

    _what = "could not parse"


class OutputError(LinkScoutError):
    """Writing the result file failed."""

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot write {path}" + (f": {cause}" if cause is not None else ""))
