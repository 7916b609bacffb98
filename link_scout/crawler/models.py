"""
Data models for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True, slots=True)
class CrawlRequest:
    """One crawl branch: the page to fetch and the headers to send."""

    target_url: str
    cookie: Optional[str] = None
    authorization: Optional[str] = None
    recursive: bool = False

    def branch(self, url: str) -> CrawlRequest:
        """Request for a sub-crawl of *url*; sub-crawls never recurse."""
        return replace(self, target_url=url, recursive=False)
