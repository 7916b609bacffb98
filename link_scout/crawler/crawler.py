from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from aiohttp import ClientSession, ClientTimeout

from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.models import CrawlRequest
from link_scout.crawler.resolver import host_of
from link_scout.crawler.visited import VisitedSet
from link_scout.errors import CrawlError

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """
    Fetch/extract/filter cycle with one level of same-host fan-out.

    Use as an async context manager so the HTTP session is opened and
    closed around the crawl::

        async with AsyncCrawler(config) as crawler:
            urls = await crawler.crawl(request, VisitedSet([seed]))
    """

    def __init__(self, config) -> None:
        self.config = config
        self.concurrency: int = getattr(config, "concurrency", 20)
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.logger = logging.getLogger("LinkScout")
        self._slots = asyncio.Semaphore(self.concurrency)

    async def __aenter__(self) -> AsyncCrawler:
        kwargs = {}
        timeout = getattr(self.config, "timeout", None)
        if timeout:
            kwargs["timeout"] = ClientTimeout(total=timeout)
        self.session = ClientSession(
            **kwargs,
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, request: CrawlRequest, visited: VisitedSet) -> List[str]:
        """
        Crawl ``request.target_url`` and return newly discovered URLs.

        Only URLs that *visited* had not seen yet are returned, so each URL is
        fetched at most once per shared set. With ``request.recursive`` every
        new URL on the target's host is crawled concurrently (non-recursively)
        and its findings appended; failing sub-crawls contribute nothing.
        Raises :class:`NetworkError` or :class:`ParseError` if this branch's
        own fetch or extraction fails.
        """
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")

        async with self._slots:
            async with self.fetcher.fetch(
                request.target_url, request.cookie, request.authorization
            ) as body:
                candidates = await extract_links(body, request.target_url, body.charset)

        found = [url for url in candidates if visited.check_and_mark(url)]
        self.logger.debug(
            "%s: %d links, %d new", request.target_url, len(candidates), len(found)
        )
        if not request.recursive:
            return found

        host = host_of(request.target_url)
        branches = [url for url in found if host_of(url) == host]
        results = await asyncio.gather(*(self._branch(request.branch(url), visited) for url in branches))
        for sub in results:
            found.extend(sub)
        return found

    async def _branch(self, request: CrawlRequest, visited: VisitedSet) -> List[str]:
        try:
            return await self.crawl(request, visited)
        except CrawlError as exc:
            self.logger.debug("Skipping %s: %s", request.target_url, exc)
            return []
