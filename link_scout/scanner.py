"""
Entry point for running one top-level crawl.
"""
from typing import List

from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.models import CrawlRequest
from link_scout.crawler.visited import VisitedSet
from link_scout.logger import logger
from link_scout.utils import remove_duplicates


async def start_scan(cfg) -> List[str]:
    """
    Crawl ``cfg.url`` and return the deduplicated list of discovered URLs.

    Parameters
    ----------
    cfg : CrawlConfig
        Run settings; ``url`` must be set.

    Returns
    -------
    List[str]
        URLs in discovery order, each listed once.
    """
    request = CrawlRequest(
        target_url=cfg.url,
        cookie=cfg.cookie,
        authorization=cfg.authorization,
        recursive=cfg.recursive,
    )
    visited = VisitedSet([cfg.url])
    logger.info("Crawling %s (recursive=%s)", cfg.url, cfg.recursive)
    async with AsyncCrawler(cfg) as crawler:
        urls = await crawler.crawl(request, visited)
    return remove_duplicates(urls)

__all__ = ["start_scan"]
