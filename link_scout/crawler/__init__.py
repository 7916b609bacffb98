"""Crawl engine: resolver, fetcher, extractor, visited set and orchestrator."""
from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.models import CrawlRequest
from link_scout.crawler.visited import VisitedSet

__all__ = ["AsyncCrawler", "CrawlRequest", "VisitedSet"]
