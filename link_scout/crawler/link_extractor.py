"""
Link extraction for LinkScout.

The HTML is tokenized incrementally with :class:`lxml.etree.HTMLPullParser`:
chunks are fed as they arrive, attributes are read on start-tag events and
finished elements are dropped from the tree on end events, so memory stays
flat however large the page is.
"""
from __future__ import annotations

from typing import AsyncIterable, FrozenSet, List, Optional

from lxml import etree

from link_scout.crawler.resolver import resolve_url
from link_scout.errors import InvalidURL, ParseError

__all__ = ("LINK_TAGS", "LINK_ATTRIBUTES", "extract_links", "links_from_element")

LINK_TAGS: FrozenSet[str] = frozenset(("a", "link", "script", "img"))
LINK_ATTRIBUTES: FrozenSet[str] = frozenset(("href", "src"))

DEFAULT_ENCODING = "utf-8"


def links_from_element(element: etree._Element, base_url: str) -> List[str]:
    """Resolved ``href``/``src`` values of one start tag, in attribute order."""
    if not isinstance(element.tag, str) or element.tag.lower() not in LINK_TAGS:
        return []
    links: List[str] = []
    for name, value in element.attrib.items():
        if name.lower() not in LINK_ATTRIBUTES or not value:
            continue
        try:
            links.append(resolve_url(base_url, value))
        except InvalidURL:
            continue
    return links


class _Tokenizer:
    """Feeds chunks to the pull parser and collects links from start events."""

    parser_class = etree.HTMLPullParser

    def __init__(self, base_url: str, encoding: Optional[str] = None) -> None:
        self.base_url = base_url
        self.parser = self._make_parser(encoding or DEFAULT_ENCODING)
        self.links: List[str] = []
        self.elements = 0
        self.root: Optional[etree._Element] = None

    def _make_parser(self, encoding: str) -> etree.HTMLPullParser:
        try:
            return self.parser_class(events=("start", "end"), encoding=encoding)
        except LookupError:
            return self.parser_class(events=("start", "end"), encoding=DEFAULT_ENCODING)

    def feed(self, chunk: bytes) -> None:
        self.parser.feed(chunk)
        self._drain()

    def close(self) -> None:
        try:
            self.parser.close()
        except etree.LxmlError:
            # libxml2 rejects documents without a single element at close time
            if self.elements:
                raise
        self._drain()

    def _drain(self) -> None:
        for event, element in self.parser.read_events():
            if event == "start":
                if self.root is None:
                    self.root = element.getroottree().getroot()
                self.elements += 1
                self.links.extend(links_from_element(element, self.base_url))
                continue
            element.clear()
            parent = element.getparent()
            if parent is not None:
                while element.getprevious() is not None:
                    del parent[0]


async def extract_links(
    stream: AsyncIterable[bytes],
    base_url: str,
    encoding: Optional[str] = None,
) -> List[str]:
    """
    Extract every URL found in ``href``/``src`` of ``a``, ``link``,
    ``script`` and ``img`` start tags, resolved against *base_url*.

    *encoding* is the charset the response declared; without one (or with
    one libxml2 does not know) the bytes are decoded as UTF-8. Order follows
    the document; duplicates are kept. Raises :class:`ParseError` if the
    tokenizer fails.
    """
    tokenizer = _Tokenizer(base_url, encoding)
    fed = False
    try:
        async for chunk in stream:
            if chunk:
                tokenizer.feed(chunk)
                fed = True
        if fed:
            tokenizer.close()
    except etree.LxmlError as exc:
        raise ParseError(base_url, exc) from exc
    return tokenizer.links
