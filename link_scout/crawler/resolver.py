"""
URL resolution for LinkScout.
"""
from __future__ import annotations

from urllib.parse import SplitResult, urljoin, urlsplit

from link_scout.errors import InvalidURL

__all__ = ("resolve_url", "host_of")


def _parse(url: str) -> SplitResult:
    try:
        parts = urlsplit(url)
        # urlsplit validates the port lazily
        parts.port
    except ValueError as exc:
        raise InvalidURL(url, str(exc)) from exc
    return parts


def resolve_url(base: str, candidate: str) -> str:
    """
    Resolve *candidate* against *base* (RFC 3986 reference resolution).

    Absolute candidates come back re-serialized; relative paths,
    scheme-relative, query-only and fragment-only references are merged
    with the base. Raises :class:`InvalidURL` if either side is malformed.
    """
    _parse(base)
    _parse(candidate)
    try:
        absolute = urljoin(base, candidate)
    except ValueError as exc:
        raise InvalidURL(candidate, str(exc)) from exc
    return _parse(absolute).geturl()


def host_of(url: str) -> str:
    """
    Return the host of *url* without userinfo or port, or ``""``.

    Hosts are case-insensitive (RFC 3986, section 3.2.2), so the host is
    lower-cased: ``http://Example.com/`` and ``http://example.com:8080/``
    count as the same host when deciding which links to crawl.
    """
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""
