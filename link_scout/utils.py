# File: link_scout/utils.py
"""link_scout.utils: helpers for URL lists and terminal presentation."""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Collection, Iterable, List, Sequence, Union
from urllib.parse import urlsplit

from link_scout.logger import logger

__all__: Sequence[str] = (
    "has_file_extension",
    "clean_lines",
    "read_url_list",
    "remove_duplicates",
)

#: extensions that are really top-level domains in host-only URLs
_DOMAIN_SUFFIXES = frozenset((".com", ".org", ".net"))


def has_file_extension(url: str) -> bool:
    """True if the URL path ends in a file extension other than ``.com``/``.org``/``.net``."""
    try:
        path = urlsplit(url).path
    except ValueError:
        path = url
    ext = posixpath.splitext(path)[1].lower()
    return bool(ext) and ext not in _DOMAIN_SUFFIXES


def clean_lines(lines: Iterable[str]) -> List[str]:
    """Strip every line and drop blank ones."""
    return [s for s in (line.strip() for line in lines) if s]


def read_url_list(path: Union[str, Path]) -> List[str]:
    """Read a file holding one URL per line; blank lines are skipped."""
    p = Path(path)
    urls = clean_lines(p.read_text(encoding="utf-8").splitlines())
    logger.debug("Loaded %d URLs from %s", len(urls), p)
    return urls


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Remove duplicate URLs while preserving order."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
