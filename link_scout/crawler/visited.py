"""
Visitation tracking shared by every branch of one crawl.
"""
from __future__ import annotations

import threading
from typing import Iterable, Set


class VisitedSet:
    """
    Set of URLs already seen during a crawl.

    :meth:`check_and_mark` is atomic, so two concurrent branches can never
    both claim the same URL.
    """

    def __init__(self, seed: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._urls: Set[str] = set(seed)

    def check_and_mark(self, url: str) -> bool:
        """Mark *url* as visited; return True only if it was not seen before."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)
