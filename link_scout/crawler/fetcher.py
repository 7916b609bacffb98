# link_scout/crawler/fetcher.py
"""
Fetcher module: issues a single GET per page and streams the response body.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from aiohttp import ClientError, ClientResponse, ClientSession

from link_scout.errors import NetworkError
from link_scout.logger import logger

#: size of the chunks handed to the link extractor
CHUNK_SIZE = 64 * 1024


class ResponseBody:
    """Body of one response, read chunk by chunk, with its declared charset."""

    def __init__(self, url: str, resp: ClientResponse, chunk_size: int = CHUNK_SIZE) -> None:
        self.url = url
        self.charset: Optional[str] = resp.charset
        self._resp = resp
        self._chunk_size = chunk_size

    async def __aiter__(self) -> AsyncIterator[bytes]:
        try:
            async for chunk in self._resp.content.iter_chunked(self._chunk_size):
                yield chunk
        except (ClientError, asyncio.TimeoutError) as exc:
            raise NetworkError(self.url, exc) from exc


class Fetcher:
    """Performs HTTP GETs on a shared session, one request per call."""

    def __init__(self, session: ClientSession, chunk_size: int = CHUNK_SIZE) -> None:
        self.session = session
        self.chunk_size = chunk_size

    @staticmethod
    def build_headers(cookie: Optional[str] = None, authorization: Optional[str] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if cookie:
            headers["Cookie"] = cookie
        if authorization:
            headers["Authorization"] = authorization
        return headers

    @asynccontextmanager
    async def fetch(
        self,
        url: str,
        cookie: Optional[str] = None,
        authorization: Optional[str] = None,
    ) -> AsyncIterator[ResponseBody]:
        """
        GET *url* and yield its :class:`ResponseBody`.

        The response is released when the context exits, whatever the outcome.
        Transport failures, before or while reading the body, raise
        :class:`NetworkError`. Status codes are not checked.
        """
        headers = self.build_headers(cookie, authorization)
        logger.debug("GET %s", url)
        try:
            resp = await self.session.get(url, headers=headers)
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise NetworkError(url, exc) from exc
        try:
            logger.debug("%s -> HTTP %s", url, resp.status)
            yield ResponseBody(url, resp, self.chunk_size)
        finally:
            resp.release()
