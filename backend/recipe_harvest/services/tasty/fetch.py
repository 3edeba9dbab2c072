# recipe_harvest/services/tasty/fetch.py
# Document fetch collaborator: GET -> BeautifulSoup(lxml)
# Depends on: httpx, beautifulsoup4, lxml

from __future__ import annotations
import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx
from bs4 import BeautifulSoup

from recipe_harvest.core.config import settings
from recipe_harvest.services.tasty.errors import DocumentFetchError

log = logging.getLogger(__name__)

# async (url) -> parsed document; the assembler and crawler only see this shape
FetchDocument = Callable[[str], Awaitable[BeautifulSoup]]

def new_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.FETCH_TIMEOUT),
        headers={"User-Agent": settings.USER_AGENT},
        follow_redirects=True,
    )

def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")

# ---------------------------------------------------------------------
# Retrying GET (connect/read timeouts only, linear backoff)
# ---------------------------------------------------------------------
async def _get_with_retry(client: httpx.AsyncClient, url: str, tries: int) -> httpx.Response:
    last: Optional[Exception] = None
    for i in range(max(tries, 1)):
        try:
            return await client.get(url)
        except (httpx.ConnectTimeout, httpx.ReadTimeout) as e:
            last = e
            log.info("timeout fetching %s (attempt %d/%d)", url, i + 1, tries)
            if i < tries - 1:
                await asyncio.sleep(0.5 * (i + 1))
    assert last is not None
    raise last

async def fetch_document(url: str, client: Optional[httpx.AsyncClient] = None) -> BeautifulSoup:
    """Fetch `url` and parse it. Transport failures, malformed URLs and non-2xx become DocumentFetchError."""
    try:
        if client is None:
            async with new_client() as own:
                r = await _get_with_retry(own, url, settings.FETCH_RETRIES)
        else:
            r = await _get_with_retry(client, url, settings.FETCH_RETRIES)
        r.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise DocumentFetchError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise DocumentFetchError(url, str(e) or type(e).__name__) from e
    except (httpx.InvalidURL, ValueError) as e:
        # malformed href: bad host/port, missing host
        raise DocumentFetchError(url, f"invalid URL: {e}") from e
    return parse_document(r.text)

def client_fetcher(client: httpx.AsyncClient) -> FetchDocument:
    # Bind a shared client so a whole crawl reuses one connection pool
    async def _fetch(url: str) -> BeautifulSoup:
        return await fetch_document(url, client=client)
    return _fetch
