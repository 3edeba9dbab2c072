# recipe_harvest/services/tasty/roundup.py
# Round-up article ("40 best salad recipes") -> recipes
# Cards live as <figure><a href=recipe><img data-lazy-src=thumb></a></figure> inside div.entry-content.
# A recipe that fails to build is logged and recorded, never raised.

from __future__ import annotations
import asyncio
import logging
from typing import List, Optional, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from pydantic import BaseModel, Field

from recipe_harvest.core.config import settings
from recipe_harvest.models.recipe import Recipe
from recipe_harvest.services.tasty.assembler import fetch_recipe
from recipe_harvest.services.tasty.errors import RecipeBuildError
from recipe_harvest.services.tasty.fetch import FetchDocument, client_fetcher, new_client

log = logging.getLogger(__name__)

class CrawlReport(BaseModel):
    recipes: List[Recipe] = Field(default_factory=list)
    failures: List[Tuple[str, str]] = Field(default_factory=list)   # (url, message)

def _pick_img(img) -> Optional[str]:
    if img is None:
        return None
    return img.get("data-lazy-src") or img.get("src")

def _absolute(base_url: str, href: str) -> str:
    try:
        return urljoin(base_url, href)
    except ValueError:
        # unparseable href is kept as-is; fetching it fails that recipe only
        return href

def collect_links(document: BeautifulSoup, base_url: str) -> List[Tuple[str, str]]:
    """(recipe url, image url) per card, resolved against `base_url`; cards missing either are skipped."""
    content = document.find("div", class_="entry-content")
    if content is None:
        return []

    seen = set()
    links: List[Tuple[str, str]] = []
    for figure in content.find_all("figure"):
        a = figure.find("a", href=True)
        src = _pick_img(figure.find("img"))
        if a is None or not src:
            continue
        url = _absolute(base_url, a["href"])
        # same recipe linked twice (hero + list) -> first card wins
        if url in seen:
            continue
        seen.add(url)
        links.append((url, _absolute(base_url, src)))
    return links

async def _crawl(list_url: str, fetch: FetchDocument, concurrency: int) -> CrawlReport:
    document = await fetch(list_url)
    links = collect_links(document, list_url)
    log.info("round-up %s: %d recipe links", list_url, len(links))

    sem = asyncio.Semaphore(max(concurrency, 1))

    async def _bound(url: str, img: str):
        async with sem:
            try:
                return await fetch_recipe(url, img=img, fetch=fetch)
            except RecipeBuildError as e:
                log.warning("Url: %s threw the following: %s", url, e.cause)
                return e

    report = CrawlReport()
    for result in await asyncio.gather(*[_bound(u, i) for u, i in links]):
        if isinstance(result, RecipeBuildError):
            report.failures.append((result.url, str(result.cause)))
        else:
            report.recipes.append(result)
    return report

async def crawl_roundup(
    list_url: str,
    fetch: Optional[FetchDocument] = None,
    concurrency: Optional[int] = None,
) -> CrawlReport:
    """Build every recipe linked from a round-up page.

    Without `fetch`, one httpx client is opened for the whole crawl. Fetching the
    round-up page itself is not per-recipe: its DocumentFetchError propagates.
    """
    if concurrency is None:
        concurrency = settings.CRAWL_CONCURRENCY
    if fetch is not None:
        return await _crawl(list_url, fetch, concurrency)
    async with new_client() as client:
        return await _crawl(list_url, client_fetcher(client), concurrency)
