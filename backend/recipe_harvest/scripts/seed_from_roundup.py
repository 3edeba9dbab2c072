# recipe_harvest/scripts/seed_from_roundup.py
# Crawl one or more round-up articles and upsert every recipe by slug.
# Usage: python -m recipe_harvest.scripts.seed_from_roundup https://www.aheadofthyme.com/40-best-salad-recipes/
# Per-recipe failures are logged and skipped; only an unreachable DB stops the run.

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from recipe_harvest.core.config import settings
from recipe_harvest.db.indexes import ensure_indexes
from recipe_harvest.db.recipes import recipes_collection, upsert_recipe
from recipe_harvest.services.tasty import DocumentFetchError, crawl_roundup

log = logging.getLogger("seed")

async def seed(urls: List[str], concurrency: int) -> int:
    cli = AsyncIOMotorClient(settings.MONGO_URI)
    db = cli[settings.MONGO_DB]
    try:
        await db.command("ping")
        await ensure_indexes(db)
    except PyMongoError as e:
        log.error("[seed] db unreachable: %s", e)
        cli.close()
        return 1

    recipes = recipes_collection(db)
    stored = failed = 0
    try:
        for url in urls:
            try:
                report = await crawl_roundup(url, concurrency=concurrency)
            except DocumentFetchError as e:
                log.warning("[seed] skipping round-up %s: %s", url, e)
                continue
            for recipe in report.recipes:
                rid = await upsert_recipe(recipes, recipe)
                log.info("WROTE: %s", rid)
                stored += 1
            failed += len(report.failures)
    finally:
        cli.close()

    log.info("[seed] done. stored=%d failed=%d round-ups=%d", stored, failed, len(urls))
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the recipe DB from round-up articles")
    parser.add_argument("urls", nargs="+", help="round-up article URLs")
    parser.add_argument("--concurrency", type=int, default=settings.CRAWL_CONCURRENCY)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(seed(args.urls, args.concurrency))

if __name__ == "__main__":
    sys.exit(main())
