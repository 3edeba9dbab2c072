# recipe_harvest/main.py
# FastAPI app init and router wiring
# Routers define their own prefix; do not prefix again here

from __future__ import annotations

import logging
from asyncio import sleep
from fastapi import FastAPI

from recipe_harvest.api.routes_crawl import router as crawl_router
from recipe_harvest.api.routes_recipes import router as recipes_router
from recipe_harvest.core.config import settings
from recipe_harvest.db.indexes import ensure_indexes
from recipe_harvest.db.init import close_db, get_db, init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="Recipe Harvest - API", version="0.1.0")

@app.on_event("startup")
async def on_startup() -> None:
    # 1) DB first (up to 20 tries, 1s apart)
    db = None
    for i in range(20):
        try:
            db = await init_db()
            log.info("[startup] db ready")
            break
        except Exception as e:
            log.warning("[startup] db init retry %d: %s", i + 1, e)
            await sleep(1.0)
    if db is None:
        log.error("[startup] db init failed after retries")
        return

    # 2) indexes
    try:
        await ensure_indexes(db)
        log.info("[startup] indexes ensured")
    except Exception:
        log.exception("[startup] ensure_indexes failed")

@app.on_event("shutdown")
async def on_shutdown() -> None:
    await close_db()

@app.get("/health")
async def health():
    ok = {"status": "ok", "db": "skip"}
    try:
        db = get_db()
        await db.command("ping")
        ok["db"] = "ok"
    except Exception as e:
        ok["db"] = f"error: {e}"
    return ok

app.include_router(crawl_router)
app.include_router(recipes_router)
