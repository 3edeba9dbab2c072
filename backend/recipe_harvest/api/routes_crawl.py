# recipe_harvest/api/routes_crawl.py
# Admin API to fill the DB from the recipe site
# Usage: POST /crawl/roundup?url=https://www.aheadofthyme.com/40-best-salad-recipes/
#        POST /crawl/recipe?url=https://www.aheadofthyme.com/easy-meat-lasagna/

from __future__ import annotations
import logging
from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from recipe_harvest.db.init import get_db
from recipe_harvest.db.recipes import recipes_collection, upsert_recipe
from recipe_harvest.services.tasty import (
    DocumentFetchError,
    RecipeBuildError,
    crawl_roundup,
    fetch_recipe,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/crawl", tags=["crawl"])

class RecipeSaved(BaseModel):
    ok: bool = True
    id: str
    name: str

class RoundupSaved(BaseModel):
    ok: bool = True
    inserted: int
    failures: List[Tuple[str, str]] = Field(default_factory=list)

@router.post("/recipe", response_model=RecipeSaved)
async def crawl_recipe(
    url: str = Query(..., description="recipe page URL"),
    img: str = Query("", description="thumbnail URL to store with the recipe"),
    db = Depends(get_db),
):
    try:
        recipe = await fetch_recipe(url, img=img)
    except RecipeBuildError as e:
        if isinstance(e.cause, DocumentFetchError):
            raise HTTPException(status_code=502, detail=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    rid = await upsert_recipe(recipes_collection(db), recipe)
    return RecipeSaved(id=rid, name=recipe.name)

@router.post("/roundup", response_model=RoundupSaved)
async def crawl_roundup_page(
    url: str = Query(..., description="round-up article URL"),
    db = Depends(get_db),
):
    # round-up page -> every linked recipe -> upsert by slug; per-recipe failures are reported, not raised
    try:
        report = await crawl_roundup(url)
    except DocumentFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))

    recipes = recipes_collection(db)
    inserted = 0
    for recipe in report.recipes:
        await upsert_recipe(recipes, recipe)
        inserted += 1
    log.info("round-up %s: stored=%d failed=%d", url, inserted, len(report.failures))
    return RoundupSaved(inserted=inserted, failures=report.failures)
