# recipe_harvest/api/routes_recipes.py
# Read back stored recipes by slug

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from recipe_harvest.db.init import get_db
from recipe_harvest.db.recipes import get_recipe, recipes_collection
from recipe_harvest.models.recipe import Recipe

router = APIRouter(prefix="/recipes", tags=["recipes"])

@router.get("/{slug:path}", response_model=Recipe)
async def read_recipe(slug: str, db = Depends(get_db)):
    recipe = await get_recipe(recipes_collection(db), slug.strip("/"))
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"recipe not found: {slug}")
    return recipe
