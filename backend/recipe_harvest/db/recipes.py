# recipe_harvest/db/recipes.py
# Recipe persistence keyed by URL slug (https://host/easy-meat-lasagna/ -> "easy-meat-lasagna")

from __future__ import annotations
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from recipe_harvest.core.config import settings
from recipe_harvest.models.recipe import Recipe

def recipes_collection(db) -> AsyncIOMotorCollection:
    return db[settings.MONGO_COLLECTION]

async def upsert_recipe(recipes: AsyncIOMotorCollection, recipe: Recipe) -> str:
    # Always overwrite with the latest snapshot
    slug = recipe.slug
    await recipes.update_one(
        {"_id": slug},
        {"$set": recipe.model_dump(mode="json")},
        upsert=True,
    )
    return slug

async def get_recipe(recipes: AsyncIOMotorCollection, slug: str) -> Optional[Recipe]:
    doc = await recipes.find_one({"_id": slug})
    if not doc:
        return None
    doc.pop("_id", None)
    return Recipe.model_validate(doc)
