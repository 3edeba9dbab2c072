# recipe_harvest/db/indexes.py
# Collection indexes; awaited once from app startup (and by the seed script)

from __future__ import annotations

from recipe_harvest.core.config import settings

async def ensure_indexes(db) -> None:
    col = db[settings.MONGO_COLLECTION]
    # _id is the URL slug; url itself is the external key and must stay unique
    await col.create_index("url", unique=True, name="url_1")
    await col.create_index("name", name="name_1")
    await col.create_index("cuisine", name="cuisine_1")
    await col.create_index("ingredients.name", name="ingredients_name_1")
