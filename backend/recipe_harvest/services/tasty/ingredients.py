# recipe_harvest/services/tasty/ingredients.py
# Ingredient list (<ul> inside .tasty-recipes-ingredients) -> Ingredient entries
# Markup per <li>:
#   <span data-amount="1.5" data-unit="cups">1 ½ cups</span> <strong>flour</strong>, <em>sifted</em>
# Amount sometimes lives one span deeper; items like "salt to taste" have no amount span at all.

from __future__ import annotations
import math
from typing import Dict, Iterable, List, Optional, Tuple

from bs4 import Tag

from recipe_harvest.models.recipe import Ingredient, Unit
from recipe_harvest.services.tasty.errors import (
    FieldDecodeError,
    IngredientNameMissing,
    LandmarkNotFound,
)

def _ingredient_name(li: Tag, url: str) -> str:
    name_el = li.find("strong") or li.find("b")
    if name_el is None:
        raise IngredientNameMissing(url, li.get_text())
    return name_el.get_text().strip()

def _parse_amount(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as e:
        raise FieldDecodeError(f"Could not parse ingredient amount: {raw!r}") from e
    if not math.isfinite(value) or value < 0:
        raise FieldDecodeError(f"Ingredient amount out of range: {raw!r}")
    return value

def _quantity_and_unit(li: Tag) -> Tuple[float, Optional[Unit]]:
    spans = li.find_all("span")
    if len(spans) < 2:
        # no amount container -> unit-less item
        return 0.0, None

    span = spans[1]
    raw = span.get("data-amount")
    if raw is None:
        inner = span.find("span")
        if inner is None or inner.get("data-amount") is None:
            raise LandmarkNotFound("Could not parse inner span")
        raw = inner["data-amount"]

    return _parse_amount(raw), Unit.classify(span.get("data-unit"))

def parse_ingredient_list(ul: Tag, url: str) -> List[Ingredient]:
    """One Ingredient per <li>, in document order (not merged yet)."""
    out: List[Ingredient] = []
    for li in ul.find_all("li"):
        name = _ingredient_name(li, url)
        quantity, unit = _quantity_and_unit(li)
        em = li.find("em")
        out.append(Ingredient(
            name=name,
            quantity=quantity,
            unit=unit,
            prepped=em.get_text() if em is not None else None,
        ))
    return out

def merge_ingredients(book: Dict[str, Ingredient], new: Iterable[Ingredient]) -> None:
    # Same name (exact match) -> quantities add up; first entry keeps its unit/prep note.
    # Recipes split one ingredient across bullets ("½ cup butter" for crust, "¼ cup butter" for filling).
    for ing in new:
        existing = book.get(ing.name)
        if existing is None:
            book[ing.name] = ing
        else:
            book[ing.name] = existing.model_copy(update={"quantity": existing.quantity + ing.quantity})
