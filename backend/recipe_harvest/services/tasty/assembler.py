# recipe_harvest/services/tasty/assembler.py
# Recipe page (Tasty Recipes card) -> Recipe
#
# Required landmarks: jump link, recipe block, <header>, entry content.
# Optional: description, ingredients, instructions, video, notes, details list, equipment, nutrition.
# Missing optional -> field stays unset. Any ExtractionError -> RecipeBuildError(url).

from __future__ import annotations
import logging
from typing import Dict, List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from recipe_harvest.models.recipe import Ingredient, Recipe
from recipe_harvest.services.tasty.durations import parse_duration
from recipe_harvest.services.tasty.errors import ExtractionError, LandmarkNotFound, RecipeBuildError
from recipe_harvest.services.tasty.fetch import FetchDocument, fetch_document
from recipe_harvest.services.tasty.header import parse_header
from recipe_harvest.services.tasty.ingredients import merge_ingredients, parse_ingredient_list
from recipe_harvest.services.tasty.instructions import parse_instructions
from recipe_harvest.services.tasty.nutrition import get_macros
from recipe_harvest.services.utils import clean_text

log = logging.getLogger(__name__)

JUMP_LINK_CLASS = "tasty-recipes-jump-link"
JUMP_TARGET_SUFFIX = "-jump-target"
NUTRITION_FRAME_TITLE = "nutritional information"

# details <li class="..."> -> (value element class, recipe field)
DETAIL_FIELDS = {
    "prep-time": ("tasty-recipes-prep-time", "prep_time"),
    "cook-time": ("tasty-recipes-cook-time", "cook_time"),
    "cuisine": ("tasty-recipes-cuisine", "cuisine"),
    "category": ("tasty-recipes-category", "category"),
    "method": ("tasty-recipes-method", "method"),
}
DURATION_FIELDS = {"prep_time", "cook_time"}

# ---------------------------------------------------------------------
# Landmarks
# ---------------------------------------------------------------------
def recipe_block_id(document: BeautifulSoup) -> str:
    link = document.find(class_=JUMP_LINK_CLASS)
    href = link.get("href") if link is not None else None
    if not href:
        raise LandmarkNotFound("ID not found in document")
    return href.lstrip("#").removesuffix(JUMP_TARGET_SUFFIX)

def find_recipe_block(document: BeautifulSoup) -> Tag:
    block_id = recipe_block_id(document)
    block = document.find(id=block_id)
    if block is None:
        raise LandmarkNotFound(f"ID not found in document (after jump link was found): {block_id}")
    return block

def _required(parent: Tag, what: str, **kwargs) -> Tag:
    el = parent.find(**kwargs)
    if el is None:
        raise LandmarkNotFound(f"Recipe block has no {what}")
    return el

def _is_nutrition_frame(tag: Tag) -> bool:
    return tag.name == "iframe" and tag.get("title") == NUTRITION_FRAME_TITLE

# ---------------------------------------------------------------------
# Optional sections
# ---------------------------------------------------------------------
def _video(body: Tag) -> Optional[str]:
    frame = body.find(lambda t: t.name == "iframe" and t.has_attr("src") and not _is_nutrition_frame(t))
    return frame["src"] if frame is not None else None

def _notes(body: Tag) -> Optional[str]:
    notes = body.find(class_="tasty-recipes-notes")
    return clean_text(notes.get_text()) if notes is not None else None

def _description(body: Tag) -> Optional[str]:
    desc = body.find(class_="tasty-recipes-description-body")
    return desc.get_text().strip() if desc is not None else None

def _details(body: Tag) -> Dict[str, object]:
    """prep/cook time, cuisine, category, method from the details list.

    Unknown items and items without their value element are skipped.
    A present-but-unparseable time aborts the recipe like any other duration.
    """
    out: Dict[str, object] = {}
    details = body.find(class_="tasty-recipes-other-details")
    ul = details.find("ul") if details is not None else None
    if ul is None:
        return out

    for li in ul.find_all("li"):
        key = " ".join(li.get("class") or [])
        if key not in DETAIL_FIELDS:
            continue
        value_class, field = DETAIL_FIELDS[key]
        value_el = li.find(class_=value_class)
        if value_el is None:
            continue
        text = value_el.get_text()
        out[field] = parse_duration(text) if field in DURATION_FIELDS else text.strip()
    return out

def _equipment(body: Tag) -> List[str]:
    section = body.find(class_="tasty-recipes-equipment")
    if section is None:
        return []
    items = section.find_all("li") or section.find_all("a")
    names = [el.get_text().strip() for el in items]
    return list(dict.fromkeys(n for n in names if n))

def nutrition_url(body: Tag, page_url: str) -> Optional[str]:
    frame = body.find(lambda t: _is_nutrition_frame(t) and t.has_attr("data-l-src"))
    if frame is None:
        return None
    src = frame["data-l-src"]
    if src.startswith("//"):
        return "https:" + src
    return urljoin(page_url, src)

# ---------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------
async def _assemble(document: BeautifulSoup, url: str, img: str, fetch: FetchDocument) -> Recipe:
    block = find_recipe_block(document)
    header = _required(block, "header", name="header")
    body = _required(block, "entry content", class_="tasty-recipes-entry-content")

    name, total_time = parse_header(header)

    book: Dict[str, Ingredient] = {}
    ingredients_block = body.find(class_="tasty-recipes-ingredients")
    if ingredients_block is not None:
        for ul in ingredients_block.find_all("ul"):
            merge_ingredients(book, parse_ingredient_list(ul, url))

    instructions_block = body.find(class_="tasty-recipes-instructions")
    instructions = parse_instructions(instructions_block) if instructions_block is not None else []

    fields: Dict[str, object] = dict(
        img=img,
        url=url,
        name=name,
        total_time=total_time,
        description=_description(body),
        ingredients=list(book.values()),
        instructions=instructions,
        video=_video(body),
        notes=_notes(body),
        equipment=_equipment(body),
    )
    fields.update(_details(body))

    label_url = nutrition_url(body, url)
    if label_url:
        nutrition = await get_macros(label_url, fetch=fetch)
        if nutrition is not None:
            fields["macros"], fields["servings"] = nutrition

    return Recipe(**fields)

async def build_recipe(
    document: BeautifulSoup,
    url: str,
    img: str = "",
    fetch: FetchDocument = fetch_document,
) -> Recipe:
    """Build one Recipe from an already fetched page.

    `fetch` is only used for the nutrition label. Every extraction failure is
    re-raised as RecipeBuildError carrying `url`; nothing partial is returned.
    """
    try:
        return await _assemble(document, url, img, fetch)
    except ExtractionError as e:
        raise RecipeBuildError(url, e) from e

async def fetch_recipe(url: str, img: str = "", fetch: FetchDocument = fetch_document) -> Recipe:
    try:
        document = await fetch(url)
    except ExtractionError as e:
        raise RecipeBuildError(url, e) from e
    log.debug("fetched %s", url)
    return await build_recipe(document, url, img=img, fetch=fetch)
