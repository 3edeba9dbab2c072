# recipe_harvest/services/tasty/nutrition.py
# Nutrition label iframe (nutrifox embed) -> Macros per serving
#
# The widget page carries its data in an inline script:
#   var preloaded = {'recipe': {"servings": 4, "nutrients": {"PROCNT": {...}, ...}, ...}}
# The outer object is not JSON (single quotes) so the inner object is cut out by pattern.

from __future__ import annotations
import json
import logging
import re
from typing import Any, Optional, Tuple

from pydantic import ValidationError

from recipe_harvest.models.recipe import Macros
from recipe_harvest.services.tasty.errors import (
    FieldDecodeError,
    JsonDecodeError,
    PatternMismatch,
    ScriptNotFound,
)
from recipe_harvest.services.tasty.fetch import FetchDocument, fetch_document

log = logging.getLogger(__name__)

PRELOADED_RE = re.compile(r"var preloaded = \{'recipe': (.*)\}")

def decode_payload(script_text: str) -> dict:
    m = PRELOADED_RE.search(script_text)
    if m is None:
        raise PatternMismatch(script_text)
    try:
        payload = json.loads(m.group(1))
    except json.JSONDecodeError as e:
        raise JsonDecodeError(f"Nutrition payload is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise JsonDecodeError(f"Nutrition payload is not an object: {type(payload).__name__}")
    return payload

def _servings(raw: Any) -> int:
    # bool is an int subclass; true/false is not a serving count
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise FieldDecodeError(f"Failed to parse servings: {raw!r}")
    if raw == 0:
        raise FieldDecodeError("Servings is 0; cannot normalize nutrition per serving")
    return raw

def macros_from_payload(payload: dict) -> Optional[Tuple[Macros, int]]:
    """(macros normalized per serving, servings), or None when the payload has no nutrition."""
    nutrients = payload.get("nutrients")
    raw_servings = payload.get("servings")
    if nutrients is None or raw_servings is None:
        return None

    servings = _servings(raw_servings)
    try:
        macros = Macros.model_validate(nutrients)
    except ValidationError as e:
        raise FieldDecodeError(f"Malformed nutrients: {e}") from e

    macros.normalize_by_servings(servings)
    return macros, servings

async def get_macros(url: str, fetch: FetchDocument = fetch_document) -> Optional[Tuple[Macros, int]]:
    document = await fetch(url)

    script = document.find(lambda tag: tag.name == "script" and not tag.has_attr("src"))
    if script is None:
        raise ScriptNotFound(f"Could not find script tag from: {url}")

    result = macros_from_payload(decode_payload(script.string or ""))
    if result is None:
        log.info("nutrition label without nutrients/servings: %s", url)
    return result
