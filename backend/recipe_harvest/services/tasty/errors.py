# recipe_harvest/services/tasty/errors.py
# Failure taxonomy for the extraction pipeline.
# Absent optional landmarks are not errors (fields stay unset); everything here aborts one recipe.

from __future__ import annotations
from typing import Optional


class HarvestError(Exception):
    """Base for everything raised by recipe_harvest."""


class ExtractionError(HarvestError):
    """A per-recipe failure. Caught by the assembler and re-raised with the recipe URL."""


class LandmarkNotFound(ExtractionError):
    pass


class IngredientNameMissing(LandmarkNotFound):
    def __init__(self, url: str, item_text: str) -> None:
        self.url = url
        self.item_text = item_text
        super().__init__(
            f"Error building ingredients for: {url}. No ingredient name found: {item_text.strip()}"
        )


class FieldDecodeError(ExtractionError):
    pass


class JsonDecodeError(FieldDecodeError):
    pass


class ScriptNotFound(ExtractionError):
    pass


class PatternMismatch(ExtractionError):
    def __init__(self, script_text: str) -> None:
        self.script_text = script_text
        super().__init__(f"Nutrition pattern failed from: {script_text}")


class DocumentFetchError(ExtractionError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"GET failed for {url}: {reason}")


class RecipeBuildError(HarvestError):
    """One recipe could not be built; `cause` is the underlying ExtractionError."""

    def __init__(self, url: str, cause: Optional[ExtractionError] = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"{url}: {cause}" if cause else url)
