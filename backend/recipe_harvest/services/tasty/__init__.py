# recipe_harvest/services/tasty
# Extraction pipeline for Tasty Recipes (WordPress plugin) markup

from recipe_harvest.services.tasty.assembler import build_recipe, fetch_recipe
from recipe_harvest.services.tasty.durations import parse_duration
from recipe_harvest.services.tasty.errors import (
    DocumentFetchError,
    ExtractionError,
    FieldDecodeError,
    HarvestError,
    IngredientNameMissing,
    JsonDecodeError,
    LandmarkNotFound,
    PatternMismatch,
    RecipeBuildError,
    ScriptNotFound,
)
from recipe_harvest.services.tasty.fetch import fetch_document
from recipe_harvest.services.tasty.roundup import CrawlReport, collect_links, crawl_roundup

__all__ = [
    "build_recipe",
    "fetch_recipe",
    "fetch_document",
    "parse_duration",
    "crawl_roundup",
    "collect_links",
    "CrawlReport",
    "HarvestError",
    "ExtractionError",
    "LandmarkNotFound",
    "IngredientNameMissing",
    "FieldDecodeError",
    "JsonDecodeError",
    "ScriptNotFound",
    "PatternMismatch",
    "DocumentFetchError",
    "RecipeBuildError",
]
