# recipe_harvest/services/tasty/header.py
# <header> of a recipe card: name (first h2) + total time

from __future__ import annotations
from typing import Tuple

from bs4 import Tag

from recipe_harvest.services.tasty.durations import parse_duration
from recipe_harvest.services.tasty.errors import LandmarkNotFound

TOTAL_TIME_CLASS = "tasty-recipes-total-time"

def parse_header(header: Tag) -> Tuple[str, int]:
    """Return (name, total_time_minutes). Both landmarks are required."""
    h2 = header.find("h2")
    if h2 is None:
        raise LandmarkNotFound("Recipe header has no h2 title")

    time_el = header.find(class_=TOTAL_TIME_CLASS)
    if time_el is None:
        raise LandmarkNotFound(f"Recipe header has no .{TOTAL_TIME_CLASS}")

    return h2.get_text().strip(), parse_duration(time_el.get_text())
