# recipe_harvest/services/tasty/instructions.py
# .tasty-recipes-instructions -> Instruction groups
#
#   <div class="tasty-recipes-instructions">
#     <div> (title bar) </div>
#     <div>
#       <h4>Meat sauce:</h4> <ol><li>..</li></ol>
#       <h4>Assembly:</h4>   <ol><li>..</li></ol>
#     </div>
#   </div>

from __future__ import annotations
from typing import List

from bs4 import Tag

from recipe_harvest.models.recipe import Instruction
from recipe_harvest.services.tasty.errors import LandmarkNotFound

def _steps(ol: Tag) -> List[str]:
    return [li.get_text().strip() for li in ol.find_all("li")]

def parse_instructions(block: Tag) -> List[Instruction]:
    headings = block.find_all("h4")

    divs = block.find_all("div")
    if len(divs) < 2:
        raise LandmarkNotFound("Could not find the steps container in instructions block")
    lists = [child for child in divs[1].children if getattr(child, "name", None) == "ol"]

    if len(lists) == 1:
        return [Instruction(section=None, steps=_steps(lists[0]))]

    # Positional pairing; a trailing heading without a list (or list without heading)
    # is dropped on purpose, the site emits those.
    return [
        Instruction(section=h4.get_text().strip().rstrip(":"), steps=_steps(ol))
        for h4, ol in zip(headings, lists)
    ]
