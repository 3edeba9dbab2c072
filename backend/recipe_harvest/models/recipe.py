# recipe_harvest/models/recipe.py
# Structured recipe record produced by the extraction pipeline.
# Recipe, Ingredient and Instruction are frozen once built.
# Macros stays mutable: Nutrient values are divided in place during normalization, before assembly.

from __future__ import annotations
from enum import Enum
from typing import Dict, List, Mapping, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

# Nutrient codes published by the nutrition widget (fixed slot set)
NUTRIENT_CODES = (
    "PROCNT", "FAT", "CHOCDF", "ENERC_KCAL", "SUGAR", "FIBTG",
    "CA", "FE", "MG", "P", "K", "NA", "ZN",
    "VITA_RAE", "TOCPHA", "VITD", "VITC", "THIA", "RIBF", "NIA",
    "VITB6A", "FOL", "VITB12", "VITK1",
    "CHOLE", "FATRN", "FASAT", "FAMS", "FAPU",
)


class Unit(str, Enum):
    TABLESPOON = "tablespoon"
    TEASPOON = "teaspoon"
    CUP = "cup"
    POUND = "pound"
    CONTAINER = "container"

    @classmethod
    def classify(cls, word: Optional[str]) -> Optional["Unit"]:
        """Map a unit word to a Unit; anything outside the vocabulary gives None."""
        if not word:
            return None
        return _UNIT_WORDS.get(word.strip().lower())


_UNIT_WORDS: Dict[str, Unit] = {
    "tablespoon": Unit.TABLESPOON, "tablespoons": Unit.TABLESPOON,
    "teaspoon": Unit.TEASPOON, "teaspoons": Unit.TEASPOON,
    "cup": Unit.CUP, "cups": Unit.CUP,
    "lb": Unit.POUND, "lbs": Unit.POUND, "pound": Unit.POUND, "pounds": Unit.POUND,
    "container": Unit.CONTAINER, "containers": Unit.CONTAINER,
}


class Nutrient(BaseModel):
    unit: str = ""
    label: str = ""
    quantity: float = 0.0
    daily: float = 0.0


def _zero_slots() -> Dict[str, Nutrient]:
    return {code: Nutrient() for code in NUTRIENT_CODES}


class Macros(RootModel[Dict[str, Nutrient]]):
    """Nutrient record keyed by code. Every code in NUTRIENT_CODES is always present."""

    root: Dict[str, Nutrient] = Field(default_factory=_zero_slots)

    @model_validator(mode="before")
    @classmethod
    def _fill_slots(cls, data):
        # unknown codes dropped, missing/null codes become zero nutrients
        if not isinstance(data, Mapping):
            return data
        return {code: (data.get(code) or {}) for code in NUTRIENT_CODES}

    def __getitem__(self, code: str) -> Nutrient:
        return self.root[code]

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def normalize_by_servings(self, servings: int) -> None:
        if servings < 1:
            raise ValueError(f"servings must be positive, got {servings}")
        for nutrient in self.root.values():
            nutrient.quantity /= servings
            nutrient.daily /= servings


class Instruction(BaseModel):
    model_config = ConfigDict(frozen=True)

    section: Optional[str] = None
    steps: List[str] = Field(default_factory=list)


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quantity: float = Field(default=0.0, ge=0)   # 0 when the markup has no amount ("salt to taste")
    unit: Optional[Unit] = None
    prepped: Optional[str] = None


def recipe_slug(url: str) -> str:
    # https://host/easy-meat-lasagna/ -> easy-meat-lasagna
    return urlparse(url).path.strip("/")


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    img: str = ""
    url: str
    cuisine: str = ""
    category: str = ""
    method: str = ""
    total_time: int = Field(default=0, ge=0)
    prep_time: int = Field(default=0, ge=0)
    cook_time: int = Field(default=0, ge=0)
    name: str
    description: Optional[str] = None
    instructions: List[Instruction] = Field(default_factory=list)
    ingredients: List[Ingredient] = Field(default_factory=list)
    video: Optional[str] = None
    notes: Optional[str] = None
    servings: int = Field(default=1, ge=1)
    equipment: List[str] = Field(default_factory=list)
    macros: Optional[Macros] = None

    @property
    def slug(self) -> str:
        return recipe_slug(self.url)
