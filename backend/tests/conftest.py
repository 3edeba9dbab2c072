# tests/conftest.py
# Synthetic Tasty Recipes pages + an in-memory fetch collaborator (no network)

from __future__ import annotations
from typing import Dict

import pytest

from recipe_harvest.services.tasty.errors import DocumentFetchError
from recipe_harvest.services.tasty.fetch import parse_document

RECIPE_URL = "https://www.aheadofthyme.com/easy-meat-lasagna/"
NUTRITION_URL = "https://nutrifox.com/embed/label/121461"

RECIPE_HTML = """
<html><body>
<div class="entry-content">
  <p>Intro text.</p>
  <a class="tasty-recipes-jump-link" href="#tasty-recipes-1234-jump-target">Jump to Recipe</a>
</div>
<div id="tasty-recipes-1234" class="tasty-recipes">
  <header class="tasty-recipes-entry-header">
    <h2 class="tasty-recipes-title">Easy Meat Lasagna</h2>
    <div class="tasty-recipes-details">
      <span class="tasty-recipes-label">Total Time:</span>
      <span class="tasty-recipes-total-time">1 hour 30 minutes</span>
    </div>
  </header>
  <div class="tasty-recipes-entry-content">
    <div class="tasty-recipes-description">
      <div class="tasty-recipes-description-body"><p>The best weeknight lasagna.</p></div>
    </div>
    <iframe title="nutritional information" src="about:blank"
            data-l-src="//nutrifox.com/embed/label/121461"></iframe>
    <div class="tasty-recipes-ingredients">
      <h3>Ingredients</h3>
      <div class="tasty-recipes-ingredients-body">
        <ul>
          <li><span class="tasty-recipes-ingredients-checkbox"></span><span data-amount="1.5" data-unit="pounds">1 1/2 pounds</span> <strong>ground beef</strong></li>
          <li><span class="tasty-recipes-ingredients-checkbox"></span><span data-amount="2" data-unit="cups">2 cups</span> <strong>mozzarella cheese</strong>, <em>shredded</em></li>
          <li><span class="tasty-recipes-ingredients-checkbox"></span><span data-unit="tablespoons"><span data-amount="2">2</span> tablespoons</span> <strong>olive oil</strong></li>
          <li><b>salt</b>, to taste</li>
        </ul>
        <h4>Topping</h4>
        <ul>
          <li><span class="tasty-recipes-ingredients-checkbox"></span><span data-amount="2.0" data-unit="cup">2 cups</span> <strong>mozzarella cheese</strong>, <em>grated</em></li>
          <li><span class="tasty-recipes-ingredients-checkbox"></span><span data-amount="1" data-unit="Tbsp">1 Tbsp</span> <strong>dried oregano</strong></li>
        </ul>
      </div>
    </div>
    <div class="tasty-recipes-instructions">
      <div class="tasty-recipes-instructions-header"><h3>Instructions</h3></div>
      <div class="tasty-recipes-instructions-body">
        <h4>Meat sauce:</h4>
        <ol><li>Brown the beef.</li><li>Stir in the sauce.</li><li>Simmer 20 minutes.</li></ol>
        <h4>Assembly:</h4>
        <ol><li>Layer noodles.</li><li>Spread sauce.</li><li>Add cheese.</li><li>Bake.</li></ol>
      </div>
    </div>
    <div class="tasty-recipes-equipment">
      <ul><li>9x13 baking dish</li><li>Large skillet</li></ul>
    </div>
    <iframe src="https://www.youtube.com/embed/abc123" allowfullscreen></iframe>
    <div class="tasty-recipes-notes"><p>Let&nbsp;it rest 15 minutes.\n\n\tServe warm.</p></div>
    <div class="tasty-recipes-other-details">
      <ul>
        <li class="prep-time"><span class="tasty-recipes-label">Prep Time:</span> <span class="tasty-recipes-prep-time">20 minutes</span></li>
        <li class="cook-time"><span class="tasty-recipes-label">Cook Time:</span> <span class="tasty-recipes-cook-time">1 hour</span></li>
        <li class="category"><span class="tasty-recipes-label">Category:</span> <span class="tasty-recipes-category">Dinner</span></li>
        <li class="method"><span class="tasty-recipes-label">Method:</span> <span class="tasty-recipes-method">Baked</span></li>
        <li class="cuisine"><span class="tasty-recipes-label">Cuisine:</span> <span class="tasty-recipes-cuisine">Italian</span></li>
        <li class="diet"><span class="tasty-recipes-label">Diet:</span> <span class="tasty-recipes-diet">None</span></li>
      </ul>
    </div>
  </div>
</div>
</body></html>
"""

NUTRITION_HTML = """
<html><head>
<script src="/static/label.js"></script>
<script>
var preloaded = {'recipe': {"id": 121461, "servings": 4, "nutrients": {"PROCNT": {"unit": "g", "label": "Protein", "quantity": 80, "daily": 160}, "ENERC_KCAL": {"unit": "kcal", "label": "Calories", "quantity": 2000, "daily": 100}, "XYZ": {"unit": "mg", "label": "Unknown", "quantity": 1, "daily": 1}}}};
</script>
</head><body><div id="label"></div></body></html>
"""


class FakeFetch:
    """In-memory stand-in for fetch_document; unknown URLs behave like a 404."""

    def __init__(self, pages: Dict[str, str]) -> None:
        self.pages = dict(pages)
        self.calls = []

    async def __call__(self, url: str):
        self.calls.append(url)
        if url not in self.pages:
            raise DocumentFetchError(url, "HTTP 404")
        return parse_document(self.pages[url])


@pytest.fixture
def recipe_html() -> str:
    return RECIPE_HTML


@pytest.fixture
def nutrition_html() -> str:
    return NUTRITION_HTML


@pytest.fixture
def fake_fetch():
    def _make(pages: Dict[str, str]) -> FakeFetch:
        return FakeFetch(pages)
    return _make


@pytest.fixture
def site_fetch(fake_fetch):
    return fake_fetch({RECIPE_URL: RECIPE_HTML, NUTRITION_URL: NUTRITION_HTML})
