import pytest
from bs4 import BeautifulSoup

from recipe_harvest.models.recipe import Ingredient, Unit
from recipe_harvest.services.tasty.errors import (
    FieldDecodeError,
    IngredientNameMissing,
    LandmarkNotFound,
)
from recipe_harvest.services.tasty.ingredients import merge_ingredients, parse_ingredient_list

URL = "https://www.aheadofthyme.com/minestrone-soup/"


def _ul(items: str):
    return BeautifulSoup(f"<ul>{items}</ul>", "lxml").find("ul")


def test_amount_unit_and_prep_note():
    ul = _ul(
        '<li><span class="cb"></span><span data-amount="0.5" data-unit="cups">½ cup</span> '
        "<strong>parmesan</strong>, <em>freshly grated</em></li>"
    )
    [ing] = parse_ingredient_list(ul, URL)
    assert ing.name == "parmesan"
    assert ing.quantity == 0.5
    assert ing.unit is Unit.CUP
    assert ing.prepped == "freshly grated"


def test_amount_from_nested_span():
    ul = _ul(
        '<li><span class="cb"></span><span data-unit="teaspoon"><span data-amount="1.25">1 ¼</span> tsp</span>'
        " <strong>cumin</strong></li>"
    )
    [ing] = parse_ingredient_list(ul, URL)
    assert ing.quantity == 1.25
    assert ing.unit is Unit.TEASPOON


def test_item_without_amount_defaults_to_zero():
    ul = _ul("<li><strong>fresh parsley</strong>, optional for serving</li>")
    [ing] = parse_ingredient_list(ul, URL)
    assert ing.quantity == 0
    assert ing.unit is None
    assert ing.prepped is None


def test_bold_fallback_for_name():
    ul = _ul("<li><b>salt</b> to taste</li>")
    [ing] = parse_ingredient_list(ul, URL)
    assert ing.name == "salt"


def test_unknown_unit_does_not_fail_item():
    ul = _ul('<li><span></span><span data-amount="1" data-unit="Tbsp">1 Tbsp</span> <strong>honey</strong></li>')
    [ing] = parse_ingredient_list(ul, URL)
    assert ing.quantity == 1.0
    assert ing.unit is None


def test_missing_name_reports_url_and_item_text():
    ul = _ul('<li><span></span><span data-amount="2">2</span> eggs</li>')
    with pytest.raises(IngredientNameMissing) as exc:
        parse_ingredient_list(ul, URL)
    assert exc.value.url == URL
    assert "eggs" in exc.value.item_text
    assert URL in str(exc.value)


def test_unparseable_amount_is_decode_error():
    ul = _ul('<li><span></span><span data-amount="a pinch">a pinch</span> <strong>salt</strong></li>')
    with pytest.raises(FieldDecodeError):
        parse_ingredient_list(ul, URL)


def test_negative_amount_is_decode_error():
    ul = _ul('<li><span></span><span data-amount="-1">-1</span> <strong>salt</strong></li>')
    with pytest.raises(FieldDecodeError):
        parse_ingredient_list(ul, URL)


def test_amount_container_without_amount_is_structural_failure():
    ul = _ul('<li><span></span><span data-unit="cups">some</span> <strong>rice</strong></li>')
    with pytest.raises(LandmarkNotFound):
        parse_ingredient_list(ul, URL)


def test_merge_sums_quantities_and_keeps_first_seen_order():
    book = {}
    merge_ingredients(book, [
        Ingredient(name="butter", quantity=1.5, unit=Unit.CUP, prepped="melted"),
        Ingredient(name="sugar", quantity=1.0),
    ])
    merge_ingredients(book, [
        Ingredient(name="butter", quantity=2.0, unit=Unit.TABLESPOON, prepped="softened"),
        Ingredient(name="flour", quantity=3.0),
    ])

    assert list(book) == ["butter", "sugar", "flour"]
    butter = book["butter"]
    assert butter.quantity == 3.5
    # first entry's unit and note survive the merge
    assert butter.unit is Unit.CUP
    assert butter.prepped == "melted"
    assert book["flour"].quantity == 3.0


def test_merge_is_case_sensitive():
    book = {}
    merge_ingredients(book, [Ingredient(name="Garlic", quantity=1), Ingredient(name="garlic", quantity=2)])
    assert len(book) == 2
