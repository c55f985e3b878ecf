import pytest
from pydantic import ValidationError

from menu_builder.errors import MenuValidationError
from menu_builder.models import SimplePrice, SizedPrice
from menu_builder.validator import validate


def _error(document) -> str:
    with pytest.raises(MenuValidationError) as excinfo:
        validate(document)
    return str(excinfo.value)


class TestValidMenu:
    """A well-formed document becomes a typed Menu."""

    def test_returns_typed_menu(self, document):
        menu = validate(document)
        assert menu.title == "Morning Brew"
        assert [section.name for section in menu.sections] == ["Coffee", "Tea"]

    def test_price_variants(self, document):
        menu = validate(document)
        assert menu.sections[0].items[0].price == SimplePrice(amount="$3.00")
        sized = menu.sections[1].items[0].price
        assert isinstance(sized, SizedPrice)
        assert list(sized.sizes) == ["Small", "Large"]

    def test_untrimmed_values_are_kept(self, document):
        document["menu"]["title"] = "  Morning Brew "
        document["menu"]["sections"][0]["items"][0]["name"] = " Espresso"
        menu = validate(document)
        assert menu.title == "  Morning Brew "
        assert menu.sections[0].items[0].name == " Espresso"

    def test_description_is_optional(self, document):
        menu = validate(document)
        assert menu.sections[0].items[0].description is None
        assert not menu.sections[0].items[0].has_description
        assert menu.sections[1].items[0].has_description

    def test_blank_description_counts_as_absent(self, document):
        document["menu"]["sections"][0]["items"][0]["description"] = "   "
        assert not validate(document).sections[0].items[0].has_description

    def test_size_labels_become_strings(self, document):
        document["menu"]["sections"][0]["items"][0]["price"] = {12: "$3", 16: "$4"}
        price = validate(document).sections[0].items[0].price
        assert price.sizes == {"12": "$3", "16": "$4"}

    def test_menu_is_immutable(self, document):
        menu = validate(document)
        with pytest.raises(ValidationError):
            menu.title = "Other"


@pytest.mark.parametrize(
    "document,message",
    [
        (None, "YAML root must be a mapping with a 'menu' key."),
        (["menu"], "YAML root must be a mapping with a 'menu' key."),
        ({"other": {}}, "YAML root must be a mapping with a 'menu' key."),
        ({"menu": "Coffee"}, "YAML root must be a mapping with a 'menu' key."),
        ({"menu": {}}, "'menu.title' must be a non-empty string."),
        ({"menu": {"title": "   "}}, "'menu.title' must be a non-empty string."),
        ({"menu": {"title": 42}}, "'menu.title' must be a non-empty string."),
        ({"menu": {"title": "Brew"}}, "'menu.sections' must be an array."),
        ({"menu": {"title": "Brew", "sections": []}}, "'menu.sections' must be an array."),
        ({"menu": {"title": "Brew", "sections": {"name": "Coffee"}}}, "'menu.sections' must be an array."),
        ({"menu": {"title": "Brew", "sections": ["Coffee"]}}, "Section 1 must be a mapping."),
        ({"menu": {"title": "Brew", "sections": [{"items": []}]}}, "Section 1 is missing a 'name'."),
        ({"menu": {"title": "Brew", "sections": [{"name": " "}]}}, "Section 1 is missing a 'name'."),
        ({"menu": {"title": "Brew", "sections": [{"name": "Coffee"}]}},
         "Section 'Coffee' must have an 'items' array."),
        ({"menu": {"title": "Brew", "sections": [{"name": "Coffee", "items": []}]}},
         "Section 'Coffee' must have an 'items' array."),
    ],
)
def test_structure_errors(document, message):
    assert _error(document) == message


def _with_item(item) -> dict:
    return {"menu": {"title": "Brew", "sections": [{"name": "Coffee", "items": [item]}]}}


@pytest.mark.parametrize(
    "item,message",
    [
        ("Espresso", "Item 1 in section 'Coffee' must be a mapping."),
        ({"price": "$3"}, "Item 1 in section 'Coffee' is missing a 'name'."),
        ({"name": "", "price": "$3"}, "Item 1 in section 'Coffee' is missing a 'name'."),
        ({"name": "Espresso"}, "Item 'Espresso' in section 'Coffee' has invalid price."),
        ({"name": "Espresso", "price": "  "}, "Item 'Espresso' in section 'Coffee' has invalid price."),
        ({"name": "Espresso", "price": 3.0}, "Item 'Espresso' in section 'Coffee' has invalid price."),
        ({"name": "Espresso", "price": {}}, "Item 'Espresso' in section 'Coffee' has invalid price."),
        ({"name": "Espresso", "price": {"Small": "$3", "Large": ""}},
         "Item 'Espresso' in section 'Coffee' has invalid price."),
        ({"name": "Espresso", "price": {"Small": 3}},
         "Item 'Espresso' in section 'Coffee' has invalid price."),
        ({"name": "Espresso", "price": ["$3"]}, "Item 'Espresso' in section 'Coffee' has invalid price."),
    ],
)
def test_item_errors(item, message):
    assert _error(_with_item(item)) == message


class TestCheckOrder:
    """The first violation in document order is the one reported."""

    def test_title_checked_before_sections(self):
        assert _error({"menu": {"title": "", "sections": []}}) == "'menu.title' must be a non-empty string."

    def test_earlier_section_items_win_over_later_sections(self, document):
        document["menu"]["sections"][0]["items"][0]["price"] = ""
        document["menu"]["sections"][1] = "Tea"
        assert _error(document) == "Item 'Espresso' in section 'Coffee' has invalid price."

    def test_later_sections_are_not_reached(self, document):
        document["menu"]["sections"][1]["items"].append({"name": "Chai"})
        document["menu"]["sections"].append({"name": ""})
        assert _error(document) == "Item 'Chai' in section 'Tea' has invalid price."

    def test_second_item_reported_by_position(self, document):
        document["menu"]["sections"][1]["items"].append(["Chai"])
        assert _error(document) == "Item 2 in section 'Tea' must be a mapping."

    def test_same_document_fails_the_same_way(self, document):
        document["menu"]["sections"][1]["name"] = None
        first = _error(document)
        assert first == "Section 2 is missing a 'name'."
        assert _error(document) == first


@pytest.mark.parametrize(
    "description,expected",
    [
        (False, None),
        (True, None),
        ([], None),
        ({"note": "hot"}, None),
        (42, "42"),
        (1.5, "1.5"),
    ],
)
def test_non_string_descriptions(document, description, expected):
    document["menu"]["sections"][0]["items"][0]["description"] = description
    item = validate(document).sections[0].items[0]
    assert item.description == expected
    assert item.has_description is (expected is not None)
