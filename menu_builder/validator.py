"""
Schema checks for a parsed menu document.

Checks run top-down, left to right, and the first failing check raises
MenuValidationError with its message. Nothing is collected past that point,
so the same invalid document always yields the same message.
"""
from loguru import logger

from menu_builder.errors import MenuValidationError
from menu_builder.models import Item, Menu, Section, price_from_node


def _is_mapping(node) -> bool:
    return isinstance(node, dict)


def _is_filled_sequence(node) -> bool:
    return isinstance(node, list) and len(node) > 0


def _is_filled_string(node) -> bool:
    # emptiness is judged on the trimmed value, the untrimmed one is what gets rendered
    return isinstance(node, str) and bool(node.strip())


def _is_valid_price(node) -> bool:
    if isinstance(node, str):
        return _is_filled_string(node)
    if _is_mapping(node):
        return len(node) > 0 and all(_is_filled_string(value) for value in node.values())
    return False


def _description(node):
    # numbers are shown as written; false, lists and mappings count as no description
    if isinstance(node, str):
        return node
    if isinstance(node, (int, float)) and not isinstance(node, bool):
        return str(node)
    return None


def validate_item(node, index: int, section_name: str) -> Item:
    if not _is_mapping(node):
        raise MenuValidationError(f"Item {index} in section '{section_name}' must be a mapping.")
    if not _is_filled_string(node.get("name")):
        raise MenuValidationError(f"Item {index} in section '{section_name}' is missing a 'name'.")
    if not _is_valid_price(node.get("price")):
        raise MenuValidationError(
            f"Item '{node['name']}' in section '{section_name}' has invalid price."
        )

    return Item(
        name=node["name"],
        price=price_from_node(node["price"]),
        description=_description(node.get("description")),
    )


def validate_section(node, index: int) -> Section:
    if not _is_mapping(node):
        raise MenuValidationError(f"Section {index} must be a mapping.")
    if not _is_filled_string(node.get("name")):
        raise MenuValidationError(f"Section {index} is missing a 'name'.")

    name = node["name"]
    items = node.get("items")
    if not _is_filled_sequence(items):
        raise MenuValidationError(f"Section '{name}' must have an 'items' array.")

    return Section(
        name=name,
        items=tuple(validate_item(item, item_index, name)
                    for item_index, item in enumerate(items, start=1)),
    )


def validate(document) -> Menu:
    """
    returns the typed Menu for a parsed document or raises MenuValidationError
    """
    if not (_is_mapping(document) and _is_mapping(document.get("menu"))):
        raise MenuValidationError("YAML root must be a mapping with a 'menu' key.")

    menu = document["menu"]
    title = menu.get("title")
    sections = menu.get("sections")

    if not _is_filled_string(title):
        raise MenuValidationError("'menu.title' must be a non-empty string.")
    if not _is_filled_sequence(sections):
        raise MenuValidationError("'menu.sections' must be an array.")

    validated = Menu(
        title=title,
        sections=tuple(validate_section(section, index)
                       for index, section in enumerate(sections, start=1)),
    )
    logger.debug("Menu '{}' validated ({} sections)", title, len(validated.sections))
    return validated
