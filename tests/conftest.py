"""Shared pytest fixtures for the menu build tests."""
import copy
from textwrap import dedent

import pytest

MORNING_BREW_YAML = dedent("""\
    menu:
      title: Morning Brew
      sections:
        - name: Coffee
          items:
            - name: Espresso
              price: "$3.00"
        - name: Tea
          items:
            - name: Green Tea
              price: {Small: "$2.50", Large: "$3.50"}
              description: "Locally sourced"
""")

MORNING_BREW = {
    "menu": {
        "title": "Morning Brew",
        "sections": [
            {
                "name": "Coffee",
                "items": [{"name": "Espresso", "price": "$3.00"}],
            },
            {
                "name": "Tea",
                "items": [
                    {
                        "name": "Green Tea",
                        "price": {"Small": "$2.50", "Large": "$3.50"},
                        "description": "Locally sourced",
                    }
                ],
            },
        ],
    }
}


@pytest.fixture
def document() -> dict:
    """A fresh, valid parsed menu document that tests may mutate."""
    return copy.deepcopy(MORNING_BREW)


@pytest.fixture
def menu_file(tmp_path):
    """Write the Morning Brew menu to a temporary YAML file."""
    path = tmp_path / "menu" / "menu.yml"
    path.parent.mkdir()
    path.write_text(MORNING_BREW_YAML, encoding="utf-8")
    return path
