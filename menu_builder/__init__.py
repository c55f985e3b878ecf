"""Renders the shop's YAML menu into the static page served by the CDK stack."""
from .errors import MenuError, MenuFileNotFoundError, MenuParseError, MenuValidationError
from .loader import load_document
from .models import Item, Menu, Section, SimplePrice, SizedPrice, format_price
from .renderer import render
from .validator import validate
from .writer import write_output

__all__ = [
    "Item",
    "Menu",
    "MenuError",
    "MenuFileNotFoundError",
    "MenuParseError",
    "MenuValidationError",
    "Section",
    "SimplePrice",
    "SizedPrice",
    "format_price",
    "load_document",
    "render",
    "validate",
    "write_output",
]
