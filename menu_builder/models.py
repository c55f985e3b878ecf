"""
Validated menu tree handed from the validator to the renderer.
"""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SimplePrice(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["simple"] = "simple"
    amount: str

    def format(self) -> str:
        return self.amount


class SizedPrice(BaseModel):
    """
    price per size label, kept in the order the menu lists them
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["sized"] = "sized"
    sizes: dict[str, str]

    def format(self) -> str:
        return " / ".join(f"{size}: {value}" for size, value in self.sizes.items())


Price = Annotated[Union[SimplePrice, SizedPrice], Field(discriminator="kind")]


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: Price
    description: Optional[str] = None

    @property
    def has_description(self) -> bool:
        return self.description is not None and bool(self.description.strip())


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    items: tuple[Item, ...]


class Menu(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    sections: tuple[Section, ...]


def format_price(price: Price) -> str:
    return price.format()


def price_from_node(node) -> Price:
    """
    builds the price variant for an already validated price node
    """
    if isinstance(node, dict):
        return SizedPrice(sizes={str(size): value for size, value in node.items()})
    return SimplePrice(amount=node)
