"""Production planning model: products, stock of components and order checks."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum

PRODUCT_SLOTS = 5


class ResourceKind(Enum):
    """The four components kept in stock, numbered as in the menus."""

    CHIPS = 1
    SCREENS = 2
    MICROPHONES = 3
    SPEAKERS = 4


@dataclass
class Resources:
    """Quantities of each component, either in stock or needed for an order."""

    chips: int = 0
    screens: int = 0
    microphones: int = 0
    speakers: int = 0

    _ATTRIBUTES = {
        ResourceKind.CHIPS: "chips",
        ResourceKind.SCREENS: "screens",
        ResourceKind.MICROPHONES: "microphones",
        ResourceKind.SPEAKERS: "speakers",
    }

    def _pairs(self, other: Resources):
        for f in fields(self):
            yield getattr(self, f.name), getattr(other, f.name)

    def satisfied_count(self, needed: Resources) -> int:
        """Number of components whose stock reaches the needed amount."""
        return sum(have >= need for have, need in self._pairs(needed))

    def covers(self, needed: Resources) -> bool:
        """True when every component is available in the needed amount."""
        return self.satisfied_count(needed) == len(ResourceKind)

    def subtract(self, needed: Resources) -> None:
        """Take the needed amounts out of this stock."""
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) - getattr(needed, f.name))

    def add(self, kind: ResourceKind | int, amount: int) -> None:
        """Add a positive amount of one component to the stock."""
        if amount <= 0:
            raise ValueError("amount must be a positive integer")
        kind = ResourceKind(kind)
        attribute = self._ATTRIBUTES[kind]
        setattr(self, attribute, getattr(self, attribute) + amount)


_REQUIREMENTS = {
    1: (4, 1, 2, 3),
    2: (3, 2, 1, 2),
    3: (5, 4, 3, 6),
    4: (7, 3, 2, 5),
    5: (2, 5, 3, 5),
}


def _check_number(number: int) -> None:
    if number not in _REQUIREMENTS:
        raise ValueError(f"product number must be between 1 and {PRODUCT_SLOTS}")


def requirements_for(number: int, demand: int) -> Resources:
    """Components needed to build `demand` units of product `number` (1-5)."""
    _check_number(number)
    return Resources(*(per_unit * demand for per_unit in _REQUIREMENTS[number]))


def meets_deadline(required_time: int, deadline: int) -> bool:
    """True when an order needing `required_time` fits in `deadline`."""
    if deadline <= 0:
        raise ValueError("deadline must be a positive integer")
    return deadline >= required_time


@dataclass
class Product:
    """One catalogue slot: a name, the time to make one unit and its demand."""

    name: str = ""
    time: int = 0
    demand: int = 0


class ProductNotFoundError(LookupError):
    """Raised when no catalogue slot carries the requested name."""


@dataclass
class Catalog:
    """A fixed set of five product slots."""

    products: list[Product] = field(
        default_factory=lambda: [Product() for _ in range(PRODUCT_SLOTS)]
    )

    def index_of(self, name: str) -> int:
        """Position of the first product with this name."""
        for index, product in enumerate(self.products):
            if product.name == name:
                return index
        raise ProductNotFoundError(name)

    def edit(self, name: str, new_name: str, demand: int, time: int) -> Product:
        """Replace the name, demand and time of the product called `name`."""
        index = self.index_of(name)
        if demand <= 0:
            raise ValueError("demand must be a positive integer")
        if time <= 0:
            raise ValueError("time must be a positive integer")
        product = self.products[index]
        product.name = new_name
        product.demand = demand
        product.time = time
        return product

    def remove(self, name: str) -> None:
        """Clear the slot of the product called `name`."""
        index = self.index_of(name)
        self.products[index] = Product()

    def _product(self, number: int) -> Product:
        _check_number(number)
        return self.products[number - 1]

    def production_time(self, number: int) -> int:
        """Total time to produce the demand of product `number` (1-5)."""
        product = self._product(number)
        return product.demand * product.time

    def requirements(self, number: int) -> Resources:
        """Components needed to meet the demand of product `number` (1-5)."""
        return requirements_for(number, self._product(number).demand)