"""In-memory catalog and user records.

Nothing here is persisted. The lists are built once at import time and
handed out as tuples so callers can't mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: int  # minor currency units
    description: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "description": self.description,
        }


@dataclass(frozen=True)
class User:
    id: int
    username: str
    # Plaintext and never checked; login only sets a cookie.
    password: str


@dataclass(frozen=True)
class IndexPageData:
    """View model for the index page."""

    username: str
    products: Tuple[Product, ...]


_PRODUCTS: Tuple[Product, ...] = (
    Product(id=1, name="Americano", price=100, description="Espresso, diluted for a lighter experience"),
    Product(id=2, name="Cappuccino", price=110, description="Espresso with steamed milk"),
    Product(id=3, name="Espresso", price=90, description="A strong shot of coffee"),
)

_USERS: Tuple[User, ...] = (
    User(id=1, username="matthew", password="password123"),
    User(id=2, username="zagreus", password="hades"),
)


def get_products() -> Tuple[Product, ...]:
    return _PRODUCTS


def get_users() -> Tuple[User, ...]:
    return _USERS


def find_product(product_id: int, products: Optional[Iterable[Product]] = None) -> Optional[Product]:
    """Linear scan for a product by id. Returns None when nothing matches."""
    for p in get_products() if products is None else products:
        if p.id == product_id:
            return p
    return None
