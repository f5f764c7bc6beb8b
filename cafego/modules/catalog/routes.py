from __future__ import annotations

from flask import Blueprint

from cafego.app.common.errors import fail
from cafego.app.common.validation import parse_int_id
from cafego.app.models import find_product, get_products

bp = Blueprint("catalog", __name__)


@bp.get("/products")
def list_products():
    """GET /api/products - The full catalog, in menu order."""
    items = [p.to_dict() for p in get_products()]
    return {"items": items, "count": len(items)}, 200


@bp.get("/products/<product_id>")
def get_product(product_id: str):
    """GET /api/products/<id> - Retrieve product details."""
    p = find_product(parse_int_id(product_id, field="product_id"))
    if p is None:
        fail(404, "not_found", "Product not found")

    return p.to_dict(), 200
