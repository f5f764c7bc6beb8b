"""Server-rendered storefront pages."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, make_response, render_template, request

from cafego.app.common.errors import StoreError, fail
from cafego.app.common.validation import last_path_segment, parse_int_id
from cafego.app.models import IndexPageData, find_product, get_products

log = logging.getLogger(__name__)

ui_bp = Blueprint("ui", __name__)

# User-supplied values are cut to this length before logging
LOG_VALUE_LIMIT = 64


@ui_bp.get("/")
def index():
    page = IndexPageData(
        username=current_app.config["DISPLAY_USERNAME"],
        products=get_products(),
    )
    return render_template("index.html", page=page)


@ui_bp.get("/product/", defaults={"subpath": ""})
@ui_bp.get("/product/<path:subpath>")
def product_detail(subpath: str):
    # Only the trailing segment names the product: /product/a/b/2 -> 2
    raw_id = last_path_segment(subpath)
    try:
        product_id = parse_int_id(raw_id, field="product_id")
    except StoreError:
        log.warning("Rejected product id %r", raw_id[:LOG_VALUE_LIMIT])
        raise

    product = find_product(product_id)
    if product is None:
        log.warning("No product with id %s", product_id)
        fail(404, "not_found", "Product not found", {"product_id": product_id})

    return render_template("product.html", product=product)


@ui_bp.route("/login/", methods=["GET", "POST"])
def login():
    if request.method == "GET":
        return render_template("login.html")

    # No credential check: the submitted name is stored as-is.
    # A form field wins over a query parameter of the same name.
    username = request.form.get("username", request.args.get("username", ""))
    cookie_name = current_app.config["USERNAME_COOKIE"]
    resp = make_response("", 200)
    resp.set_cookie(cookie_name, username)
    log.info("Set %s cookie for %r", cookie_name, username[:LOG_VALUE_LIMIT])
    return resp
