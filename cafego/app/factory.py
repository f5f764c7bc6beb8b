from __future__ import annotations

import logging
from flask import Flask

from cafego.app.config import Config
from cafego.app.extensions import cors
from cafego.app.common.errors import register_error_handlers
from cafego.app.common.request_context import install_request_id
from cafego.app.api.register import register_api_blueprints
from cafego.app.cli import cli_bp
from cafego.app.ui import ui_bp


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Basic logging
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    # Extensions
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    install_request_id(app)

    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    # Storefront pages and JSON API
    app.register_blueprint(ui_bp)
    register_api_blueprints(app)

    # CLI (flask products / flask users)
    app.register_blueprint(cli_bp)

    register_error_handlers(app)

    return app
