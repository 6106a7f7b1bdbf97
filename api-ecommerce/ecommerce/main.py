# ecommerce/main.py
from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from ecommerce.api.middlewares.error_handler import register_error_handlers
from ecommerce.api.routes import register_routes
from ecommerce.config.flask_config import configure_app
from ecommerce.config.logging_config import configure_logging
from ecommerce.config.settings import settings
from ecommerce.infrastructure.database.session import init_db

import ecommerce.infrastructure.database.models  # noqa: F401


def create_app() -> Flask:
    configure_logging()

    app = Flask(__name__)

    CORS(
        app,
        resources={rf"{settings.api_prefix}/*": {"origins": settings.cors_origins}},
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    )

    configure_app(app)
    register_routes(app, api_prefix=settings.api_prefix, app_prefix=settings.app_prefix.rstrip("/"))
    register_error_handlers(app)

    if settings.db_auto_create:
        init_db()

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=settings.debug)
