# ecommerce/api/routes/__init__.py

from flask import Flask

from ecommerce.api.routes.auth_routes import bp_auth
from ecommerce.api.routes.health_routes import bp_health
from ecommerce.api.routes.user_routes import bp_users


def register_routes(app: Flask, *, api_prefix: str, app_prefix: str) -> None:
    # health sits outside /api
    app.register_blueprint(bp_health, url_prefix=f"{app_prefix}/health")

    app.register_blueprint(bp_users, url_prefix=f"{api_prefix}/users")
    app.register_blueprint(bp_auth, url_prefix=f"{api_prefix}/auth")
