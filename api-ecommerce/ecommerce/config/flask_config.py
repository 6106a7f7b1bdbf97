from flask import Flask

from ecommerce.config.settings import settings


def configure_app(app: Flask) -> None:
    app.config["ENV"] = settings.environment
    app.config["DEBUG"] = settings.debug
    # ApiResponse payloads are already ordered the way clients expect
    app.json.sort_keys = False
