from flask import Flask
from .config import Config
from .extensions import cors


def create_app(config_class: type[Config] = Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Items keep the field order they were stored with
    app.json.sort_keys = False

    # Extensions
    cors.init_app(app)

    # Blueprints
    from .routes.pages import bp as pages_bp
    from .routes.api import bp as api

    app.register_blueprint(pages_bp)
    app.register_blueprint(api, url_prefix="/api")

    return app
