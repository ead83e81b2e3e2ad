"""Flask application factory."""

from flask import Flask

from skirmish.config import Config
from .registry import EXTENSION_KEY, MatchRegistry


def create_app(test_config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(str(app.config["LOG_LEVEL"]).upper())

    # Matches are kept in memory for the lifetime of the app
    app.extensions[EXTENSION_KEY] = MatchRegistry(max_matches=app.config["MAX_MATCHES"])

    # Register blueprints
    from .routes.main import main_bp
    from .routes.api import api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    return app
