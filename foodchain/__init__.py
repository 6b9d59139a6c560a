import logging

from flask import Flask
from flask_migrate import Migrate

from foodchain.extensions import db, cors
from foodchain.routes import register_routes
from foodchain.utils.http import error


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Tokens are signed with this key, never fall back to a known value
    if not app.config.get("SECRET_KEY"):
        raise RuntimeError("SECRET_KEY must be set")

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    Migrate(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    register_routes(app)
    register_error_handlers(app)

    return app


def register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(_e):
        return error("NOT_FOUND", "Resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return error("METHOD_NOT_ALLOWED", "Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(e):
        app.logger.error(f"Unhandled error: {e}")
        db.session.rollback()
        return error("UNKNOWN_ERROR", "Internal server error", 500)
