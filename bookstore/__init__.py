import logging
import time
from types import SimpleNamespace

from flask import Flask, g, request
from flask.logging import default_handler
from mongoengine import connect

from .config import Config
from .model import BookStore, seed_books_if_missing
from .services import CatalogMutationService, CatalogQueryService
from .storage import BookGateway


def configure_logging(app):
    # app.logger is the "bookstore" logger; module loggers propagate to it
    app.logger.setLevel(app.config["LOG_LEVEL"])
    if default_handler not in app.logger.handlers:
        app.logger.addHandler(default_handler)

    request_logger = logging.getLogger(f"{__name__}.requests")

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop("request_started", None)
        elapsed = (time.perf_counter() - started) * 1000 if started else 0.0
        request_logger.info(
            "%s %s -> %s (%.1fms)", request.method, request.path, response.status_code, elapsed
        )
        return response


def create_app(test_config=None):
    app = Flask(__name__, static_folder="static/css", static_url_path="/css")

    app.config.from_object(Config)
    if test_config:
        app.config.from_mapping(test_config)

    configure_logging(app)

    connect_kwargs = {}
    if app.config.get("MONGO_CLIENT_CLASS") is not None:
        connect_kwargs["mongo_client_class"] = app.config["MONGO_CLIENT_CLASS"]
    connect(db=app.config["MONGODB_DB"], host=app.config["MONGODB_HOST"], **connect_kwargs)

    gateway = BookGateway(BookStore)
    app.extensions["bookstore"] = SimpleNamespace(
        gateway=gateway,
        queries=CatalogQueryService(gateway),
        mutations=CatalogMutationService(gateway),
    )

    from .books_bp import bp as books_bp
    from .api_bp import bp as api_bp
    app.register_blueprint(books_bp)
    app.register_blueprint(api_bp)

    if app.config["SEED_DATA"]:
        with app.app_context():
            seed_books_if_missing(gateway)

    return app
