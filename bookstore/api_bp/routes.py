from flask import current_app, jsonify, request
from werkzeug.exceptions import MethodNotAllowed, NotFound
from . import bp
from ..errors import CatalogError
from ..model import to_external


def _catalog():
    return current_app.extensions["bookstore"]


@bp.errorhandler(CatalogError)
def handle_catalog_error(e):
    if e.status_code >= 500:
        current_app.logger.error("%s %s failed: %s", request.method, request.path, e.message)
    else:
        current_app.logger.info("%s %s rejected: %s", request.method, request.path, e.message)
    return jsonify({"error": e.message}), e.status_code


@bp.app_errorhandler(NotFound)
@bp.app_errorhandler(MethodNotAllowed)
def handle_routing_error(e):
    if not request.path.startswith("/api/"):
        return e
    response = jsonify({"error": e.name.lower()})
    response.status_code = e.code
    if getattr(e, "valid_methods", None):
        response.headers["Allow"] = ", ".join(e.valid_methods)
    return response


@bp.get("/books")
def list_books():
    books = _catalog().queries.list_all()
    return jsonify([to_external(b) for b in books]), 200


@bp.get("/books/<book_id>")
def get_book(book_id):
    book = _catalog().queries.get(book_id)
    return jsonify(to_external(book)), 200


@bp.post("/books")
def create_book():
    _catalog().mutations.create(request.get_json(silent=True))
    return jsonify({"message": "book created"}), 201


@bp.put("/books/<book_id>")
def update_book(book_id):
    _catalog().mutations.update(book_id, request.get_json(silent=True))
    return jsonify({"message": "book updated"}), 200


@bp.delete("/books/<book_id>")
def delete_book(book_id):
    _catalog().mutations.remove(book_id)
    return jsonify({"message": "book deleted"}), 200
