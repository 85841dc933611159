from flask import render_template, current_app, request
from . import bp
from ..errors import NotFoundError


def _queries():
    return current_app.extensions["bookstore"].queries


@bp.route("/")
def index():
    return render_template("index.html", active_page="home")


@bp.route("/books")
def book_table():
    books = _queries().list_all()
    return render_template("book-table.html", books=books, active_page="books")


@bp.route("/authors")
def authors_table():
    authors = sorted(_queries().list_distinct_authors())
    return render_template("authors-table.html", authors=authors, active_page="authors")


@bp.route("/years")
def years_table():
    years = sorted(_queries().list_distinct_years())
    return render_template("years-table.html", years=years, active_page="years")


@bp.route("/search")
def search_bar():
    query = request.args.get("q", "").strip()
    book = None
    if query:
        try:
            book = _queries().get(query)
        except NotFoundError:
            book = None
    return render_template("search-bar.html", query=query, book=book, active_page="search")


@bp.route("/create")
def create():
    return "", 204
