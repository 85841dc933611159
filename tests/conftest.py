"""
Shared fixtures.

Each test gets a fresh app bound to an in-memory mongomock client, so no
MongoDB server is needed. The collection is dropped and the connection
released after every test.
"""
import mongomock
import pytest
from mongoengine import disconnect
from pymongo.errors import ServerSelectionTimeoutError

from bookstore import create_app
from bookstore.model import BookStore
from bookstore.services import CatalogMutationService, CatalogQueryService
from bookstore.storage import BookGateway


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "MONGODB_HOST": "mongodb://localhost",
        "MONGODB_DB": "bookstore-test",
        "MONGO_CLIENT_CLASS": mongomock.MongoClient,
        "SEED_DATA": False,
    })
    yield app
    BookStore.drop_collection()
    disconnect()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def gateway(app):
    return app.extensions["bookstore"].gateway


@pytest.fixture
def queries(gateway):
    return CatalogQueryService(gateway)


@pytest.fixture
def mutations(gateway):
    return CatalogMutationService(gateway)


@pytest.fixture
def sample_book(mutations):
    data = {
        "id": "b1",
        "title": "Frankenstein",
        "author": "Mary Shelley",
        "pages": "280",
        "edition": "978-3-649-64609-9",
        "year": "1818",
    }
    mutations.create(data)
    return data


class _Unreachable:
    """Stands in for ``Document.objects`` when the server cannot be reached."""

    def __iter__(self):
        raise ServerSelectionTimeoutError("no servers available")

    def __call__(self, **kwargs):
        raise ServerSelectionTimeoutError("no servers available")


class UnreachableModel:
    objects = _Unreachable()


@pytest.fixture
def broken_gateway():
    return BookGateway(UnreachableModel)
