from bookstore.model import FIELD_MAP, SEED_BOOKS, seed_books_if_missing, to_external, to_internal


def test_round_trip_external_internal():
    data = {
        "id": "b1",
        "title": "T",
        "author": "A",
        "pages": "100",
        "edition": "2nd",
        "year": "2020",
    }
    assert to_external(to_internal(data)) == data


def test_to_internal_uses_storage_names():
    record = to_internal({"id": "b1", "title": "T", "author": "A"})
    assert record == {
        "ID": "b1",
        "BookName": "T",
        "BookAuthor": "A",
        "BookPages": None,
        "BookEdition": None,
        "BookYear": None,
    }


def test_to_internal_ignores_unknown_fields():
    record = to_internal({"id": "b1", "title": "T", "author": "A", "isbn": "123"})
    assert set(record) == set(FIELD_MAP.values())
    assert "123" not in record.values()


def test_to_external_never_exposes_native_key():
    external = to_external({"_id": "abc", "ID": "b1", "BookName": "T", "BookAuthor": "A"})
    assert "_id" not in external
    assert external["id"] == "b1"
    assert external["year"] is None


def test_seed_books_inserted_once(gateway):
    assert seed_books_if_missing(gateway) == len(SEED_BOOKS)
    assert seed_books_if_missing(gateway) == 0
    assert len(gateway.find_all()) == len(SEED_BOOKS)
