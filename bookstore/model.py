import logging
from typing import Dict, Any, Mapping, Optional

from mongoengine import Document, StringField

log = logging.getLogger(__name__)

# external (API / display) name -> internal (storage) name
FIELD_MAP: Dict[str, str] = {
    "id": "ID",
    "title": "BookName",
    "author": "BookAuthor",
    "pages": "BookPages",
    "edition": "BookEdition",
    "year": "BookYear",
}
INTERNAL_TO_EXTERNAL: Dict[str, str] = {v: k for k, v in FIELD_MAP.items()}

REQUIRED_FIELDS = ("id", "title", "author")
UPDATABLE_FIELDS = ("title", "author", "edition", "pages", "year")


def to_external(record: Mapping[str, Any]) -> Dict[str, Optional[str]]:
    """Render an internal record with the API field names. Never exposes ``_id``."""
    return {ext: record.get(internal) for ext, internal in FIELD_MAP.items()}


def to_internal(data: Mapping[str, Any]) -> Dict[str, Optional[str]]:
    """Map external field names to storage names; unknown keys are dropped."""
    return {internal: data.get(ext) for ext, internal in FIELD_MAP.items()}


class BookStore(Document):
    meta = {"collection": "information", "indexes": ["ID"], "strict": False}
    ID          = StringField(required=True)
    BookName    = StringField(required=True)
    BookAuthor  = StringField(required=True)
    BookEdition = StringField()
    BookPages   = StringField()
    BookYear    = StringField()

    @classmethod
    def from_record(cls, record: Mapping[str, Any]):
        return cls(**{name: record.get(name) for name in INTERNAL_TO_EXTERNAL})

    def to_record(self) -> Dict[str, Optional[str]]:
        return {name: getattr(self, name) for name in INTERNAL_TO_EXTERNAL}


SEED_BOOKS = [
    {
        "ID": "example1",
        "BookName": "The Vortex",
        "BookAuthor": "José Eustasio Rivera",
        "BookEdition": "958-30-0804-4",
        "BookPages": "292",
        "BookYear": "1924",
    },
    {
        "ID": "example2",
        "BookName": "Frankenstein",
        "BookAuthor": "Mary Shelley",
        "BookEdition": "978-3-649-64609-9",
        "BookPages": "280",
        "BookYear": "1818",
    },
    {
        "ID": "example3",
        "BookName": "The Black Cat",
        "BookAuthor": "Edgar Allan Poe",
        "BookEdition": "978-3-99168-238-7",
        "BookPages": "280",
        "BookYear": "1843",
    },
]


def seed_books_if_missing(gateway) -> int:
    """Insert each sample book unless an identical record is already stored."""
    inserted = 0
    for record in SEED_BOOKS:
        if gateway.count_matching(record) == 0:
            gateway.insert(record)
            inserted += 1
        else:
            log.debug("seed book %s already present", record["ID"])
    if inserted:
        log.info("seeded %d sample books", inserted)
    return inserted
