"""Thin adapter between the catalog services and the ``BookStore`` collection.

Records cross this boundary as plain dicts keyed by storage field names.
Every driver failure is re-raised as :class:`StorageError`.
"""
import functools
import logging
from typing import Any, Dict, List, Mapping, Optional

from mongoengine.errors import MongoEngineException, ValidationError as DocumentValidationError
from pymongo.errors import PyMongoError

from .errors import StorageError

log = logging.getLogger(__name__)


def _storage_call(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (PyMongoError, MongoEngineException, DocumentValidationError) as e:
            log.error("storage operation %s failed: %s", func.__name__, e)
            raise StorageError("database error") from e
    return wrapper


class BookGateway:
    def __init__(self, model):
        self.model = model

    @_storage_call
    def find_all(self) -> List[Dict[str, Any]]:
        return [doc.to_record() for doc in self.model.objects]

    @_storage_call
    def find_by_id(self, internal_id: str) -> Optional[Dict[str, Any]]:
        doc = self.model.objects(ID=internal_id).first()
        return doc.to_record() if doc else None

    @_storage_call
    def count_matching(self, filter: Mapping[str, Any]) -> int:
        return self.model.objects(**filter).count()

    @_storage_call
    def insert(self, record: Mapping[str, Any]):
        doc = self.model.from_record(record).save()
        return doc.pk

    @_storage_call
    def update_fields(self, internal_id: str, fields: Mapping[str, Any]) -> int:
        qs = self.model.objects(ID=internal_id)
        if not fields:
            # nothing to $set; report whether the record exists
            return 1 if qs.first() is not None else 0
        # a None value clears the field, same as an absent one
        update = {}
        for name, value in fields.items():
            if value is None:
                update[f"unset__{name}"] = True
            else:
                update[f"set__{name}"] = value
        result = qs.update_one(full_result=True, **update)
        return result.matched_count

    @_storage_call
    def delete_by_id(self, internal_id: str) -> int:
        doc = self.model.objects(ID=internal_id).first()
        if doc is None:
            return 0
        # the record may be gone by now; trust the store's count
        return self.model.objects(pk=doc.pk).delete()
