import logging
from numbers import Number
from typing import Any, Dict, List, Mapping, Optional, Set

from .errors import DuplicateError, NotFoundError, ValidationError
from .model import FIELD_MAP, REQUIRED_FIELDS, UPDATABLE_FIELDS, to_internal

log = logging.getLogger(__name__)


def _decode_value(field: str, value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    # bool is a Number too, reject it explicitly
    if isinstance(value, Number) and not isinstance(value, bool):
        return str(value)
    raise ValidationError(f"'{field}' must be a string or number")


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("invalid request body")
    return data


class CatalogQueryService:
    """Read-only views over the stored books."""

    def __init__(self, gateway):
        self.gateway = gateway

    def list_all(self) -> List[Dict[str, Any]]:
        return self.gateway.find_all()

    def get(self, internal_id: str) -> Dict[str, Any]:
        record = self.gateway.find_by_id(internal_id)
        if record is None:
            raise NotFoundError(f"Book with ID: {internal_id} not found. Is it stored?")
        return record

    def _distinct(self, internal_name: str) -> Set[str]:
        return {r[internal_name] for r in self.list_all() if r.get(internal_name)}

    def list_distinct_authors(self) -> Set[str]:
        return self._distinct(FIELD_MAP["author"])

    def list_distinct_years(self) -> Set[str]:
        return self._distinct(FIELD_MAP["year"])


class CatalogMutationService:
    def __init__(self, gateway):
        self.gateway = gateway

    def create(self, data: Any):
        """
        Store a new book from an external-vocabulary mapping.

        ``id``, ``title`` and ``author`` must be non-empty strings. A record
        whose six fields all equal the candidate's is a duplicate, so the same
        id with a different edition is accepted.
        Returns the storage-assigned key.
        """
        data = _require_mapping(data)
        for field in REQUIRED_FIELDS:
            value = data.get(field)
            if not isinstance(value, str) or not value:
                raise ValidationError("id, title and author are required")

        candidate = to_internal(
            {ext: _decode_value(ext, data.get(ext)) for ext in FIELD_MAP}
        )
        if self.gateway.count_matching(candidate) > 0:
            raise DuplicateError("duplicate book entry")

        key = self.gateway.insert(candidate)
        log.info("created book %s (%s)", candidate["ID"], key)
        return key

    def update(self, internal_id: str, data: Any) -> None:
        """Apply only the updatable fields present in ``data``; ``id`` is fixed."""
        data = _require_mapping(data)
        fields = {
            FIELD_MAP[ext]: _decode_value(ext, data[ext])
            for ext in UPDATABLE_FIELDS
            if ext in data
        }
        if self.gateway.update_fields(internal_id, fields) == 0:
            raise NotFoundError("book not found")
        log.info("updated book %s fields=%s", internal_id, sorted(fields))

    def remove(self, internal_id: str) -> None:
        if self.gateway.delete_by_id(internal_id) == 0:
            raise NotFoundError("book not found")
        log.info("deleted book %s", internal_id)
