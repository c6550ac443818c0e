"""In-process booking store for tests and local demos.

Evaluates the subset of the MongoDB query language that the filter builder
emits: ``$and``, plain equality, ``$eq``, ``$regex`` (with ``$options``),
``$gt``/``$gte``/``$lt``/``$lte`` and ``$exists``.
"""

import copy
import logging
import re
from typing import Any

from bson import ObjectId

from booking_api.storage.base import Document, Filter, Sort

logger = logging.getLogger(__name__)

_MISSING = object()

_COMPARISONS = {
    "$gt": lambda value, bound: value > bound,
    "$gte": lambda value, bound: value >= bound,
    "$lt": lambda value, bound: value < bound,
    "$lte": lambda value, bound: value <= bound,
}


def _regex_flags(options: str) -> int:
    flags = 0
    if "i" in options:
        flags |= re.IGNORECASE
    if "m" in options:
        flags |= re.MULTILINE
    if "s" in options:
        flags |= re.DOTALL
    return flags


def _match_operators(value: Any, operators: dict[str, Any]) -> bool:
    for op, operand in operators.items():
        if op == "$options":
            continue
        if op == "$exists":
            if (value is not _MISSING) != bool(operand):
                return False
        elif op == "$eq":
            if (None if value is _MISSING else value) != operand:
                return False
        elif op == "$regex":
            if not isinstance(value, str):
                return False
            flags = _regex_flags(operators.get("$options", ""))
            if re.search(operand, value, flags) is None:
                return False
        elif op in _COMPARISONS:
            # Like MongoDB, range operators only compare values of the same type.
            if value is _MISSING or value is None or type(value) is not type(operand):
                return False
            if not _COMPARISONS[op](value, operand):
                return False
        else:
            raise NotImplementedError(f"Unsupported query operator: {op}")
    return True


def matches(document: Document, filter: Filter) -> bool:
    """Return True when ``document`` satisfies the MongoDB-style ``filter``."""
    for key, condition in filter.items():
        if key == "$and":
            if not all(matches(document, clause) for clause in condition):
                return False
            continue

        value = document.get(key, _MISSING)
        if isinstance(condition, dict) and condition and all(k.startswith("$") for k in condition):
            if not _match_operators(value, condition):
                return False
        elif condition is None:
            # {"field": None} matches both null and missing fields.
            if value is not _MISSING and value is not None:
                return False
        elif value is _MISSING or value != condition:
            return False
    return True


def _sort_key(field: str):
    def key(document: Document) -> tuple[bool, Any]:
        value = document.get(field)
        # Null and missing sort before any value, as in MongoDB.
        return (value is not None, value if value is not None else "")

    return key


class InMemoryBookingStore:
    """Dict-backed booking collection preserving insertion order."""

    def __init__(self, documents: list[Document] | None = None) -> None:
        self._documents: dict[str, Document] = {}
        for document in documents or []:
            self._store(document)

    def _store(self, document: Document) -> str:
        booking_id = str(ObjectId())
        stored = {key: value for key, value in copy.deepcopy(document).items() if key != "_id"}
        self._documents[booking_id] = {"_id": booking_id, **stored}
        return booking_id

    async def find(
        self,
        filter: Filter | None = None,
        sort: Sort | None = None,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Document]:
        results = [doc for doc in self._documents.values() if matches(doc, filter or {})]
        # Stable multi-key sort: apply the least significant key first.
        for field, direction in reversed(sort or []):
            results.sort(key=_sort_key(field), reverse=direction < 0)
        if skip:
            results = results[skip:]
        if limit:
            results = results[:limit]
        return copy.deepcopy(results)

    async def find_one(self, booking_id: str) -> Document | None:
        document = self._documents.get(booking_id)
        return copy.deepcopy(document) if document is not None else None

    async def insert_one(self, document: Document) -> str:
        return self._store(document)

    async def insert_many(self, documents: list[Document]) -> list[str]:
        return [self._store(document) for document in documents]

    async def replace_one(self, booking_id: str, document: Document) -> bool:
        if booking_id not in self._documents:
            return False
        stored = {key: value for key, value in copy.deepcopy(document).items() if key != "_id"}
        self._documents[booking_id] = {"_id": booking_id, **stored}
        return True

    async def delete_one(self, booking_id: str) -> bool:
        return self._documents.pop(booking_id, None) is not None

    async def count(self, filter: Filter | None = None) -> int:
        return sum(1 for doc in self._documents.values() if matches(doc, filter or {}))

    async def group_count(self, field: str) -> list[Document]:
        counts: dict[Any, int] = {}
        for document in self._documents.values():
            if field in document:
                counts[document[field]] = counts.get(document[field], 0) + 1
        groups = [{"_id": value, "count": count} for value, count in counts.items()]
        groups.sort(key=_sort_key("_id"))
        return groups

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        logger.info("In-memory store closed with %d documents", len(self._documents))
