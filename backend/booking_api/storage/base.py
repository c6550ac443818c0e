"""Storage adapter protocol shared by the MongoDB and in-memory stores."""

from typing import Any, Protocol

Document = dict[str, Any]
Filter = dict[str, Any]
Sort = list[tuple[str, int]]

ASCENDING = 1
DESCENDING = -1


class BookingStore(Protocol):
    """Primitive operations the query engine needs from a booking collection.

    Documents carry their identifier under ``_id``; every id crossing this
    boundary is a string. A malformed id is treated as "no such document".
    """

    async def find(
        self,
        filter: Filter | None = None,
        sort: Sort | None = None,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Document]: ...

    async def find_one(self, booking_id: str) -> Document | None: ...

    async def insert_one(self, document: Document) -> str: ...

    async def insert_many(self, documents: list[Document]) -> list[str]: ...

    async def replace_one(self, booking_id: str, document: Document) -> bool: ...

    async def delete_one(self, booking_id: str) -> bool: ...

    async def count(self, filter: Filter | None = None) -> int: ...

    async def group_count(self, field: str) -> list[Document]:
        """Count documents per distinct ``field`` value.

        Only documents where ``field`` exists are considered. Returns
        ``[{"_id": value, "count": n}, ...]`` sorted ascending by ``_id``.
        """
        ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...
