"""MongoDB booking store backed by Motor."""

import logging

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from booking_api.storage.base import Document, Filter, Sort

logger = logging.getLogger(__name__)


def _object_id(booking_id: str) -> ObjectId | None:
    if not ObjectId.is_valid(booking_id):
        return None
    return ObjectId(booking_id)


def _stringify_id(document: Document) -> Document:
    document["_id"] = str(document["_id"])
    return document


def _without_id(document: Document) -> Document:
    return {key: value for key, value in document.items() if key != "_id"}


class MongoBookingStore:
    """Booking collection on a MongoDB server.

    One instance wraps one long-lived ``AsyncIOMotorClient``; the client is
    safe to share between concurrent requests.
    """

    def __init__(
        self,
        connection_string: str,
        database_name: str,
        collection_name: str,
        client: AsyncIOMotorClient | None = None,
    ) -> None:
        self._client = client or AsyncIOMotorClient(connection_string)
        self._collection: AsyncIOMotorCollection = self._client[database_name][collection_name]
        logger.info("Using MongoDB collection %s.%s", database_name, collection_name)

    async def find(
        self,
        filter: Filter | None = None,
        sort: Sort | None = None,
        skip: int = 0,
        limit: int = 0,
    ) -> list[Document]:
        cursor = self._collection.find(filter or {})
        if sort:
            cursor = cursor.sort(sort)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return [_stringify_id(doc) for doc in await cursor.to_list(length=None)]

    async def find_one(self, booking_id: str) -> Document | None:
        oid = _object_id(booking_id)
        if oid is None:
            return None
        document = await self._collection.find_one({"_id": oid})
        return _stringify_id(document) if document is not None else None

    async def insert_one(self, document: Document) -> str:
        result = await self._collection.insert_one(_without_id(document))
        return str(result.inserted_id)

    async def insert_many(self, documents: list[Document]) -> list[str]:
        result = await self._collection.insert_many([_without_id(doc) for doc in documents])
        return [str(oid) for oid in result.inserted_ids]

    async def replace_one(self, booking_id: str, document: Document) -> bool:
        oid = _object_id(booking_id)
        if oid is None:
            return False
        result = await self._collection.replace_one({"_id": oid}, _without_id(document))
        return result.matched_count > 0

    async def delete_one(self, booking_id: str) -> bool:
        oid = _object_id(booking_id)
        if oid is None:
            return False
        result = await self._collection.delete_one({"_id": oid})
        return result.deleted_count > 0

    async def count(self, filter: Filter | None = None) -> int:
        return await self._collection.count_documents(filter or {})

    async def group_count(self, field: str) -> list[Document]:
        pipeline = [
            {"$match": {field: {"$exists": True}}},
            {"$group": {"_id": f"${field}", "count": {"$sum": 1}}},
            {"$sort": {"_id": 1}},
        ]
        return await self._collection.aggregate(pipeline).to_list(length=None)

    async def ping(self) -> bool:
        await self._client.admin.command("ping")
        return True

    async def close(self) -> None:
        self._client.close()
        logger.info("MongoDB client closed")
