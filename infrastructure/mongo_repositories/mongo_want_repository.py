"""MongoDB entity store for Wants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from bson import ObjectId
from bson.errors import InvalidId

from application.ports.repositories.want_repository import WantMutator, WantRepository
from domain.aggregates.want import Want
from domain.exceptions import AggregateNotFoundError
from infrastructure.serialization.want_document_codec import WantDocumentCodec

if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorClientSession

    from infrastructure.config import Settings

logger = structlog.get_logger()


def _object_id(want_id: str) -> ObjectId | None:
    try:
        return ObjectId(want_id)
    except (InvalidId, TypeError):
        return None


class MongoWantRepository(WantRepository):
    """Stores each Want as one document keyed by a server-assigned ObjectId.

    Driver errors (``pymongo.errors.PyMongoError``) are not caught here.
    Transactions need MongoDB running as a replica set.
    """

    def __init__(self, client: AsyncIOMotorClient, settings: Settings) -> None:
        self.client = client
        self.db = self.client[settings.mongo_db]
        self.wants = self.db[settings.mongo_wants_collection]

    async def get(self, want_id: str) -> Want | None:
        oid = _object_id(want_id)
        if oid is None:
            return None
        doc = await self.wants.find_one({"_id": oid})
        if not doc:
            return None
        return WantDocumentCodec.decode(str(doc.pop("_id")), doc)

    async def create(self, want: Want) -> str:
        result = await self.wants.insert_one(WantDocumentCodec.encode(want))
        want_id = str(result.inserted_id)
        logger.debug("want_document_inserted", want_id=want_id)
        return want_id

    async def transactional_update(self, want_id: str, mutator: WantMutator) -> None:
        oid = _object_id(want_id)
        if oid is None:
            msg = f"Want {want_id} not found"
            raise AggregateNotFoundError(msg)

        async def _read_modify_write(session: AsyncIOMotorClientSession) -> None:
            doc = await self.wants.find_one({"_id": oid}, session=session)
            if not doc:
                msg = f"Want {want_id} not found"
                raise AggregateNotFoundError(msg)
            doc.pop("_id")

            want = WantDocumentCodec.decode(want_id, doc)
            await mutator(want)

            await self.wants.update_one(
                {"_id": oid},
                {"$set": WantDocumentCodec.encode(want)},
                session=session,
            )

        # with_transaction re-runs the callback on transient conflicts, so the
        # mutator always sees the document as of its own transaction.
        async with await self.client.start_session() as session:
            await session.with_transaction(_read_modify_write)
        logger.debug("want_document_updated", want_id=want_id)
