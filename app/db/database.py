# app/db/database.py
import certifi
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, DESCENDING

from app.core.logging_config import get_logger

logger = get_logger(__name__)

AGENTS = "agents"
CONVERSATIONS = "conversations"


def create_client(mongo_uri: str) -> AsyncIOMotorClient:
    options = {"tz_aware": True}
    # Atlas clusters need a CA bundle; setting one forces TLS on plain URIs
    if mongo_uri.startswith("mongodb+srv://"):
        options["tlsCAFile"] = certifi.where()
    return AsyncIOMotorClient(mongo_uri, **options)


class Database:
    """Owns the Mongo client for the lifetime of the application."""

    def __init__(self, mongo_uri: str, db_name: str, client=None):
        self.db_name = db_name
        self.client = client or create_client(mongo_uri)
        self.db = self.client[db_name]
        self.agents_collection = self.db[AGENTS]
        self.conversations_collection = self.db[CONVERSATIONS]

    async def connect(self):
        """Creates the indexes the stores rely on; fails fast if Mongo is unreachable."""
        await self.conversations_collection.create_index(
            [("conversationId", ASCENDING)], unique=True
        )
        await self.conversations_collection.create_index(
            [("agentId", ASCENDING), ("startTime", DESCENDING)]
        )
        logger.info(f"Connected to MongoDB database '{self.db_name}'")

    def close(self):
        self.client.close()
        logger.info("MongoDB connection closed")
