# app/services/agent_service.py
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId

from app.core.errors import NotFoundError, ValidationError
from app.core.logging_config import get_logger
from app.models.agent import Agent

logger = get_logger(__name__)


def parse_agent_id(agent_id: str) -> Optional[ObjectId]:
    """Returns the ObjectId for ``agent_id`` or None when it cannot be one."""
    if not agent_id or not ObjectId.is_valid(agent_id):
        return None
    return ObjectId(agent_id)


class AgentService:

    def __init__(self, collection):
        self.collection = collection

    async def create_agent(self, instructions: Optional[str]) -> Agent:
        """Persists a new interview persona."""
        if not instructions or not instructions.strip():
            raise ValidationError("Instructions are required")

        agent_doc = {
            "instructions": instructions,
            "createdAt": datetime.now(timezone.utc),
        }
        result = await self.collection.insert_one(agent_doc)
        logger.info(f"Created agent {result.inserted_id}")

        # Return what was stored; Mongo keeps millisecond precision only
        created_agent = await self.collection.find_one({"_id": result.inserted_id})
        return Agent.from_document(created_agent)

    async def get_agent(self, agent_id: str) -> Agent:
        object_id = parse_agent_id(agent_id)
        agent_doc = await self.collection.find_one({"_id": object_id}) if object_id else None
        if not agent_doc:
            raise NotFoundError("Agent not found")
        return Agent.from_document(agent_doc)

    async def agent_exists(self, agent_id: str) -> bool:
        object_id = parse_agent_id(agent_id)
        if object_id is None:
            return False
        return await self.collection.count_documents({"_id": object_id}, limit=1) > 0
