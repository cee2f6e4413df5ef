# app/services/conversation_service.py
import time
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pymongo import DESCENDING

from app.core.errors import NotFoundError, ValidationError
from app.core.logging_config import get_logger
from app.models.conversation import SPEAKERS, Conversation
from app.services.agent_service import AgentService

logger = get_logger(__name__)


def generate_conversation_id(agent_id: str) -> str:
    """Builds ``{agentId}-{epochMillis}-{random}``; uniqueness is also enforced by an index."""
    return f"{agent_id}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


class ConversationService:

    def __init__(self, collection, agent_service: AgentService):
        self.collection = collection
        self.agent_service = agent_service

    async def create_conversation(self, agent_id: Optional[str]) -> Conversation:
        """Opens an empty transcript for an existing agent."""
        if not agent_id:
            raise ValidationError("agentId is required")
        if not await self.agent_service.agent_exists(agent_id):
            raise NotFoundError("Agent not found")

        conversation_doc = {
            "conversationId": generate_conversation_id(agent_id),
            "agentId": agent_id,
            "startTime": datetime.now(timezone.utc),
            "messages": [],
        }
        await self.collection.insert_one(conversation_doc)
        logger.info(f"Created conversation {conversation_doc['conversationId']} for agent {agent_id}")
        return Conversation.from_document(conversation_doc)

    async def append_message(self, conversation_id: str, content: Optional[str], speaker: Optional[str]):
        """Appends one message with a single ``$push`` so concurrent writers never lose updates."""
        if not content:
            raise ValidationError("content is required")
        if speaker not in SPEAKERS:
            raise ValidationError("speaker must be one of: agent, user")

        message = {
            "content": content,
            "speaker": speaker,
            "timestamp": datetime.now(timezone.utc),
        }
        result = await self.collection.update_one(
            {"conversationId": conversation_id},
            {"$push": {"messages": message}},
        )
        if result.matched_count == 0:
            raise NotFoundError("Conversation not found")
        logger.debug(f"Appended {speaker} message to conversation {conversation_id}")

    async def get_conversation(self, conversation_id: str) -> Conversation:
        conversation_doc = await self.collection.find_one({"conversationId": conversation_id})
        if not conversation_doc:
            raise NotFoundError("Conversation not found")
        return Conversation.from_document(conversation_doc)

    async def list_conversations_for_agent(self, agent_id: str) -> List[Conversation]:
        """Most recent first."""
        cursor = self.collection.find({"agentId": agent_id}).sort(
            [("startTime", DESCENDING), ("_id", DESCENDING)]
        )
        conversations = await cursor.to_list(None)
        return [Conversation.from_document(doc) for doc in conversations]
