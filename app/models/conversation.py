# app/models/conversation.py
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel

SPEAKERS = ("agent", "user")


class Message(BaseModel):
    content: str
    speaker: Literal["agent", "user"]
    timestamp: datetime


class Conversation(BaseModel):
    conversationId: str
    agentId: str
    startTime: datetime
    messages: List[Message] = []

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Conversation":
        return cls(
            conversationId=document["conversationId"],
            agentId=document["agentId"],
            startTime=document["startTime"],
            messages=[Message(**message) for message in document.get("messages", [])],
        )


class CreateConversation(BaseModel):
    agentId: Optional[str] = None


class CreatedConversation(BaseModel):
    conversationId: str


class AppendMessage(BaseModel):
    content: Optional[str] = None
    speaker: Optional[str] = None
