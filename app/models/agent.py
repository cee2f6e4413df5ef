# app/models/agent.py
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel


class CreateAgent(BaseModel):
    instructions: Optional[str] = None


class Agent(BaseModel):
    id: str
    instructions: str
    createdAt: datetime

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Agent":
        return cls(
            id=str(document["_id"]),
            instructions=document["instructions"],
            createdAt=document["createdAt"],
        )
