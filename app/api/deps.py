# app/api/deps.py
from fastapi import Request

from app.services.agent_service import AgentService
from app.services.conversation_service import ConversationService
from app.services.session_service import SessionProvisioner


def get_agent_service(request: Request) -> AgentService:
    return AgentService(request.app.state.database.agents_collection)


def get_conversation_service(request: Request) -> ConversationService:
    database = request.app.state.database
    return ConversationService(
        database.conversations_collection,
        AgentService(database.agents_collection),
    )


def get_session_provisioner(request: Request) -> SessionProvisioner:
    return request.app.state.session_provisioner
