# app/api/v1/routes/agents.py
from fastapi import APIRouter, Depends, status

from app.api.deps import get_agent_service, get_conversation_service
from app.models.agent import CreateAgent
from app.services.agent_service import AgentService
from app.services.conversation_service import ConversationService

router = APIRouter()


# ✅ Create an agent
@router.post("/create-agent", status_code=status.HTTP_201_CREATED)
async def create_agent_endpoint(
    agent: CreateAgent,
    agent_service: AgentService = Depends(get_agent_service),
):
    created_agent = await agent_service.create_agent(agent.instructions)
    return {"status": "success", "data": created_agent.model_dump(mode="json")}


# ✅ Get an agent by id
@router.get("/agent/{agent_id}")
async def get_agent_endpoint(
    agent_id: str,
    agent_service: AgentService = Depends(get_agent_service),
):
    agent = await agent_service.get_agent(agent_id)
    return {"status": "success", "data": agent.model_dump(mode="json")}


# ✅ All conversations of an agent, most recent first
@router.get("/agent/{agent_id}/conversations")
async def list_agent_conversations_endpoint(
    agent_id: str,
    conversation_service: ConversationService = Depends(get_conversation_service),
):
    conversations = await conversation_service.list_conversations_for_agent(agent_id)
    return {
        "status": "success",
        "data": [conversation.model_dump(mode="json") for conversation in conversations],
    }
