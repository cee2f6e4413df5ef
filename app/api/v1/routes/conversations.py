# app/api/v1/routes/conversations.py
from fastapi import APIRouter, Depends, status

from app.api.deps import get_conversation_service
from app.models.conversation import AppendMessage, CreateConversation, CreatedConversation
from app.services.conversation_service import ConversationService

router = APIRouter()


# ✅ Open a conversation for an agent
@router.post("/conversation", status_code=status.HTTP_201_CREATED)
async def create_conversation_endpoint(
    conversation: CreateConversation,
    conversation_service: ConversationService = Depends(get_conversation_service),
):
    created = await conversation_service.create_conversation(conversation.agentId)
    data = CreatedConversation(conversationId=created.conversationId)
    return {"status": "success", "data": data.model_dump()}


# ✅ Append a transcript message
@router.post("/conversation/{conversation_id}/message")
async def append_message_endpoint(
    conversation_id: str,
    message: AppendMessage,
    conversation_service: ConversationService = Depends(get_conversation_service),
):
    await conversation_service.append_message(conversation_id, message.content, message.speaker)
    return {"status": "success"}


# ✅ Get a single transcript
@router.get("/conversation/{conversation_id}")
async def get_conversation_endpoint(
    conversation_id: str,
    conversation_service: ConversationService = Depends(get_conversation_service),
):
    conversation = await conversation_service.get_conversation(conversation_id)
    return {"status": "success", "data": conversation.model_dump(mode="json")}
