import pytest
from bson import ObjectId

from app.core.errors import NotFoundError, ValidationError


class TestAgentService:
    """Tests for persisting interview personas"""

    @pytest.mark.asyncio
    async def test_create_agent_persists_instructions(self, agent_service):
        agent = await agent_service.create_agent("pricing feedback")

        assert agent.instructions == "pricing feedback"
        assert agent.createdAt is not None
        assert ObjectId.is_valid(agent.id)

        fetched = await agent_service.get_agent(agent.id)
        assert fetched.id == agent.id
        assert fetched.instructions == "pricing feedback"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("instructions", [None, "", "   "])
    async def test_create_agent_requires_instructions(self, agent_service, instructions):
        with pytest.raises(ValidationError):
            await agent_service.create_agent(instructions)

        assert await agent_service.collection.count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_get_unknown_agent(self, agent_service):
        with pytest.raises(NotFoundError):
            await agent_service.get_agent(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_get_agent_with_malformed_id(self, agent_service):
        with pytest.raises(NotFoundError):
            await agent_service.get_agent("not-an-object-id")

    @pytest.mark.asyncio
    async def test_agent_exists(self, agent_service):
        agent = await agent_service.create_agent("onboarding")

        assert await agent_service.agent_exists(agent.id) is True
        assert await agent_service.agent_exists(str(ObjectId())) is False
        assert await agent_service.agent_exists("garbage") is False
