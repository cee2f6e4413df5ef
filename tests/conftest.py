import json
import logging

import httpx
import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from openai import AsyncOpenAI

from app.core.config import Settings
from app.db.database import Database
from app.main import create_app
from app.services.agent_service import AgentService
from app.services.conversation_service import ConversationService
from app.services.session_service import SessionProvisioner

PROVIDER_URL = "https://provider.test/v1"


class ProviderStub:
    """Stands in for the realtime provider and records what it receives."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.payload = {"id": "sess_123", "object": "realtime.session", "client_secret": {"value": "ek_abc"}}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


@pytest.fixture
def settings():
    return Settings(
        mongo_uri="mongodb://localhost:27017",
        mongo_db_name="voice_feedback_test",
        openai_api_key="sk-test",
        openai_base_url=PROVIDER_URL,
    )


@pytest.fixture
def database(settings):
    return Database(settings.mongo_uri, settings.mongo_db_name, client=AsyncMongoMockClient())


@pytest.fixture
def agent_service(database):
    return AgentService(database.agents_collection)


@pytest.fixture
def conversation_service(database, agent_service):
    return ConversationService(database.conversations_collection, agent_service)


@pytest.fixture
def provider():
    return ProviderStub()


@pytest.fixture
def session_provisioner(settings, provider):
    client = AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        max_retries=0,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(provider)),
    )
    return SessionProvisioner(settings, client=client)


@pytest.fixture
def app(settings, database, session_provisioner):
    return create_app(settings, database=database, session_provisioner=session_provisioner)


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client
