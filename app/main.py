# app/main.py
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.routes import agents, conversations, health, session
from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging, get_logger
from app.db.database import Database
from app.services.session_service import SessionProvisioner

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    session_provisioner: Optional[SessionProvisioner] = None,
) -> FastAPI:
    """
    Builds the API. The Mongo client and the OpenAI client are acquired when
    the app starts and released when it shuts down; pass them in to override.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.database = database or Database(settings.mongo_uri, settings.mongo_db_name)
        app.state.session_provisioner = session_provisioner or SessionProvisioner(settings)
        try:
            await app.state.database.connect()
            logger.info(f"{settings.app_name} started")
            yield
        finally:
            await app.state.session_provisioner.close()
            app.state.database.close()
            logger.info(f"{settings.app_name} stopped")

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(session.router, tags=["Session"])
    app.include_router(agents.router, tags=["Agents"])
    app.include_router(conversations.router, tags=["Conversations"])

    return app


def run():
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
