# app/services/session_service.py
from typing import Any, Optional, Tuple

import httpx
from openai import APIStatusError, AsyncOpenAI

from app.core.config import Settings
from app.core.logging_config import get_logger
from app.models.session import InputAudioTranscription, RealtimeSessionBody

logger = get_logger(__name__)

SESSIONS_PATH = "/realtime/sessions"

INSTRUCTIONS_TEMPLATE = (
    "You are a researcher with the task of getting the user to talk about {instructions}. "
    "You always start the conversation by greeting the user and asking an open question "
    "about it, then keep the user talking with short follow-up questions."
)

# Used when the caller sends no instructions at all
DEFAULT_INSTRUCTIONS = (
    "You are a friendly researcher interviewing the user about their experience. "
    "You always start the conversation by greeting the user and asking an open question, "
    "then keep the user talking with short follow-up questions."
)


def build_instructions(instructions: Optional[str]) -> str:
    if not instructions or not instructions.strip():
        return DEFAULT_INSTRUCTIONS
    return INSTRUCTIONS_TEMPLATE.format(instructions=instructions.strip())


class SessionProvisioner:
    """Requests realtime sessions from OpenAI and relays the answer untouched."""

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.settings = settings
        self.client = client or AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            max_retries=0,
        )

    def build_request(self, instructions: Optional[str]) -> RealtimeSessionBody:
        return RealtimeSessionBody(
            model=self.settings.realtime_model,
            voice=self.settings.realtime_voice,
            modalities=["text", "audio"],
            input_audio_transcription=InputAudioTranscription(
                model=self.settings.transcription_model
            ),
            instructions=build_instructions(instructions),
        )

    async def create_session(self, instructions: Optional[str] = None) -> Tuple[int, Any]:
        """
        Creates a realtime session.

        Returns the provider's HTTP status and JSON body. Provider error answers
        are returned as-is; transport failures propagate to the caller.
        """
        body = self.build_request(instructions)
        try:
            response = await self.client.post(
                SESSIONS_PATH,
                body=body.model_dump(),
                cast_to=httpx.Response,
            )
        except APIStatusError as e:
            logger.warning(f"Session provider answered {e.status_code}")
            response = e.response

        logger.info(f"Realtime session requested for model {body.model} ({response.status_code})")
        return response.status_code, response.json()

    async def close(self):
        await self.client.close()
