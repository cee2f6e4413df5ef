# app/models/session.py
from typing import List, Optional

from pydantic import BaseModel


class SessionRequest(BaseModel):
    instructions: Optional[str] = None


class InputAudioTranscription(BaseModel):
    model: str


class RealtimeSessionBody(BaseModel):
    """Body sent to the provider's session-creation endpoint."""

    model: str
    voice: str
    modalities: List[str] = ["text", "audio"]
    input_audio_transcription: InputAudioTranscription
    instructions: str
