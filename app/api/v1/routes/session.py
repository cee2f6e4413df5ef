# app/api/v1/routes/session.py
from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_session_provisioner
from app.models.session import SessionRequest
from app.services.session_service import SessionProvisioner

router = APIRouter()


@router.post("/session")
async def create_session(
    session_request: Optional[SessionRequest] = Body(None),
    provisioner: SessionProvisioner = Depends(get_session_provisioner),
):
    """Relays the provider's session descriptor, including its error answers."""
    instructions = session_request.instructions if session_request else None
    status_code, payload = await provisioner.create_session(instructions)
    return JSONResponse(status_code=status_code, content=payload)
