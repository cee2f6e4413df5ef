# app/api/v1/routes/health.py
from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def health_check():
    return {"status": "ok", "message": "Voice Feedback API is running"}
