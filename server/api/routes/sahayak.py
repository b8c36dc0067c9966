"""Sahayak voice navigator routes"""
from fastapi import APIRouter, Depends

from api.schemas.request_schemas import IntentRequest
from core.dependencies import get_intent_router
from core.intent_router import IntentRouter
from models.intent import IntentResult

router = APIRouter()


@router.post("/intent", response_model=IntentResult, response_model_exclude_none=True)
async def classify_intent(request: IntentRequest, intent_router: IntentRouter = Depends(get_intent_router)):
    """Classify one utterance. "unknown" is a normal answer, never an error."""
    return await intent_router.classify(request.utterance, request.language)
