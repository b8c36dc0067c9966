"""AI gateway routes — generic text, vision, chat and extraction endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
import logging

from api.schemas.request_schemas import (
    ChatRequest,
    ExtractRequest,
    GenerateRequest,
    TransliterateRequest,
    VisionRequest,
)
from api.schemas.response_schemas import ChatResponse, TextResponse, TransliterateResponse
from core.dependencies import get_gateway
from core.gateway import AIGateway
from integrations.gemini.prompts import HEALTH_CHAT_INSTRUCTION, SAHAYAK_CHAT_INSTRUCTION
from models.extraction import EXTRACTION_SCHEMAS
from models.outcome import OutcomeStatus
from utils.images import decode_image

logger = logging.getLogger(__name__)
router = APIRouter()

_ASSISTANT_INSTRUCTIONS = {
    "sahayak": SAHAYAK_CHAT_INSTRUCTION,
    "health": HEALTH_CHAT_INSTRUCTION,
}


@router.post("/generate", response_model=TextResponse)
async def generate(request: GenerateRequest, gateway: AIGateway = Depends(get_gateway)):
    """Cached free-text generation."""
    outcome = await gateway.generate_text_outcome(
        request.prompt,
        request.language,
        request.system_instruction,
        offline=request.offline,
    )
    return TextResponse(text=outcome.text, status=outcome.status)


@router.post("/vision", response_model=TextResponse)
async def vision(request: VisionRequest, gateway: AIGateway = Depends(get_gateway)):
    """Image + prompt analysis."""
    try:
        image_bytes, mime_type = decode_image(request.image, request.mime_type)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    outcome = await gateway.generate_vision_outcome(
        request.prompt,
        image_bytes,
        mime_type,
        request.language,
        skip_language_directive=request.skip_language_directive,
    )
    return TextResponse(text=outcome.text, status=outcome.status)


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, gateway: AIGateway = Depends(get_gateway)):
    """
    One chat turn. The client sends the whole history each time.

    ``requires_api_key`` is set when the model needs a paid key; the
    text is then the ERROR_PRO_KEY_REQUIRED sentinel, not a reply.
    """
    system_instruction = request.system_instruction or _ASSISTANT_INSTRUCTIONS[request.assistant]
    outcome = await gateway.chat(request.history, request.message, system_instruction, request.language)
    return ChatResponse(
        text=outcome.text,
        status=outcome.status,
        requires_api_key=outcome.status == OutcomeStatus.CAPABILITY_REQUIRED,
    )


@router.post("/extract/{kind}")
async def extract(kind: str, request: ExtractRequest, gateway: AIGateway = Depends(get_gateway)):
    """Fill a form (profile, scheme, trip or item) from a spoken request."""
    schema = EXTRACTION_SCHEMAS.get(kind)
    if schema is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown extraction kind '{kind}'. Use one of: {', '.join(EXTRACTION_SCHEMAS)}",
        )
    record = await gateway.extract_structured(request.utterance, schema)
    return record.model_dump()


@router.post("/transliterate", response_model=TransliterateResponse)
async def transliterate(request: TransliterateRequest, gateway: AIGateway = Depends(get_gateway)):
    text = await gateway.transliterate(request.text, request.language)
    return TransliterateResponse(text=text)
