"""API request schemas"""
from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional, List

from core.language import BASE_LANGUAGE, is_supported
from models.chat import ChatTurn
from models.community import RequestType
from models.extraction import ExtractedItem, ExtractedProfile, ExtractedTrip, SchemeProfile


class _LocalizedRequest(BaseModel):
    # Unknown codes are accepted and treated as English
    language: str = Field(BASE_LANGUAGE, max_length=8)

    @field_validator("language")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        code = v.strip().lower()
        return code if is_supported(code) else BASE_LANGUAGE


# AI gateway schemas
class GenerateRequest(_LocalizedRequest):
    prompt: str = Field(..., min_length=1, max_length=10000)
    system_instruction: Optional[str] = Field(None, max_length=5000)
    offline: Optional[bool] = None  # client connectivity; None uses server default


class VisionRequest(_LocalizedRequest):
    prompt: str = Field(..., min_length=1, max_length=5000)
    image: str  # base64 or data URL
    mime_type: Optional[str] = None
    skip_language_directive: bool = False


class ChatRequest(_LocalizedRequest):
    history: List[ChatTurn] = Field(default_factory=list, max_length=100)
    message: str = Field(..., min_length=1, max_length=10000)
    assistant: Literal["sahayak", "health"] = "sahayak"
    system_instruction: Optional[str] = Field(None, max_length=5000)


class ExtractRequest(BaseModel):
    utterance: str = Field("", max_length=5000)


class TransliterateRequest(_LocalizedRequest):
    text: str = Field(..., max_length=5000)


# Sahayak
class IntentRequest(_LocalizedRequest):
    utterance: str = Field(..., max_length=5000)


# Portal tools
class ResumeRequest(_LocalizedRequest):
    profile: ExtractedProfile
    offline: Optional[bool] = None


class SchemeRequest(_LocalizedRequest):
    profile: SchemeProfile
    offline: Optional[bool] = None


class GrievanceRequest(_LocalizedRequest):
    transcript: str = Field(..., min_length=1, max_length=10000)
    offline: Optional[bool] = None


class MobilityRequest(_LocalizedRequest):
    trip: ExtractedTrip
    time: Optional[str] = Field(None, max_length=32)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)

    @field_validator("trip")
    @classmethod
    def require_endpoints(cls, v: ExtractedTrip) -> ExtractedTrip:
        if not v.start.strip() or not v.end.strip():
            raise ValueError("Both start and end locations are required")
        return v


class ImageRequest(_LocalizedRequest):
    image: str
    mime_type: Optional[str] = None


class FaceVerifyRequest(BaseModel):
    image: str
    mime_type: Optional[str] = None


# Marketplace
class MarketItemRequest(ExtractedItem):
    image: str = ""


# Community help
class HelpRequestCreate(BaseModel):
    type: RequestType = RequestType.MEDICAL
    description: str = Field(..., max_length=2000)
    location: str = Field("", max_length=200)
