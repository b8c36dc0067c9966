"""API response schemas"""
from pydantic import BaseModel
from typing import List

from models.outcome import OutcomeStatus


class TextResponse(BaseModel):
    text: str
    status: OutcomeStatus = OutcomeStatus.OK


class ChatResponse(BaseModel):
    text: str
    status: OutcomeStatus
    requires_api_key: bool = False  # client shows "Connect Paid API Key"


class TransliterateResponse(BaseModel):
    text: str


class LanguageInfo(BaseModel):
    code: str
    name: str
    local_name: str
    synthesis_locale: str
    recognition_locale: str


class LanguagesResponse(BaseModel):
    default: str
    speech_rate: float
    speech_pitch: float
    languages: List[LanguageInfo]


class CacheStatsResponse(BaseModel):
    size: int
    max_entries: int
    ttl_seconds: int
    hits: int
    misses: int
