"""Language catalogue route"""
from fastapi import APIRouter

from api.schemas.response_schemas import LanguageInfo, LanguagesResponse
from config.settings import settings
from core.language import (
    LANGUAGES,
    SPEECH_PITCH,
    SPEECH_RATE,
    recognition_locale,
    synthesis_locale,
)

router = APIRouter()


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages():
    """Languages with the voice and recognition locales the browser should use."""
    return LanguagesResponse(
        default=settings.DEFAULT_LANGUAGE,
        speech_rate=SPEECH_RATE,
        speech_pitch=SPEECH_PITCH,
        languages=[
            LanguageInfo(
                code=lang.code,
                name=lang.name,
                local_name=lang.local_name,
                synthesis_locale=synthesis_locale(lang.code),
                recognition_locale=recognition_locale(lang.code),
            )
            for lang in LANGUAGES
        ],
    )
