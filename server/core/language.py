"""Language catalogue, output-language directives and speech locale maps."""
from pydantic import BaseModel

BASE_LANGUAGE = "en"


class Language(BaseModel):
    """A portal language"""
    code: str
    name: str
    local_name: str


LANGUAGES: list[Language] = [
    Language(code="en", name="English", local_name="English"),
    Language(code="hi", name="Hindi", local_name="हिन्दी"),
    Language(code="bn", name="Bengali", local_name="বাংলা"),
    Language(code="te", name="Telugu", local_name="తెలుగు"),
    Language(code="mr", name="Marathi", local_name="मराठी"),
    Language(code="ta", name="Tamil", local_name="தமிழ்"),
    Language(code="ur", name="Urdu", local_name="اردو"),
    Language(code="gu", name="Gujarati", local_name="ગુજરાતી"),
    Language(code="kn", name="Kannada", local_name="ಕನ್ನಡ"),
    Language(code="ml", name="Malayalam", local_name="മലയാളം"),
    Language(code="pa", name="Punjabi", local_name="ਪੰਜਾਬੀ"),
    Language(code="or", name="Odia", local_name="ଓଡ଼ିଆ"),
    Language(code="as", name="Assamese", local_name="অসমীয়া"),
]

LANGUAGE_NAMES: dict[str, str] = {lang.code: lang.name for lang in LANGUAGES}

# Voices for speech synthesis; Urdu is voiced with the Pakistani locale
SYNTHESIS_LOCALES: dict[str, str] = {
    "en": "en-IN",
    "hi": "hi-IN",
    "bn": "bn-IN",
    "ta": "ta-IN",
    "te": "te-IN",
    "mr": "mr-IN",
    "gu": "gu-IN",
    "kn": "kn-IN",
    "ml": "ml-IN",
    "pa": "pa-IN",
    "ur": "ur-PK",
}

RECOGNITION_LOCALES: dict[str, str] = {
    code: f"{code}-IN" for code in LANGUAGE_NAMES
}

DEFAULT_LOCALE = "en-IN"
SPEECH_RATE = 0.9
SPEECH_PITCH = 1.0


def is_supported(code: str) -> bool:
    return code in LANGUAGE_NAMES


def language_name(code: str) -> str:
    """English name of a language, falling back to the base language."""
    return LANGUAGE_NAMES.get(code, LANGUAGE_NAMES[BASE_LANGUAGE])


def language_directive(code: str) -> str:
    """
    Instruction fragment appended to every system prompt.

    Empty for the base language and for codes we don't recognize, so
    unknown input degrades to plain English output.
    """
    if code == BASE_LANGUAGE or code not in LANGUAGE_NAMES:
        return ""
    name = LANGUAGE_NAMES[code]
    return (
        f" MANDATORY: You must write EVERYTHING strictly in the {name} language "
        f"and using the {name} script. Do not use English words unless absolutely necessary."
    )


def synthesis_locale(code: str) -> str:
    return SYNTHESIS_LOCALES.get(code, DEFAULT_LOCALE)


def recognition_locale(code: str) -> str:
    return RECOGNITION_LOCALES.get(code, DEFAULT_LOCALE)
