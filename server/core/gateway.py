"""AI Gateway — uniform call surface over Gemini with caching and safe fallbacks.

Every operation makes at most one model call and never raises to its
caller: transport errors, unparseable output and empty answers all turn
into a fixed, human-readable fallback (or a record of defaults). Retrying
is left to the user.
"""
import logging
from typing import Any, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel

from core.cache import ResponseCache, make_cache_key
from core.language import BASE_LANGUAGE, language_directive, language_name
from integrations.gemini.client import (
    CapabilityRequiredError,
    GeminiClient,
    image_part,
    string_object_schema,
    text_part,
    user_content,
)
from integrations.gemini.prompts import (
    EXTRACTION_INSTRUCTION,
    MOBILITY_INSTRUCTION,
    TRANSLITERATION_INSTRUCTION,
    TRANSLITERATION_PROMPT,
    VISION_CLASSIFIER_INSTRUCTION,
)
from models.chat import ChatTurn
from models.mobility import GroundingLink, MobilityPlan
from models.outcome import GatewayOutcome

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

TEXT_FALLBACK_MESSAGE = "I am having trouble connecting right now. Please try again in a moment."
EMPTY_RESPONSE_MESSAGE = "No response generated."
OFFLINE_MESSAGE = (
    "You are offline. This answer has not been saved on this device yet. "
    "Please connect to the internet and try again."
)
VISION_EMPTY_MESSAGE = "Analysis failed."
VISION_FALLBACK_MESSAGE = "Error analyzing the image."
CHAT_FALLBACK_MESSAGE = "Connection error. Please check your internet and try again."
ROUTE_FALLBACK_MESSAGE = "I could not plan a route right now. Please try again in a moment."

CHAT_TEMPERATURE = 0.7


def _with_directive(system_instruction: Optional[str], language: str) -> Optional[str]:
    combined = (system_instruction or "") + language_directive(language)
    return combined or None


def _as_field_value(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


class AIGateway:
    """
    Call surface used by every portal tool.

    The response cache is injected so it can be shared across requests
    and swapped for a test double.
    """

    def __init__(
        self,
        client: GeminiClient,
        cache: ResponseCache,
        offline: bool = False,
    ):
        self.client = client
        self.cache = cache
        self.offline = offline

    # ------------------------------------------------------------------
    # Free text
    # ------------------------------------------------------------------

    async def generate_text(
        self,
        prompt: str,
        language: str = BASE_LANGUAGE,
        system_instruction: Optional[str] = None,
        offline: Optional[bool] = None,
    ) -> str:
        outcome = await self.generate_text_outcome(prompt, language, system_instruction, offline)
        return outcome.text

    async def generate_text_outcome(
        self,
        prompt: str,
        language: str = BASE_LANGUAGE,
        system_instruction: Optional[str] = None,
        offline: Optional[bool] = None,
    ) -> GatewayOutcome:
        """
        Cached text generation.

        Cache first (no network on a hit), then the offline short-circuit,
        then one model call. Only real, non-empty answers are stored.
        """
        key = make_cache_key(language, prompt, system_instruction)
        cached = self.cache.get(key)
        if cached is not None:
            return GatewayOutcome.success(cached)

        is_offline = self.offline if offline is None else offline
        if is_offline:
            logger.info("Offline and not cached — skipping model call")
            return GatewayOutcome.fallback(OFFLINE_MESSAGE)

        try:
            result = await self.client.generate(
                contents=[user_content(text_part(prompt))],
                system_instruction=_with_directive(system_instruction, language),
            )
        except Exception as e:
            logger.error(f"Text generation failed: {e}")
            return GatewayOutcome.fallback(TEXT_FALLBACK_MESSAGE)

        text = result.text.strip()
        if not text:
            logger.warning("Model returned an empty text response")
            return GatewayOutcome.fallback(EMPTY_RESPONSE_MESSAGE)

        self.cache.put(key, text)
        return GatewayOutcome.success(text)

    # ------------------------------------------------------------------
    # Vision
    # ------------------------------------------------------------------

    async def generate_vision(
        self,
        prompt: str,
        image_bytes: bytes,
        mime_type: str,
        language: str = BASE_LANGUAGE,
        skip_language_directive: bool = False,
    ) -> str:
        outcome = await self.generate_vision_outcome(
            prompt, image_bytes, mime_type, language, skip_language_directive
        )
        return outcome.text

    async def generate_vision_outcome(
        self,
        prompt: str,
        image_bytes: bytes,
        mime_type: str,
        language: str = BASE_LANGUAGE,
        skip_language_directive: bool = False,
    ) -> GatewayOutcome:
        """
        Image + text analysis. Never cached.

        skip_language_directive swaps the language directive for a terse
        classifier instruction so keyword verdicts (YES/NO) stay in English.
        """
        if skip_language_directive:
            system_instruction = VISION_CLASSIFIER_INSTRUCTION
        else:
            system_instruction = _with_directive(None, language)

        try:
            result = await self.client.generate(
                contents=[user_content(image_part(image_bytes, mime_type), text_part(prompt))],
                system_instruction=system_instruction,
            )
        except Exception as e:
            logger.error(f"Vision analysis failed: {e}")
            return GatewayOutcome.fallback(VISION_FALLBACK_MESSAGE)

        text = result.text.strip()
        if not text:
            return GatewayOutcome.fallback(VISION_EMPTY_MESSAGE)
        return GatewayOutcome.success(text)

    # ------------------------------------------------------------------
    # Structured extraction
    # ------------------------------------------------------------------

    async def generate_json(
        self,
        utterance: str,
        system_instruction: str,
        response_schema: Optional[dict] = None,
    ) -> Optional[dict]:
        """Strict-JSON call; None on any transport or parse failure."""
        try:
            return await self.client.generate_json(
                contents=[user_content(text_part(utterance))],
                system_instruction=system_instruction,
                response_schema=response_schema,
            )
        except Exception as e:
            logger.error(f"Structured generation failed: {e}")
            return None

    async def extract_structured(self, utterance: str, schema: Type[T]) -> T:
        """
        Fill a flat string-field record from free text.

        Always returns a complete record: fields the model skipped (or
        the whole record, on failure) take the schema's defaults.
        """
        fields = list(schema.model_fields)
        if not utterance or not utterance.strip():
            return schema()

        parsed = await self.generate_json(
            utterance,
            system_instruction=EXTRACTION_INSTRUCTION.format(fields=", ".join(fields)),
            response_schema=string_object_schema(fields),
        )
        if not isinstance(parsed, dict):
            return schema()

        values = {
            name: _as_field_value(parsed[name])
            for name in fields
            if parsed.get(name) is not None
        }
        try:
            return schema(**values)
        except ValueError as e:
            logger.error(f"Extracted {schema.__name__} failed validation: {e}")
            return schema()

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------

    @staticmethod
    def build_chat_contents(history: Sequence[ChatTurn], message: str) -> list[dict]:
        """Full model-visible conversation: prior turns in order, then the new message."""
        contents = [
            {"role": "user" if turn.role == "user" else "model", "parts": [text_part(turn.text)]}
            for turn in history
        ]
        contents.append(user_content(text_part(message)))
        return contents

    async def chat(
        self,
        history: Sequence[ChatTurn],
        message: str,
        system_instruction: str,
        language: str = BASE_LANGUAGE,
    ) -> GatewayOutcome:
        """
        Stateless multi-turn chat; the caller owns and resends the history.

        A key without access to the model yields a capability_required
        outcome whose text is the sentinel, so the client can offer to
        connect a paid key instead of showing it as a reply.
        """
        try:
            result = await self.client.generate(
                contents=self.build_chat_contents(history, message),
                system_instruction=_with_directive(system_instruction, language),
                temperature=CHAT_TEMPERATURE,
            )
        except CapabilityRequiredError:
            return GatewayOutcome.capability_required()
        except Exception as e:
            logger.error(f"Chat failed: {e}")
            return GatewayOutcome.fallback(CHAT_FALLBACK_MESSAGE)

        text = result.text.strip()
        if not text:
            return GatewayOutcome.fallback(EMPTY_RESPONSE_MESSAGE)
        return GatewayOutcome.success(text)

    # ------------------------------------------------------------------
    # Helpers built on the same contract
    # ------------------------------------------------------------------

    async def transliterate(self, text: str, target_language: str) -> str:
        """Phonetic Latin → native script. Returns the input unchanged on failure."""
        if not text or target_language == BASE_LANGUAGE:
            return text
        try:
            result = await self.client.generate(
                contents=[user_content(text_part(
                    TRANSLITERATION_PROMPT.format(language=language_name(target_language), text=text)
                ))],
                system_instruction=TRANSLITERATION_INSTRUCTION,
            )
        except Exception as e:
            logger.error(f"Transliteration failed: {e}")
            return text
        return result.text.strip() or text

    async def plan_route(
        self,
        prompt: str,
        language: str = BASE_LANGUAGE,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> MobilityPlan:
        """
        Maps-grounded route answer.

        Coordinates are optional; without them the model is simply not
        given a location hint.
        """
        tool_config = None
        if latitude is not None and longitude is not None:
            tool_config = {
                "retrievalConfig": {"latLng": {"latitude": latitude, "longitude": longitude}}
            }

        try:
            result = await self.client.generate(
                contents=[user_content(text_part(prompt))],
                system_instruction=_with_directive(MOBILITY_INSTRUCTION, language),
                tools=[{"googleMaps": {}}],
                tool_config=tool_config,
            )
        except Exception as e:
            logger.error(f"Route planning failed: {e}")
            return MobilityPlan(text=ROUTE_FALLBACK_MESSAGE)

        text = result.text.strip()
        if not text:
            return MobilityPlan(text=EMPTY_RESPONSE_MESSAGE)
        return MobilityPlan(text=text, links=self._grounding_links(result.grounding_chunks))

    @staticmethod
    def _grounding_links(chunks: list[dict]) -> list[GroundingLink]:
        links: list[GroundingLink] = []
        seen: set[str] = set()
        for chunk in chunks:
            source = chunk.get("maps") or chunk.get("web") or {}
            uri = source.get("uri")
            if not uri or uri in seen:
                continue
            seen.add(uri)
            links.append(GroundingLink(title=source.get("title") or uri, uri=uri))
        return links
