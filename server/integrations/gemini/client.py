"""Gemini client — REST transport to the hosted model with robust JSON extraction."""
import base64
import httpx
import json
import re
from typing import Any, Optional
from pydantic import BaseModel
from config.settings import settings
import logging

logger = logging.getLogger(__name__)

# Pre-compiled regex for stripping markdown fences from LLM output
_MD_FENCE_RE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?\s*```", re.DOTALL)

# AI Studio reports a missing paid key as a not-found model entity
_CAPABILITY_MARKERS = ("requested entity was not found",)


class GeminiError(Exception):
    """Transport or API failure talking to Gemini."""
    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CapabilityRequiredError(GeminiError):
    """The request needs a paid/elevated API key the caller must provision."""


class GeminiResponse(BaseModel):
    """Text of the first candidate plus any grounding sources"""
    text: str = ""
    grounding_chunks: list[dict[str, Any]] = []


def _extract_json_object(text: str) -> str:
    """
    Robustly extract a JSON object from LLM output.

    Handles:
    - Markdown code fences (```json ... ```)
    - Leading/trailing prose around the JSON
    - Multiple JSON objects (takes the first complete one)

    Raises ValueError if no valid JSON object is found.
    """
    fence_match = _MD_FENCE_RE.search(text)
    if fence_match:
        candidate = fence_match.group(1).strip()
        try:
            json.loads(candidate)
            return candidate
        except json.JSONDecodeError:
            pass  # fall through to brace-matching

    depth = 0
    start = None
    for i, ch in enumerate(text):
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}":
            if depth == 0:
                continue
            depth -= 1
            if depth == 0 and start is not None:
                candidate = text[start : i + 1]
                try:
                    json.loads(candidate)
                    return candidate
                except json.JSONDecodeError:
                    start = None  # reset and keep scanning

    raise ValueError("No valid JSON object found in LLM response")


def text_part(text: str) -> dict:
    return {"text": text}


def image_part(image_bytes: bytes, mime_type: str) -> dict:
    return {
        "inlineData": {
            "mimeType": mime_type,
            "data": base64.b64encode(image_bytes).decode("ascii"),
        }
    }


def user_content(*parts: dict) -> dict:
    return {"role": "user", "parts": list(parts)}


def string_object_schema(fields: list[str]) -> dict:
    """Gemini responseSchema for a flat object of required string fields."""
    return {
        "type": "OBJECT",
        "properties": {name: {"type": "STRING"} for name in fields},
        "required": list(fields),
    }


def _is_capability_error(status_code: int, message: str) -> bool:
    if status_code == 403:
        return True
    lowered = message.lower()
    return any(marker in lowered for marker in _CAPABILITY_MARKERS)


class GeminiClient:
    """Wrapper for the Gemini generateContent REST API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        model: Optional[str] = None,
    ):
        self.endpoint = (endpoint or settings.GEMINI_ENDPOINT).rstrip("/")
        self.model = model or settings.GEMINI_MODEL
        self.api_key = api_key or settings.GEMINI_API_KEY

        # Default timeout; callers can override per-request via the timeout_s param
        self.client = httpx.AsyncClient(
            timeout=float(settings.LLM_TIMEOUT),
            headers={"x-goog-api-key": self.api_key},
        )

    @property
    def url(self) -> str:
        return f"{self.endpoint}/v1beta/models/{self.model}:generateContent"

    async def generate(
        self,
        contents: list[dict],
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
        response_mime_type: Optional[str] = None,
        response_schema: Optional[dict] = None,
        tools: Optional[list[dict]] = None,
        tool_config: Optional[dict] = None,
        timeout_s: Optional[int] = None,
    ) -> GeminiResponse:
        """
        Single generateContent call.

        Raises CapabilityRequiredError when the key lacks access to the
        model, TimeoutError on timeout and GeminiError for anything else
        the API rejects.
        """
        effective_timeout = timeout_s or settings.LLM_TIMEOUT

        payload: dict[str, Any] = {"contents": contents}
        if system_instruction:
            payload["systemInstruction"] = {"parts": [text_part(system_instruction)]}

        generation_config: dict[str, Any] = {}
        if temperature is not None:
            generation_config["temperature"] = temperature
        if response_mime_type:
            generation_config["responseMimeType"] = response_mime_type
        if response_schema:
            generation_config["responseSchema"] = response_schema
        if generation_config:
            payload["generationConfig"] = generation_config
        if tools:
            payload["tools"] = tools
        if tool_config:
            payload["toolConfig"] = tool_config

        try:
            response = await self.client.post(self.url, json=payload, timeout=effective_timeout)
        except httpx.TimeoutException:
            logger.error(f"Gemini request timed out after {effective_timeout}s")
            raise TimeoutError(f"Gemini request timed out after {effective_timeout}s")
        except httpx.HTTPError as e:
            logger.error(f"Gemini transport error: {e}")
            raise GeminiError(f"Gemini transport error: {e}") from e

        if response.status_code >= 400:
            message = self._error_message(response)
            if _is_capability_error(response.status_code, message):
                logger.warning(f"Gemini capability gate ({response.status_code}): {message}")
                raise CapabilityRequiredError(message, status_code=response.status_code)
            logger.error(f"Gemini API error {response.status_code}: {message}")
            raise GeminiError(message, status_code=response.status_code)

        return self._parse_response(response.json())

    async def generate_json(
        self,
        contents: list[dict],
        system_instruction: Optional[str] = None,
        response_schema: Optional[dict] = None,
        timeout_s: Optional[int] = None,
    ) -> dict:
        """
        Generate a JSON object in JSON mode and parse it.

        Raises ValueError when the output holds no JSON object.
        """
        result = await self.generate(
            contents=contents,
            system_instruction=system_instruction,
            temperature=0.1,
            response_mime_type="application/json",
            response_schema=response_schema,
            timeout_s=timeout_s,
        )
        try:
            json_str = _extract_json_object(result.text)
            return json.loads(json_str)
        except (ValueError, json.JSONDecodeError) as e:
            logger.error(f"Failed to parse structured Gemini output: {e}")
            logger.debug(f"Raw response: {result.text[:500]}")
            raise

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text[:500] or f"HTTP {response.status_code}"
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return str(error.get("message") or error.get("status") or f"HTTP {response.status_code}")
        return f"HTTP {response.status_code}"

    @staticmethod
    def _parse_response(body: dict) -> GeminiResponse:
        candidates = body.get("candidates") or []
        if not candidates:
            return GeminiResponse()
        candidate = candidates[0]
        parts = (candidate.get("content") or {}).get("parts") or []
        text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
        grounding = (candidate.get("groundingMetadata") or {}).get("groundingChunks") or []
        return GeminiResponse(text=text, grounding_chunks=grounding)
