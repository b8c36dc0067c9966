"""Portal tools — prompt builders for each service, on top of the AI Gateway."""
import logging
import re
from typing import Optional

from core.gateway import AIGateway
from core.language import BASE_LANGUAGE
from integrations.gemini.prompts import (
    FACE_VERIFICATION_PROMPT,
    GRIEVANCE_INSTRUCTION,
    GRIEVANCE_PROMPT,
    IMAGE_EXPLAIN_PROMPT,
    MOBILITY_PROMPT,
    RESUME_PROMPT,
    SCHEME_PROMPT,
)
from models.extraction import ExtractedProfile, ExtractedTrip, SchemeProfile
from models.mobility import MobilityPlan
from models.outcome import GatewayOutcome
from models.vision import FaceVerification

logger = logging.getLogger(__name__)

DEFAULT_FACE_REASON = "Ensure face is clear"

_YES_RE = re.compile(r"^\W*YES\b", re.IGNORECASE)
_NO_RE = re.compile(r"^\W*NO\b\s*:?\s*(?P<reason>.*)$", re.IGNORECASE | re.DOTALL)


def parse_face_verdict(verdict: str) -> FaceVerification:
    """
    Read a YES / "NO: reason" answer.

    Only a verdict that opens with the word YES is accepted. Everything
    else is a rejection, including gateway fallbacks; the reason is the
    first sentence after "NO:".
    """
    if _YES_RE.match(verdict):
        return FaceVerification(verified=True)

    reason = DEFAULT_FACE_REASON
    match = _NO_RE.match(verdict)
    if match:
        first_sentence = match.group("reason").split(".")[0].strip()
        if first_sentence:
            reason = first_sentence
    return FaceVerification(verified=False, reason=reason)


class PortalTools:
    """The portal's AI-assisted services"""

    def __init__(self, gateway: AIGateway):
        self.gateway = gateway

    async def build_resume(
        self,
        profile: ExtractedProfile,
        language: str = BASE_LANGUAGE,
        offline: Optional[bool] = None,
    ) -> GatewayOutcome:
        prompt = RESUME_PROMPT.format(**profile.model_dump())
        return await self.gateway.generate_text_outcome(prompt, language, offline=offline)

    async def match_schemes(
        self,
        profile: SchemeProfile,
        language: str = BASE_LANGUAGE,
        offline: Optional[bool] = None,
    ) -> GatewayOutcome:
        prompt = SCHEME_PROMPT.format(**profile.model_dump())
        return await self.gateway.generate_text_outcome(prompt, language, offline=offline)

    async def draft_grievance(
        self,
        transcript: str,
        language: str = BASE_LANGUAGE,
        offline: Optional[bool] = None,
    ) -> GatewayOutcome:
        prompt = GRIEVANCE_PROMPT.format(transcript=transcript.strip())
        return await self.gateway.generate_text_outcome(
            prompt, language, GRIEVANCE_INSTRUCTION, offline=offline
        )

    async def explain_image(
        self,
        image_bytes: bytes,
        mime_type: str,
        language: str = BASE_LANGUAGE,
    ) -> GatewayOutcome:
        return await self.gateway.generate_vision_outcome(
            IMAGE_EXPLAIN_PROMPT, image_bytes, mime_type, language
        )

    async def verify_face(self, image_bytes: bytes, mime_type: str = "image/jpeg") -> FaceVerification:
        """Face sign-in check; the verdict is never translated."""
        verdict = await self.gateway.generate_vision(
            FACE_VERIFICATION_PROMPT,
            image_bytes,
            mime_type,
            skip_language_directive=True,
        )
        result = parse_face_verdict(verdict)
        logger.info(f"Face verification: verified={result.verified}")
        return result

    async def plan_trip(
        self,
        trip: ExtractedTrip,
        language: str = BASE_LANGUAGE,
        time: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> MobilityPlan:
        aid_clause = ""
        if trip.aid and trip.aid != "None":
            aid_clause = f" The traveller uses a {trip.aid.lower()}, so the route must be accessible."
        time_clause = f" They plan to leave at {time}." if time else ""
        prompt = MOBILITY_PROMPT.format(
            start=trip.start,
            end=trip.end,
            aid_clause=aid_clause,
            time_clause=time_clause,
        )
        return await self.gateway.plan_route(prompt, language, latitude, longitude)
