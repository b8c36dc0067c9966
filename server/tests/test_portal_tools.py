"""Tests for the portal tool prompt builders and the face verdict parser."""
import pytest
from unittest.mock import AsyncMock, MagicMock

from core.portal_tools import DEFAULT_FACE_REASON, PortalTools, parse_face_verdict
from integrations.gemini.prompts import FACE_VERIFICATION_PROMPT, GRIEVANCE_INSTRUCTION
from models.extraction import ExtractedProfile, ExtractedTrip, SchemeProfile
from models.mobility import MobilityPlan
from models.outcome import GatewayOutcome, OutcomeStatus


@pytest.fixture
def gateway():
    gw = MagicMock()
    gw.generate_text_outcome = AsyncMock(return_value=GatewayOutcome.success("done"))
    gw.generate_vision_outcome = AsyncMock(return_value=GatewayOutcome.success("A ration card."))
    gw.generate_vision = AsyncMock(return_value="YES")
    gw.plan_route = AsyncMock(return_value=MobilityPlan(text="route"))
    return gw


@pytest.fixture
def tools(gateway):
    return PortalTools(gateway)


class TestParseFaceVerdict:
    def test_yes(self):
        assert parse_face_verdict("YES").verified is True

    def test_yes_any_case(self):
        assert parse_face_verdict("yes, one clear face").verified is True

    def test_no_with_reason(self):
        result = parse_face_verdict("NO: Face is too dark. Move to the light.")
        assert result.verified is False
        assert result.reason == "Face is too dark"

    def test_no_without_reason(self):
        result = parse_face_verdict("NO:")
        assert result.reason == DEFAULT_FACE_REASON

    def test_rejection_mentioning_eyes_is_not_verified(self):
        result = parse_face_verdict("NO: Eyes are closed.")
        assert result.verified is False
        assert result.reason == "Eyes are closed"

    def test_yes_must_be_a_whole_word(self):
        assert parse_face_verdict("Yesterday's photo").verified is False

    def test_fallback_text_is_rejection(self):
        result = parse_face_verdict("Error analyzing the image.")
        assert result.verified is False
        assert result.reason == DEFAULT_FACE_REASON


class TestPortalTools:
    @pytest.mark.asyncio
    async def test_resume_prompt_has_profile(self, tools, gateway):
        profile = ExtractedProfile(name="Ramesh", location="Sonapur", skills="masonry")
        outcome = await tools.build_resume(profile, "mr")
        assert outcome.text == "done"
        prompt, language = gateway.generate_text_outcome.call_args.args[:2]
        assert "Name: Ramesh" in prompt
        assert "Skills: masonry" in prompt
        assert language == "mr"

    @pytest.mark.asyncio
    async def test_scheme_prompt(self, tools, gateway):
        profile = SchemeProfile(age="45", gender="Female", occupation="farmer", income="50000", state="Bihar")
        await tools.match_schemes(profile, "hi", offline=True)
        prompt = gateway.generate_text_outcome.call_args.args[0]
        assert "45 year old Female working as farmer in Bihar" in prompt
        assert gateway.generate_text_outcome.call_args.kwargs["offline"] is True

    @pytest.mark.asyncio
    async def test_grievance_uses_letter_instruction(self, tools, gateway):
        await tools.draft_grievance("  The handpump is broken  ", "bn")
        args = gateway.generate_text_outcome.call_args.args
        assert "The handpump is broken" in args[0]
        assert args[2] == GRIEVANCE_INSTRUCTION

    @pytest.mark.asyncio
    async def test_verify_face_skips_language_directive(self, tools, gateway):
        gateway.generate_vision.return_value = "NO: Multiple faces. Please retry."
        result = await tools.verify_face(b"frame")
        assert result.verified is False
        assert result.reason == "Multiple faces"
        call = gateway.generate_vision.call_args
        assert call.args[0] == FACE_VERIFICATION_PROMPT
        assert call.kwargs["skip_language_directive"] is True

    @pytest.mark.asyncio
    async def test_explain_image_is_localized(self, tools, gateway):
        await tools.explain_image(b"img", "image/png", "ta")
        args = gateway.generate_vision_outcome.call_args.args
        assert args[1:] == (b"img", "image/png", "ta")

    @pytest.mark.asyncio
    async def test_plan_trip_with_aid_and_time(self, tools, gateway):
        trip = ExtractedTrip(start="Sonapur", end="District Hospital", aid="Wheelchair")
        plan = await tools.plan_trip(trip, "en", time="09:30", latitude=1.5, longitude=2.5)
        assert plan.text == "route"
        prompt, language, lat, lng = gateway.plan_route.call_args.args
        assert prompt.startswith("Plan a safe route from Sonapur to District Hospital.")
        assert "wheelchair" in prompt
        assert "09:30" in prompt
        assert (language, lat, lng) == ("en", 1.5, 2.5)

    @pytest.mark.asyncio
    async def test_plan_trip_without_aid(self, tools, gateway):
        await tools.plan_trip(ExtractedTrip(start="A", end="B"))
        prompt = gateway.plan_route.call_args.args[0]
        assert prompt == "Plan a safe route from A to B."

    @pytest.mark.asyncio
    async def test_text_tools_pass_fallback_status_through(self, tools, gateway):
        gateway.generate_text_outcome.return_value = GatewayOutcome.fallback("offline")
        outcome = await tools.draft_grievance("No water", offline=True)
        assert outcome.status == OutcomeStatus.FALLBACK
