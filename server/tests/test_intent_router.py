"""Tests for the Sahayak intent router."""
import pytest
from unittest.mock import AsyncMock, MagicMock

from core.intent_router import INTENT_RESPONSE_SCHEMA, IntentRouter
from models.intent import IntentAction, IntentResult, ToolTarget


@pytest.fixture
def gateway():
    gw = MagicMock()
    gw.generate_json = AsyncMock(return_value=None)
    return gw


@pytest.fixture
def router(gateway):
    return IntentRouter(gateway)


class TestClassify:
    @pytest.mark.asyncio
    async def test_plan_mobility_with_both_locations(self, router, gateway):
        gateway.generate_json.return_value = {
            "action": "plan_mobility",
            "target": "mobility_planner",
            "source_location": "Sonapur",
            "destination_location": "the clinic",
        }
        intent = await router.classify("I need to go from Sonapur to the clinic")
        assert intent == IntentResult(
            action=IntentAction.PLAN_MOBILITY,
            target=ToolTarget.MOBILITY_PLANNER,
            source_location="Sonapur",
            destination_location="the clinic",
        )

    @pytest.mark.asyncio
    async def test_navigate_to_market(self, router, gateway):
        gateway.generate_json.return_value = {"action": "navigate", "target": "kisan_mandi"}
        intent = await router.classify("open the market")
        assert intent.action == IntentAction.NAVIGATE
        assert intent.target == ToolTarget.KISAN_MANDI

    @pytest.mark.asyncio
    async def test_health_input_carries_text(self, router, gateway):
        gateway.generate_json.return_value = {
            "action": "type_health_input",
            "target": "health_chat",
            "text": "I have had a fever for two days",
        }
        intent = await router.classify("I have had a fever for two days")
        assert intent.action == IntentAction.TYPE_HEALTH_INPUT
        assert intent.target == ToolTarget.HEALTH_CHAT
        assert intent.text == "I have had a fever for two days"

    @pytest.mark.asyncio
    async def test_uses_strict_schema(self, router, gateway):
        await router.classify("open resume builder")
        kwargs = gateway.generate_json.call_args.kwargs
        assert kwargs["response_schema"] is INTENT_RESPONSE_SCHEMA

    @pytest.mark.asyncio
    async def test_mentions_user_language(self, router, gateway):
        await router.classify("bazaar kholo", "hi")
        assert "Hindi" in gateway.generate_json.call_args.kwargs["system_instruction"]

    @pytest.mark.asyncio
    async def test_empty_utterance_is_unknown_without_call(self, router, gateway):
        intent = await router.classify("   ")
        assert intent.action == IntentAction.UNKNOWN
        gateway.generate_json.assert_not_awaited()


class TestFailures:
    @pytest.mark.asyncio
    async def test_gateway_failure_is_unknown(self, router, gateway):
        gateway.generate_json.return_value = None
        intent = await router.classify("something")
        assert intent == IntentResult.unknown()

    @pytest.mark.asyncio
    async def test_non_dict_is_unknown(self, router, gateway):
        gateway.generate_json.return_value = ["navigate"]
        assert (await router.classify("something")).action == IntentAction.UNKNOWN

    @pytest.mark.asyncio
    async def test_invalid_action_is_unknown(self, router, gateway):
        gateway.generate_json.return_value = {"action": "dance"}
        assert (await router.classify("something")).action == IntentAction.UNKNOWN

    @pytest.mark.asyncio
    async def test_invalid_target_is_unknown(self, router, gateway):
        gateway.generate_json.return_value = {"action": "navigate", "target": "weather"}
        assert (await router.classify("what's the weather")).action == IntentAction.UNKNOWN

    @pytest.mark.asyncio
    async def test_explicit_unknown(self, router, gateway):
        gateway.generate_json.return_value = {"action": "unknown", "target": "vision"}
        intent = await router.classify("tell me a joke")
        assert intent == IntentResult.unknown()


class TestRules:
    @pytest.mark.asyncio
    async def test_plan_mobility_missing_destination_opens_planner(self, router, gateway):
        gateway.generate_json.return_value = {
            "action": "plan_mobility",
            "source_location": "Sonapur",
            "destination_location": "null",
        }
        intent = await router.classify("I want to leave Sonapur")
        assert intent == IntentResult(action=IntentAction.NAVIGATE, target=ToolTarget.MOBILITY_PLANNER)

    @pytest.mark.asyncio
    async def test_plan_mobility_target_is_forced(self, router, gateway):
        gateway.generate_json.return_value = {
            "action": "plan_mobility",
            "target": "kisan_mandi",
            "source_location": "A",
            "destination_location": "B",
        }
        intent = await router.classify("from A to B")
        assert intent.target == ToolTarget.MOBILITY_PLANNER

    @pytest.mark.asyncio
    async def test_health_input_without_text_opens_chat(self, router, gateway):
        gateway.generate_json.return_value = {"action": "type_health_input", "text": " "}
        intent = await router.classify("I feel sick")
        assert intent == IntentResult(action=IntentAction.NAVIGATE, target=ToolTarget.HEALTH_CHAT)

    @pytest.mark.asyncio
    async def test_navigate_without_target_is_unknown(self, router, gateway):
        gateway.generate_json.return_value = {"action": "navigate", "target": None}
        assert (await router.classify("go")).action == IntentAction.UNKNOWN

    @pytest.mark.asyncio
    async def test_navigate_drops_stray_fields(self, router, gateway):
        gateway.generate_json.return_value = {
            "action": "navigate",
            "target": "scheme_matcher",
            "text": "schemes",
            "source_location": "X",
        }
        intent = await router.classify("show me schemes")
        assert intent == IntentResult(action=IntentAction.NAVIGATE, target=ToolTarget.SCHEME_MATCHER)
