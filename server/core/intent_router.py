"""Intent Router — maps free-form speech/text to a portal action."""
import logging

from pydantic import ValidationError

from core.gateway import AIGateway
from core.language import BASE_LANGUAGE, language_name
from integrations.gemini.prompts import INTENT_ROUTER_INSTRUCTION
from models.intent import IntentAction, IntentResult, ToolTarget

logger = logging.getLogger(__name__)

INTENT_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "action": {"type": "STRING", "enum": [a.value for a in IntentAction]},
        "target": {"type": "STRING", "enum": [t.value for t in ToolTarget], "nullable": True},
        "text": {"type": "STRING", "nullable": True},
        "source_location": {"type": "STRING", "nullable": True},
        "destination_location": {"type": "STRING", "nullable": True},
    },
    "required": ["action"],
}


def _clean(value):
    if isinstance(value, str):
        value = value.strip()
        if not value or value.lower() in ("null", "none"):
            return None
    return value


class IntentRouter:
    """
    Sahayak voice navigator.

    classify() never raises: anything it cannot make sense of comes back
    as action "unknown", which callers treat as a no-op.
    """

    def __init__(self, gateway: AIGateway):
        self.gateway = gateway

    async def classify(self, utterance: str, language: str = BASE_LANGUAGE) -> IntentResult:
        if not utterance or not utterance.strip():
            return IntentResult.unknown()

        instruction = INTENT_ROUTER_INSTRUCTION
        if language != BASE_LANGUAGE:
            instruction += f"\n\nThe user may be speaking {language_name(language)}."

        parsed = await self.gateway.generate_json(
            utterance,
            system_instruction=instruction,
            response_schema=INTENT_RESPONSE_SCHEMA,
        )
        if not isinstance(parsed, dict):
            return IntentResult.unknown()

        try:
            intent = IntentResult(**{k: _clean(v) for k, v in parsed.items() if k in IntentResult.model_fields})
        except (ValidationError, TypeError) as e:
            logger.warning(f"Intent did not match schema: {e}")
            return IntentResult.unknown()

        intent = self._enforce_rules(intent)
        logger.info(f"Classified intent: {intent.action.value} → {intent.target.value if intent.target else None}")
        return intent

    @staticmethod
    def _enforce_rules(intent: IntentResult) -> IntentResult:
        """Apply the action contract regardless of what the model returned."""
        if intent.action == IntentAction.PLAN_MOBILITY:
            if not (intent.source_location and intent.destination_location):
                return IntentResult(action=IntentAction.NAVIGATE, target=ToolTarget.MOBILITY_PLANNER)
            return IntentResult(
                action=IntentAction.PLAN_MOBILITY,
                target=ToolTarget.MOBILITY_PLANNER,
                source_location=intent.source_location,
                destination_location=intent.destination_location,
            )

        if intent.action == IntentAction.TYPE_HEALTH_INPUT:
            if not intent.text:
                return IntentResult(action=IntentAction.NAVIGATE, target=ToolTarget.HEALTH_CHAT)
            return IntentResult(
                action=IntentAction.TYPE_HEALTH_INPUT,
                target=ToolTarget.HEALTH_CHAT,
                text=intent.text,
            )

        if intent.action == IntentAction.NAVIGATE:
            if intent.target is None:
                return IntentResult.unknown()
            return IntentResult(action=IntentAction.NAVIGATE, target=intent.target)

        return IntentResult.unknown()
