"""Intent data models"""
from enum import Enum
from pydantic import BaseModel
from typing import Optional


class IntentAction(str, Enum):
    NAVIGATE = "navigate"
    TYPE_HEALTH_INPUT = "type_health_input"
    PLAN_MOBILITY = "plan_mobility"
    UNKNOWN = "unknown"


class ToolTarget(str, Enum):
    """Portal tools the assistant can open"""
    RESUME_BUILDER = "resume_builder"
    SCHEME_MATCHER = "scheme_matcher"
    MOBILITY_PLANNER = "mobility_planner"
    GOVERNANCE_AID = "governance_aid"
    HEALTH_CHAT = "health_chat"
    KISAN_MANDI = "kisan_mandi"
    VISION = "vision"
    COMMUNITY_HELP = "community_help"


class IntentResult(BaseModel):
    """Classified user utterance; consumed immediately to drive navigation"""
    action: IntentAction
    target: Optional[ToolTarget] = None
    text: Optional[str] = None  # symptom text for type_health_input
    source_location: Optional[str] = None
    destination_location: Optional[str] = None

    @classmethod
    def unknown(cls) -> "IntentResult":
        return cls(action=IntentAction.UNKNOWN)
