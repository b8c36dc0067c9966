"""Tagged results of AI gateway calls"""
from enum import Enum
from pydantic import BaseModel

# Returned verbatim as the outcome text when the model needs a paid key
CAPABILITY_REQUIRED_SENTINEL = "ERROR_PRO_KEY_REQUIRED"


class OutcomeStatus(str, Enum):
    OK = "ok"
    FALLBACK = "fallback"
    CAPABILITY_REQUIRED = "capability_required"


class GatewayOutcome(BaseModel):
    status: OutcomeStatus
    text: str

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.OK

    @classmethod
    def success(cls, text: str) -> "GatewayOutcome":
        return cls(status=OutcomeStatus.OK, text=text)

    @classmethod
    def fallback(cls, text: str) -> "GatewayOutcome":
        return cls(status=OutcomeStatus.FALLBACK, text=text)

    @classmethod
    def capability_required(cls) -> "GatewayOutcome":
        return cls(status=OutcomeStatus.CAPABILITY_REQUIRED, text=CAPABILITY_REQUIRED_SENTINEL)
