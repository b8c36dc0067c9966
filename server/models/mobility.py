"""Route planning models"""
from pydantic import BaseModel


class GroundingLink(BaseModel):
    """Map/web source cited by a grounded answer"""
    title: str
    uri: str


class MobilityPlan(BaseModel):
    text: str
    links: list[GroundingLink] = []
