"""Community help data models"""
from datetime import datetime
from enum import Enum
from pydantic import BaseModel


class RequestType(str, Enum):
    MEDICAL = "Medical"
    FOOD_WATER = "Food/Water"
    DOCUMENTS = "Documents"


class RequestStatus(str, Enum):
    URGENT = "Urgent"
    PENDING = "Pending"


class HelpRequest(BaseModel):
    """A need raised on the village request board"""
    id: str
    type: RequestType
    description: str
    location: str
    status: RequestStatus
    created_at: datetime
