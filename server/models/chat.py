"""Chat data models"""
from typing import Literal
from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    """One turn of a caller-owned conversation"""
    role: Literal["user", "model"]
    text: str = Field(..., max_length=10000)
