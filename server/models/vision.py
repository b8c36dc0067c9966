"""Vision result models"""
from typing import Optional
from pydantic import BaseModel


class FaceVerification(BaseModel):
    """Outcome of a face sign-in check"""
    verified: bool
    reason: Optional[str] = None
