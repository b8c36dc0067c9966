"""Offline resource models"""
from pydantic import BaseModel


class OfflineResource(BaseModel):
    """A plain-text guide the client can save for use without a connection"""
    id: str
    title: str
    size: str
    content: str

    @property
    def filename(self) -> str:
        return "_".join(self.title.split()) + ".txt"
