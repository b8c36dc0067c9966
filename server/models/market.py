"""Marketplace data models"""
from pydantic import BaseModel


class MarketItem(BaseModel):
    """A produce listing in Kisan Mandi"""
    id: str
    name: str
    price: str
    seller: str
    location: str
    contact: str
    image: str  # URL or data URL
