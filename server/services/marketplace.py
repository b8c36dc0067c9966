"""Kisan Mandi listing store."""
import asyncio
import logging
from typing import List
from uuid import uuid4

from models.extraction import ExtractedItem
from models.market import MarketItem

logger = logging.getLogger(__name__)

OWN_SELLER = "Me (You)"

_SEED_ITEMS = [
    MarketItem(
        id="1",
        name="Organic Wheat",
        price="₹25/kg",
        seller="Ramesh Kumar",
        location="Sonapur",
        contact="9876543210",
        image="https://images.unsplash.com/photo-1574323347407-f5e1ad6d020b?auto=format&fit=crop&q=80&w=400",
    ),
    MarketItem(
        id="2",
        name="Fresh Potatoes",
        price="₹15/kg",
        seller="Savitri Devi",
        location="Village East",
        contact="9123456780",
        image="https://images.unsplash.com/photo-1518977676601-b53f82aba655?auto=format&fit=crop&q=80&w=400",
    ),
]


class MarketRepository:
    """
    In-memory produce listings for the lifetime of the process.

    Newest listings come first.
    """

    def __init__(self, seed: bool = True):
        self._items: List[MarketItem] = [item.model_copy() for item in _SEED_ITEMS] if seed else []
        self._lock = asyncio.Lock()

    async def list_items(self) -> List[MarketItem]:
        async with self._lock:
            return list(self._items)

    async def add_item(self, item: ExtractedItem, image: str) -> MarketItem:
        """
        Post a listing for the current user.

        Raises ValueError when a required detail or the photo is missing.
        """
        missing = [
            name for name, value in (
                ("name", item.name),
                ("price", item.price),
                ("contact", item.contact),
                ("image", image),
            )
            if not value or not value.strip()
        ]
        if missing:
            raise ValueError(
                f"Please fill all details and upload an image (missing: {', '.join(missing)})"
            )

        listing = MarketItem(
            id=uuid4().hex[:9],
            name=item.name.strip(),
            price=item.price.strip(),
            seller=OWN_SELLER,
            location=item.location.strip() or "My Village",
            contact=item.contact.strip(),
            image=image,
        )
        async with self._lock:
            self._items.insert(0, listing)
        logger.info(f"Listed market item {listing.id}: {listing.name}")
        return listing
