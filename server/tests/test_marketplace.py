"""Tests for the Kisan Mandi listing store."""
import pytest

from models.extraction import ExtractedItem
from services.marketplace import OWN_SELLER, MarketRepository


class TestMarketRepository:
    @pytest.mark.asyncio
    async def test_seeded_listings(self):
        items = await MarketRepository().list_items()
        assert [i.name for i in items] == ["Organic Wheat", "Fresh Potatoes"]

    @pytest.mark.asyncio
    async def test_empty_store(self):
        assert await MarketRepository(seed=False).list_items() == []

    @pytest.mark.asyncio
    async def test_add_item_goes_first(self):
        repo = MarketRepository()
        item = ExtractedItem(name=" Tomatoes ", price="₹20/kg", contact="9000000000")
        listing = await repo.add_item(item, "data:image/jpeg;base64,AAAA")

        assert listing.name == "Tomatoes"
        assert listing.seller == OWN_SELLER
        assert listing.location == "My Village"
        assert len(listing.id) == 9
        items = await repo.list_items()
        assert items[0] == listing
        assert len(items) == 3

    @pytest.mark.asyncio
    async def test_missing_details_rejected(self):
        repo = MarketRepository(seed=False)
        with pytest.raises(ValueError, match="missing: price, image"):
            await repo.add_item(ExtractedItem(name="Rice", contact="9"), "")
        assert await repo.list_items() == []

    @pytest.mark.asyncio
    async def test_list_is_a_copy(self):
        repo = MarketRepository()
        items = await repo.list_items()
        items.clear()
        assert len(await repo.list_items()) == 2
