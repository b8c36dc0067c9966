"""Kisan Mandi routes"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from api.schemas.request_schemas import MarketItemRequest
from core.dependencies import get_market_repo
from models.extraction import ExtractedItem
from models.market import MarketItem
from services.marketplace import MarketRepository

router = APIRouter()


@router.get("/items", response_model=List[MarketItem])
async def list_items(repo: MarketRepository = Depends(get_market_repo)):
    return await repo.list_items()


@router.post("/items", response_model=MarketItem, status_code=status.HTTP_201_CREATED)
async def add_item(request: MarketItemRequest, repo: MarketRepository = Depends(get_market_repo)):
    item = ExtractedItem(**request.model_dump(exclude={"image"}))
    try:
        return await repo.add_item(item, request.image)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
