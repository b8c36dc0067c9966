"""Community help routes"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from api.schemas.request_schemas import HelpRequestCreate
from core.dependencies import get_community_repo
from models.community import HelpRequest
from services.community import CommunityRepository

router = APIRouter()


@router.get("/requests", response_model=List[HelpRequest])
async def list_requests(repo: CommunityRepository = Depends(get_community_repo)):
    """Active requests for volunteers, newest first."""
    return await repo.list_requests()


@router.post("/requests", response_model=HelpRequest, status_code=status.HTTP_201_CREATED)
async def raise_request(request: HelpRequestCreate, repo: CommunityRepository = Depends(get_community_repo)):
    try:
        return await repo.raise_request(request.type, request.description, request.location)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
