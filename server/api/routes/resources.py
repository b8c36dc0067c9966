"""Offline resource routes"""
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse
from typing import List

from models.resources import OfflineResource
from services.offline_resources import get_resource, list_resources

router = APIRouter()


@router.get("/offline", response_model=List[OfflineResource])
async def offline_catalogue():
    return list_resources()


@router.get("/offline/{resource_id}/download", response_class=PlainTextResponse)
async def download_resource(resource_id: str):
    """The guide as a text file attachment."""
    resource = get_resource(resource_id)
    if resource is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")
    return PlainTextResponse(
        resource.content,
        headers={"Content-Disposition": f'attachment; filename="{resource.filename}"'},
    )
