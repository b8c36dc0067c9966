"""Portal tool routes"""
from fastapi import APIRouter, Depends, HTTPException, status
import logging

from api.schemas.request_schemas import (
    FaceVerifyRequest,
    GrievanceRequest,
    ImageRequest,
    MobilityRequest,
    ResumeRequest,
    SchemeRequest,
)
from api.schemas.response_schemas import TextResponse
from core.dependencies import get_portal_tools
from core.portal_tools import PortalTools
from models.mobility import MobilityPlan
from models.vision import FaceVerification
from utils.images import decode_image

logger = logging.getLogger(__name__)
router = APIRouter()


def _decode_or_400(image: str, mime_type):
    try:
        return decode_image(image, mime_type)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/resume", response_model=TextResponse)
async def build_resume(request: ResumeRequest, tools: PortalTools = Depends(get_portal_tools)):
    outcome = await tools.build_resume(request.profile, request.language, offline=request.offline)
    return TextResponse(text=outcome.text, status=outcome.status)


@router.post("/schemes", response_model=TextResponse)
async def match_schemes(request: SchemeRequest, tools: PortalTools = Depends(get_portal_tools)):
    outcome = await tools.match_schemes(request.profile, request.language, offline=request.offline)
    return TextResponse(text=outcome.text, status=outcome.status)


@router.post("/grievance", response_model=TextResponse)
async def draft_grievance(request: GrievanceRequest, tools: PortalTools = Depends(get_portal_tools)):
    outcome = await tools.draft_grievance(request.transcript, request.language, offline=request.offline)
    return TextResponse(text=outcome.text, status=outcome.status)


@router.post("/mobility", response_model=MobilityPlan)
async def plan_trip(request: MobilityRequest, tools: PortalTools = Depends(get_portal_tools)):
    """Safe-route plan; coordinates are optional and never required."""
    return await tools.plan_trip(
        request.trip,
        request.language,
        time=request.time,
        latitude=request.latitude,
        longitude=request.longitude,
    )


@router.post("/vision", response_model=TextResponse)
async def explain_image(request: ImageRequest, tools: PortalTools = Depends(get_portal_tools)):
    image_bytes, mime_type = _decode_or_400(request.image, request.mime_type)
    outcome = await tools.explain_image(image_bytes, mime_type, request.language)
    return TextResponse(text=outcome.text, status=outcome.status)


@router.post("/face-verify", response_model=FaceVerification)
async def verify_face(request: FaceVerifyRequest, tools: PortalTools = Depends(get_portal_tools)):
    """Face sign-in: one camera frame in, verified / retry reason out."""
    image_bytes, mime_type = _decode_or_400(request.image, request.mime_type)
    return await tools.verify_face(image_bytes, mime_type)
