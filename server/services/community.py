"""Community help request board."""
import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import List
from uuid import uuid4

from models.community import HelpRequest, RequestStatus, RequestType

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "My Village"


def _seed_requests() -> List[HelpRequest]:
    now = datetime.now(timezone.utc)
    return [
        HelpRequest(
            id="1",
            type=RequestType.MEDICAL,
            description="Need urgent medicine transport for elderly patient.",
            location="Ward 4, Sonapur",
            status=RequestStatus.URGENT,
            created_at=now - timedelta(minutes=10),
        ),
        HelpRequest(
            id="2",
            type=RequestType.DOCUMENTS,
            description="Need help reading pension form and local guidance.",
            location="Main Panchayat Office",
            status=RequestStatus.PENDING,
            created_at=now - timedelta(hours=1),
        ),
    ]


class CommunityRepository:
    """
    In-memory help requests that volunteers browse.

    Medical needs are marked urgent; everything else waits as pending.
    Newest requests come first.
    """

    def __init__(self, seed: bool = True):
        self._requests: List[HelpRequest] = _seed_requests() if seed else []
        self._lock = asyncio.Lock()

    async def list_requests(self) -> List[HelpRequest]:
        async with self._lock:
            return list(self._requests)

    async def raise_request(
        self,
        request_type: RequestType,
        description: str,
        location: str = DEFAULT_LOCATION,
    ) -> HelpRequest:
        """Raises ValueError when the need is not described."""
        if not description or not description.strip():
            raise ValueError("Please describe what you need")

        status = RequestStatus.URGENT if request_type == RequestType.MEDICAL else RequestStatus.PENDING
        help_request = HelpRequest(
            id=uuid4().hex[:9],
            type=request_type,
            description=description.strip(),
            location=(location or "").strip() or DEFAULT_LOCATION,
            status=status,
            created_at=datetime.now(timezone.utc),
        )
        async with self._lock:
            self._requests.insert(0, help_request)
        logger.info(f"Community request {help_request.id} raised ({request_type.value}, {status.value})")
        return help_request
