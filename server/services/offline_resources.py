"""Guides that stay useful without a network connection."""
from typing import List, Optional

from models.resources import OfflineResource

OFFLINE_RESOURCES: List[OfflineResource] = [
    OfflineResource(
        id="1",
        title="First Aid Basic Guide",
        size="1.2 MB",
        content="OFFLINE GUIDE: First Aid\n\n1. Cuts: Clean with water.\n2. Burns: Cool water.",
    ),
    OfflineResource(
        id="2",
        title="Emergency Contacts",
        size="0.1 MB",
        content="OFFLINE GUIDE: Emergency\n\nAmbulance: 102",
    ),
]


def list_resources() -> List[OfflineResource]:
    return list(OFFLINE_RESOURCES)


def get_resource(resource_id: str) -> Optional[OfflineResource]:
    return next((r for r in OFFLINE_RESOURCES if r.id == resource_id), None)
