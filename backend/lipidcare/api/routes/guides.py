"""Care guide endpoint."""
from __future__ import annotations

from fastapi import APIRouter

from lipidcare.api.schemas.progress import CareGuidePayload, CareGuidesResponse
from lipidcare.domain.guides import CARE_GUIDES, EXPERT_NOTE

router = APIRouter()


@router.get("/guides", response_model=CareGuidesResponse, tags=["guides"])
def list_guides() -> CareGuidesResponse:
    return CareGuidesResponse(
        guides=[
            CareGuidePayload(icon=guide.icon, title=guide.title, description=guide.description)
            for guide in CARE_GUIDES
        ],
        expert_note=EXPERT_NOTE,
    )
