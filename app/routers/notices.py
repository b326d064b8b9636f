import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import get_notice_service
from app.models.response import NoticeListResponse
from app.services.notices import NoticeService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notices"])

UNAVAILABLE_DETAIL = "Unable to fetch notices at this time. Please try again later."


@router.get("/notices", response_model=NoticeListResponse, summary="List Gazette notices")
def list_notices(
    page: int = Query(default=0, ge=0, description="0-based page number."),
    service: NoticeService = Depends(get_notice_service),
) -> NoticeListResponse:
    """Return one page of Gazette notices with pagination metadata."""
    logger.info("Notice listing requested", extra={"page": page})

    listing = service.list_notices(page)
    if listing is None:
        raise HTTPException(status_code=503, detail=UNAVAILABLE_DETAIL)

    return NoticeListResponse(notices=list(listing.notices), pagination=listing.pagination)
