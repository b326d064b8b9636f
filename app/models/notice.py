from typing import Tuple

from pydantic import BaseModel, ConfigDict


class NoticeRecord(BaseModel):
    """One Gazette notice, normalised for display."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str = "Untitled"
    content: str = ""  # HTML limited to p / br / strong / em
    published: str = ""  # "3 June 2024", or the raw value when unparseable
    url: str = "#"


class PaginationInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_page: int = 1
    total_results: int = 0
    page_size: int = 10
    total_pages: int = 0


class NoticeListing(BaseModel):
    """Parsed result for a single page of the notices feed."""

    model_config = ConfigDict(frozen=True)

    notices: Tuple[NoticeRecord, ...] = ()
    pagination: PaginationInfo = PaginationInfo()
