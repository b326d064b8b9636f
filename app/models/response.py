from typing import List

from pydantic import BaseModel

from app.models.notice import NoticeRecord, PaginationInfo


class NoticeListResponse(BaseModel):
    notices: List[NoticeRecord]
    pagination: PaginationInfo
