from typing import Optional

from app.models.notice import NoticeListing
from app.services.fetcher import NoticeFetcher
from app.services.parser import NoticeParser


class NoticeService:
    """List one page of notices for a 0-based pager."""

    def __init__(self, fetcher: NoticeFetcher, parser: NoticeParser) -> None:
        self.fetcher = fetcher
        self.parser = parser

    def list_notices(self, page_number: int = 0) -> Optional[NoticeListing]:
        """Return the listing for *page_number*, or *None* if the feed could not be fetched.

        Pager pages count from 0; the feed counts from 1.
        """
        api_page = max(page_number, 0) + 1
        data = self.fetcher.fetch(api_page)
        if data is None:
            return None
        return self.parser.parse(data)
