"""FastAPI dependencies."""

from functools import lru_cache

from app.config import get_settings
from app.services.fetcher import NoticeFetcher
from app.services.notice_logger import StdlibNoticeLogger
from app.services.notices import NoticeService
from app.services.parser import NoticeParser


@lru_cache
def get_notice_service() -> NoticeService:
    """Build the notice service from settings; it holds no per-request state."""
    settings = get_settings()
    logger = StdlibNoticeLogger("app.notices")
    fetcher = NoticeFetcher(
        logger,
        base_url=settings.gazette_base_url,
        timeout=settings.gazette_timeout,
        verify_tls=settings.gazette_verify_tls,
    )
    return NoticeService(fetcher, NoticeParser(logger))
