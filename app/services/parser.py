"""Turn a raw Gazette notices response into display-ready records."""

from typing import Any, Mapping

from dateutil import parser as dateparser

from app.models.notice import NoticeListing, NoticeRecord, PaginationInfo
from app.services.notice_logger import NoticeLogger
from app.services.sanitizer import sanitize_content

DEFAULT_CURRENT_PAGE = 1
DEFAULT_TOTAL_RESULTS = 0
DEFAULT_PAGE_SIZE = 10

UNTITLED = "Untitled"
NO_URL = "#"

# Pagination keys as emitted by the feed
_PAGE_NUMBER_KEY = "f:page-number"
_TOTAL_KEY = "f:total"
_PAGE_SIZE_KEY = "f:page-size"


def _text_field(entry: Mapping[str, Any], key: str, default: str) -> str:
    value = entry.get(key)
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)


def _int_field(data: Mapping[str, Any], key: str, default: int) -> int:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return default


def extract_notice_url(entry: Mapping[str, Any]) -> str:
    """Pick the notice link from *entry*'s ``link`` list.

    First link without ``@rel`` or with ``@rel == "self"`` wins; failing that,
    the first link in the list; failing that, ``"#"``.
    """
    links = entry.get("link")
    if isinstance(links, Mapping):
        links = [links]
    if not isinstance(links, list) or not links:
        return NO_URL

    for link in links:
        if isinstance(link, Mapping) and link.get("@href"):
            rel = link.get("@rel")
            if rel is None or rel == "self":
                return str(link["@href"])

    first = links[0]
    if isinstance(first, Mapping) and first.get("@href"):
        return str(first["@href"])
    return NO_URL


def compute_total_pages(total_results: int, page_size: int) -> int:
    # Integer ceiling division; exact for totals beyond float range
    return -(-total_results // page_size)


class NoticeParser:
    def __init__(self, logger: NoticeLogger) -> None:
        self._logger = logger

    def parse(self, data: Mapping[str, Any]) -> NoticeListing:
        """Parse one feed page into notices plus pagination.

        Missing or malformed fields fall back to their defaults; this never
        raises for a mapping input.
        """
        entries = data.get("entry")
        notices = []
        if isinstance(entries, list):
            notices = [self.parse_entry(entry) for entry in entries]

        return NoticeListing(notices=tuple(notices), pagination=self.parse_pagination(data))

    def parse_entry(self, entry: Any) -> NoticeRecord:
        if not isinstance(entry, Mapping):
            entry = {}

        return NoticeRecord(
            id=_text_field(entry, "id", ""),
            title=_text_field(entry, "title", UNTITLED),
            content=sanitize_content(_text_field(entry, "content", "")),
            published=self.format_date(_text_field(entry, "published", "")),
            url=extract_notice_url(entry),
        )

    def parse_pagination(self, data: Mapping[str, Any]) -> PaginationInfo:
        current_page = _int_field(data, _PAGE_NUMBER_KEY, DEFAULT_CURRENT_PAGE)
        total_results = _int_field(data, _TOTAL_KEY, DEFAULT_TOTAL_RESULTS)
        page_size = _int_field(data, _PAGE_SIZE_KEY, DEFAULT_PAGE_SIZE)
        if page_size <= 0:
            page_size = DEFAULT_PAGE_SIZE

        return PaginationInfo(
            current_page=current_page,
            total_results=total_results,
            page_size=page_size,
            total_pages=compute_total_pages(total_results, page_size),
        )

    def format_date(self, value: str) -> str:
        """Render *value* as e.g. ``"3 June 2024"``; return it unchanged if unparseable."""
        if not value:
            return ""

        try:
            parsed = dateparser.parse(value)
        except (ValueError, OverflowError):
            self._logger.log("warning", "Failed to parse date: {date}", {"date": value})
            return value

        return f"{parsed.day} {parsed.strftime('%B')} {parsed.year}"
