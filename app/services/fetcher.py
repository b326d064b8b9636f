from typing import Any, Dict, Optional

import httpx

from app.config import GAZETTE_NOTICES_URL
from app.services.notice_logger import NoticeLogger

TIMEOUT = 30  # seconds
PAGE_PARAM = "results-page"


class NoticeFetcher:
    """Fetch one page of the Gazette notices feed.

    ``verify_tls`` is deliberately explicit: the Gazette endpoint is trusted
    without certificate validation in the default deployment, and switching
    that on or off should be a visible configuration decision.

    An ``httpx.Client`` may be injected (tests use one backed by
    ``httpx.MockTransport``); otherwise a client is opened per call. An
    injected client keeps its own ``verify`` setting, so
    ``verify_tls`` only applies to the clients this class opens itself.
    """

    def __init__(
        self,
        logger: NoticeLogger,
        *,
        base_url: str = GAZETTE_NOTICES_URL,
        timeout: float = TIMEOUT,
        verify_tls: bool = False,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._logger = logger
        self.base_url = base_url
        self.timeout = timeout
        self.verify_tls = verify_tls
        self._client = client

        if client is None and not verify_tls:
            logger.log(
                "warning",
                "TLS certificate verification is disabled for {url}",
                {"url": base_url},
            )

    def fetch(self, page: int) -> Optional[Dict[str, Any]]:
        """Return the decoded JSON for *page* (1-based), or *None* on failure.

        Failures are logged by cause (status code, transport error, anything
        else) and never raised.
        """
        if page < 1:
            raise ValueError(f"Page numbers start at 1, got {page}.")

        try:
            response = self._get(page)

            if response.status_code != 200:
                self._logger.log(
                    "error",
                    "API request failed with status code: {code}",
                    {"code": response.status_code},
                )
                return None

            data = response.json()
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return data
        except httpx.RequestError as exc:
            self._logger.log("error", "HTTP request failed: {message}", {"message": str(exc)})
        except Exception as exc:
            self._logger.log("error", "Unexpected error: {message}", {"message": str(exc)})

        return None

    def _get(self, page: int) -> httpx.Response:
        params = {PAGE_PARAM: page}
        if self._client is not None:
            return self._client.get(self.base_url, params=params, timeout=self.timeout)

        with httpx.Client(timeout=self.timeout, verify=self.verify_tls) as client:
            return client.get(self.base_url, params=params)
