from __future__ import annotations

import logging
import time
from typing import Callable, Optional, TypeVar

import requests

from .config import DEFAULT_USER_AGENT


logger = logging.getLogger(__name__)

T = TypeVar("T")


class NetworkError(Exception):
    """Raised when a page cannot be fetched (connection, timeout or broken transfer)."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"{url}: {cause}")
        self.url = url
        self.cause = cause


def create_session(user_agent: Optional[str] = None) -> requests.Session:
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": user_agent or DEFAULT_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "cs-CZ,cs;q=0.9,en-US;q=0.8,en;q=0.7",
        }
    )
    return session


def _decode(response: requests.Response) -> str:
    # Without a declared charset requests assumes ISO-8859-1; the storefront serves UTF-8.
    content_type = response.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        return response.content.decode("utf-8", errors="replace")
    return response.text


def fetch_html(
    url: str,
    session: Optional[requests.Session] = None,
    timeout_seconds: float = 10,
) -> tuple[str, str]:
    """
    Fetch HTML document. Returns (final_url, html_text).
    Raises NetworkError for transport failures. Error statuses are logged and
    their body is returned like any other page.
    """
    sess = session or create_session()
    try:
        response = sess.get(url, timeout=timeout_seconds, allow_redirects=True)
    except requests.RequestException as exc:
        raise NetworkError(url, exc) from exc
    if not 200 <= response.status_code < 300:
        logger.warning("%s answered HTTP %d, parsing the body anyway", url, response.status_code)
    return response.url, _decode(response)


class RetryPolicy:
    """Fixed-delay bounded retry for calls that may raise NetworkError."""

    def __init__(
        self,
        max_attempts: int = 3,
        delay_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.delay_seconds = delay_seconds
        self.sleep = sleep

    def call(self, fn: Callable[..., T], *args, **kwargs) -> T:
        attempt = 1
        while True:
            try:
                return fn(*args, **kwargs)
            except NetworkError as exc:
                logger.warning("attempt %d/%d failed: %s", attempt, self.max_attempts, exc)
                if attempt >= self.max_attempts:
                    raise
            self.sleep(self.delay_seconds)
            attempt += 1


def fetch_with_retry(
    url: str,
    session: requests.Session,
    policy: RetryPolicy,
    timeout_seconds: float = 10,
) -> str:
    _, html = policy.call(fetch_html, url, session=session, timeout_seconds=timeout_seconds)
    return html
