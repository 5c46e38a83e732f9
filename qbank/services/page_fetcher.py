import logging
import threading
from typing import List, Optional

import requests

from qbank import settings
from qbank.models import UrlStyle

logger = logging.getLogger("scrape")


class PageFetcher:
    """
    Best-effort GET of one question page.

    A failed fetch is logged and reported as None so the batch can move on
    to the next question. Each worker thread gets its own requests.Session
    unless one is passed in.
    """

    def __init__(
        self,
        base_url: str,
        url_style: UrlStyle = UrlStyle.CONCAT,
        retries: int = 0,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url
        self.url_style = url_style
        self.retries = retries
        self.timeout = timeout if timeout is not None else settings.scraper_timeout()
        self._shared_session = session
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._sessions_lock = threading.Lock()
        if session is not None:
            self._prepare(session)

    @staticmethod
    def _prepare(session: requests.Session) -> requests.Session:
        session.headers.update({
            "User-Agent": settings.SCRAPER_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        })
        return session

    @property
    def requests_session(self) -> requests.Session:
        if self._shared_session is not None:
            return self._shared_session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = self._prepare(requests.Session())
            with self._sessions_lock:
                self._sessions.append(session)
        return session

    def url_for(self, question_number: int) -> str:
        if self.url_style == UrlStyle.PATH:
            return f"{self.base_url.rstrip('/')}/{question_number}"
        return f"{self.base_url}{question_number}"

    def fetch(self, question_number: int) -> Optional[str]:
        url = self.url_for(question_number)
        for attempt in range(1, self.retries + 2):
            try:
                resp = self.requests_session.get(url, timeout=self.timeout)
                resp.raise_for_status()
                return resp.text
            except requests.exceptions.RequestException as e:
                if attempt <= self.retries:
                    logger.warning(
                        f"[fetch] question {question_number} failed (attempt {attempt}/{self.retries + 1}): {e}"
                    )
                    continue
                logger.error(f"[fetch] Failed to fetch question {question_number}: {e}")
        return None

    def close(self):
        if self._shared_session is not None:
            self._shared_session.close()
        with self._sessions_lock:
            for session in self._sessions:
                session.close()
            self._sessions.clear()
        self._local = threading.local()
