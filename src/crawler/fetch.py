# src/crawler/fetch.py
"""Download one detail page and parse it into a BeautifulSoup tree."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from bs4 import BeautifulSoup, NavigableString, Tag

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    doc: Optional[BeautifulSoup]
    status: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.doc is not None


def own_text(tag: Tag) -> str:
    """Text of the element's direct text children only (nested tags skipped)."""
    parts = [str(c) for c in tag.children if isinstance(c, NavigableString)]
    return " ".join("".join(parts).split())


class PageFetcher:
    """
    Single GET per URL, no retries. Every network/HTTP/parse problem comes back
    as a failed FetchResult so a batch never sees an exception.
    """

    def __init__(self, user_agent: str, timeout: float, session: Optional[requests.Session] = None):
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, url: str) -> FetchResult:
        if not url:
            return FetchResult(doc=None, status="error", error="empty_url")
        try:
            resp = self.session.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
                allow_redirects=True,
            )
            if resp.status_code >= 400:
                LOGGER.error("fetch %s failed with HTTP %s", url, resp.status_code)
                return FetchResult(doc=None, status=f"http_{resp.status_code}", error=f"http_{resp.status_code}")
            html = resp.text
            if not html or not html.strip():
                LOGGER.error("fetch %s returned an empty body", url)
                return FetchResult(doc=None, status="empty", error="empty_html")
            doc = BeautifulSoup(html, "lxml")
        except requests.RequestException as e:
            LOGGER.exception("fetch %s failed: %s", url, e)
            return FetchResult(doc=None, status="error", error=str(e))
        except ValueError as e:
            LOGGER.exception("could not parse %s: %s", url, e)
            return FetchResult(doc=None, status="parse_error", error=str(e))
        return FetchResult(doc=doc, status="ok")
