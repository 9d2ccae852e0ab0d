# src/crawler/detail.py
"""
Crawl police ticker detail pages into PoliceTicker records.

- Sequential: one URL at a time, in input order.
- Throttled: fixed pause before every fetch except the first, to avoid getting banned.
- Forgiving: a failed fetch drops that URL, field misses only empty the field.
- Async: execute() hands the whole batch to a worker thread and returns a Future.
"""
from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional

from src.cleaning import url_hash
from src.crawler.extract import extract_fields
from src.crawler.fetch import PageFetcher
from src.crawler.models import PoliceTicker

LOGGER = logging.getLogger(__name__)

WAIT_BEFORE_EACH_ACCESS = 0.05  # seconds


class DetailCrawler:
    def __init__(
        self,
        fetcher: PageFetcher,
        delay: float = WAIT_BEFORE_EACH_ACCESS,
        sleep: Callable[[float], None] = time.sleep,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self.fetcher = fetcher
        self.delay = delay
        self._sleep = sleep
        self._own_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(thread_name_prefix="detail-crawler")

    def __enter__(self) -> "DetailCrawler":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()

    def shutdown(self, wait: bool = True) -> None:
        if self._own_executor:
            self._executor.shutdown(wait=wait)

    def execute(self, urls: Iterable[str]) -> Future[List[PoliceTicker]]:
        """Submit a batch; the Future resolves to the records of every page fetched successfully."""
        return self._executor.submit(self.crawl_all, list(urls))

    def crawl_all(self, urls: Iterable[str]) -> List[PoliceTicker]:
        start = time.perf_counter()
        LOGGER.info("Start crawling detail pages")
        tickers: List[PoliceTicker] = []
        for i, url in enumerate(urls):
            if i > 0:
                self._pause()
            ticker = self.crawl(url)
            if ticker is not None:
                tickers.append(ticker)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        LOGGER.info("Finished crawling %s detail pages in %.0f ms", len(tickers), elapsed_ms)
        return tickers

    def crawl(self, url: str) -> Optional[PoliceTicker]:
        """Fetch and extract one article; None when the page could not be fetched."""
        result = self.fetcher.fetch(url)
        if not result.ok:
            LOGGER.warning("Skipping %s (%s)", url, result.status)
            return None
        ticker = PoliceTicker(id=url_hash(url), url=url, **extract_fields(result.doc))
        LOGGER.info("Crawled %s", url)
        LOGGER.debug("Extracted %s", ticker)
        return ticker

    def _pause(self) -> None:
        try:
            self._sleep(self.delay)
        except InterruptedError as e:
            LOGGER.error("pause between requests interrupted: %s", e, exc_info=True)
