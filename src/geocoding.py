# src/geocoding.py
"""Resolve free-text addresses to coordinates via the Nominatim search API."""
from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

LOGGER = logging.getLogger(__name__)


class NominatimPlace(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    place_id: Optional[int] = None
    licence: Optional[str] = None
    osm_type: Optional[str] = None
    osm_id: Optional[int] = None
    lat: str
    lon: str
    display_name: str = ""
    category: Optional[str] = Field(None, alias="class")
    type: Optional[str] = None
    importance: Optional[float] = None
    boundingbox: Optional[List[str]] = None

    @property
    def latitude(self) -> float:
        return float(self.lat)

    @property
    def longitude(self) -> float:
        return float(self.lon)


class NominatimAsker:
    """
    One blocking search per address. execute() runs it on a worker thread and
    keeps the worker busy for `pause` seconds afterwards (Nominatim usage policy).
    """

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        user_agent: str = "police-ticker-crawler",
        timeout: float = 10.0,
        pause: float = 5.0,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.pause = pause
        self.session = session or requests.Session()
        self._sleep = sleep
        self._own_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(thread_name_prefix="nominatim")

    def shutdown(self, wait: bool = True) -> None:
        if self._own_executor:
            self._executor.shutdown(wait=wait)

    def execute(self, address: str) -> Future[List[NominatimPlace]]:
        return self._executor.submit(self._resolve_and_wait, address)

    def _resolve_and_wait(self, address: str) -> List[NominatimPlace]:
        places = self.resolve(address)
        try:
            self._sleep(self.pause)
        except InterruptedError as e:
            LOGGER.error("geocode pause interrupted: %s", e, exc_info=True)
        LOGGER.info("finished getting coords")
        return places

    def resolve(self, address: str) -> List[NominatimPlace]:
        """Places matching `address`, best match first; [] on any failure."""
        url = f"{self.base_url}/search"
        LOGGER.debug("url %s q=%s", url, address)
        try:
            resp = self.session.get(
                url,
                params={"q": address, "format": "json"},
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
            if not isinstance(payload, list):
                LOGGER.warning("unexpected geocode payload for %r: %r", address, payload)
                return []
            places = [NominatimPlace.model_validate(p) for p in payload]
        except (requests.RequestException, ValueError, ValidationError) as e:
            LOGGER.error("geocoding %r failed: %s", address, e)
            return []
        LOGGER.debug("places %s", places)
        return places
