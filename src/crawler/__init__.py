"""Detail page crawling and field extraction for the LVZ police ticker."""

from .config import CrawlerConfig, ConfigError, load_config
from .dates import normalize_date
from .detail import DetailCrawler
from .extract import extract_fields, make_snippet
from .fetch import FetchResult, PageFetcher
from .models import PoliceTicker

__all__ = [
    "CrawlerConfig",
    "ConfigError",
    "load_config",
    "normalize_date",
    "DetailCrawler",
    "extract_fields",
    "make_snippet",
    "FetchResult",
    "PageFetcher",
    "PoliceTicker",
]
