# src/crawler/extract.py
"""
Field extraction for LVZ police ticker detail pages.

Each rule reads the parsed page on its own and returns a value (or None);
a missing element only empties that one field.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Optional

from bs4 import BeautifulSoup

from src.cleaning import clean_text
from src.crawler.dates import normalize_date
from src.crawler.fetch import own_text

LOGGER = logging.getLogger(__name__)

TITLE_SELECTOR = "h1.pda-entry-title.entry-title"
COPYRIGHT_SELECTOR = 'li:-soup-contains("©")'
ARTICLE_SELECTOR = "#articlecontent > p.pda-abody-p"
DATE_SELECTORS = ("span.dtstamp", 'meta[itemprop="datepublished" i]')

SNIPPET_WORDS = 20
ELLIPSIS = "..."

LOG_ELEMENT_FOUND = "element '%s' found with '%s' for article"
LOG_ELEMENT_NOT_FOUND = "element '%s' not found for article"


def extract_title(doc: BeautifulSoup) -> Optional[str]:
    elem = doc.select_one(TITLE_SELECTOR)
    title = None
    if elem is not None:
        LOGGER.debug(LOG_ELEMENT_FOUND, "title", TITLE_SELECTOR)
        title = own_text(elem)
    if not title:
        LOGGER.warning(LOG_ELEMENT_NOT_FOUND, "title")
    return title or None


def extract_copyright(doc: BeautifulSoup) -> Optional[str]:
    elem = doc.select_one(COPYRIGHT_SELECTOR)
    copyright = None
    if elem is not None:
        LOGGER.debug(LOG_ELEMENT_FOUND, "copyright", COPYRIGHT_SELECTOR)
        copyright = clean_text(elem.get_text())
    if not copyright:
        LOGGER.warning(LOG_ELEMENT_NOT_FOUND, "copyright")
    return copyright or None


def extract_article(doc: BeautifulSoup) -> str:
    """Body paragraphs in document order, one space between non-empty ones."""
    elements = doc.select(ARTICLE_SELECTOR)
    if elements:
        LOGGER.debug(LOG_ELEMENT_FOUND, "articlecontent", ARTICLE_SELECTOR)
    paragraphs = [clean_text(e.get_text()) for e in elements]
    article = " ".join(p for p in paragraphs if p)
    if not article:
        LOGGER.warning(LOG_ELEMENT_NOT_FOUND, "articlecontent")
    return article


def make_snippet(article: Optional[str], words: int = SNIPPET_WORDS) -> str:
    """First `words` tokens of the article plus an ellipsis; just the ellipsis for an empty article."""
    tokens = (article or "").split()
    return " ".join(tokens[:words]).strip() + ELLIPSIS


def extract_date_published(doc: BeautifulSoup) -> Optional[datetime]:
    """Try the timestamp span first, then the datePublished meta tag."""
    published = None
    for selector in DATE_SELECTORS:
        elem = doc.select_one(selector)
        if elem is not None:
            LOGGER.debug(LOG_ELEMENT_FOUND, "publishing date", selector)
            published = normalize_date(elem.get("content"))
            break
    if published is None:
        LOGGER.warning(LOG_ELEMENT_NOT_FOUND, "publishing date")
    return published


def extract_fields(doc: BeautifulSoup) -> Dict:
    """Run every rule; the result carries all fields of a PoliceTicker except id and url."""
    article = extract_article(doc)
    return {
        "title": extract_title(doc) or "",
        "article": article,
        "snippet": make_snippet(article),
        "copyright": extract_copyright(doc) or "",
        "date_published": extract_date_published(doc),
    }
