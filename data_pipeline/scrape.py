# data_pipeline/scrape.py
"""
Crawl LVZ police ticker detail pages and write the records as JSONL.

- Input: detail page URLs via --url (repeatable) and/or --urls-file (one per line).
- Extraction: title, article, snippet, copyright, published date; id = sha256(url).
- Politeness: sequential fetches with a fixed delay (config/crawler.yml).
- Output: append JSONL (or stdout with '-'). No database.

Usage:
    python -m data_pipeline.scrape \
        --urls-file data/raw/detail_urls.txt \
        --out-jsonl data/raw/police_ticker.jsonl

Quick tests:
    python -m data_pipeline.scrape --url https://www.lvz.de/... --out-jsonl - -v
    python -m data_pipeline.scrape --geocode "Augustusplatz, Leipzig"
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import pathlib
import sys
from typing import Dict, Iterable, List

# allow `from src.crawler import ...` when run as a script
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from dotenv import load_dotenv

from src.crawler import ConfigError, DetailCrawler, PageFetcher, load_config
from src.geocoding import NominatimAsker

LOGGER = logging.getLogger("data_pipeline.scrape")


# ----------------------------- Input / output ------------------------------ #

def read_urls(path: str) -> List[str]:
    """One URL per line; blank lines and '#' comments are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        return [ln.strip() for ln in f if ln.strip() and not ln.lstrip().startswith("#")]


def write_jsonl(path: str, rows: Iterable[Dict]) -> None:
    """
    Append rows as JSON Lines. If path == "-", write to stdout (handy for piping).
    """
    if path == "-":
        for r in rows:
            print(json.dumps(r, ensure_ascii=False))
        return

    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        for r in rows:
            f.write(json.dumps(r, ensure_ascii=False) + "\n")


# ----------------------------- CLI / Orchestration ------------------------- #

def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Crawl LVZ police ticker detail pages")
    ap.add_argument("--config", default=None,
                    help="YAML settings (default: config/crawler.yml if present)")
    ap.add_argument("--url", action="append", default=[],
                    help="Detail page URL (repeatable)")
    ap.add_argument("--urls-file", help="File with one detail page URL per line")
    ap.add_argument("--out-jsonl", default="-",
                    help="Append JSON Lines here (use '-' for stdout)")
    ap.add_argument("--geocode", metavar="ADDRESS",
                    help="Resolve ADDRESS via Nominatim and print the matches instead of crawling")
    ap.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    load_dotenv()

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        LOGGER.error("%s", e)
        return 2

    if args.geocode:
        asker = NominatimAsker(cfg.nominatim_url, user_agent=cfg.user_agent,
                               timeout=cfg.request_timeout, pause=cfg.geocode_pause)
        try:
            places = asker.execute(args.geocode).result()
        finally:
            asker.shutdown()
        write_jsonl("-", [{"latitude": p.latitude, "longitude": p.longitude,
                           "display_name": p.display_name} for p in places])
        return 0

    urls = list(args.url)
    if args.urls_file:
        urls.extend(read_urls(args.urls_file))
    if not urls:
        LOGGER.error("No URLs given. Provide --url or --urls-file.")
        return 2

    fetcher = PageFetcher(cfg.user_agent, cfg.request_timeout)
    with DetailCrawler(fetcher, delay=cfg.delay) as crawler:
        tickers = crawler.execute(urls).result()

    if not tickers:
        LOGGER.info("No records crawled.")
        return 0

    write_jsonl(args.out_jsonl, (t.to_dict() for t in tickers))
    dest = "stdout" if args.out_jsonl == "-" else args.out_jsonl
    LOGGER.info("Wrote %s records → %s", len(tickers), dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
