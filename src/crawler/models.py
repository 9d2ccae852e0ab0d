# src/crawler/models.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Dict, Optional


@dataclass(frozen=True)
class PoliceTicker:
    """One police ticker article as extracted from its detail page."""
    id: str
    url: str
    title: str = ""
    article: str = ""
    snippet: str = "..."
    copyright: str = ""
    date_published: Optional[datetime] = None

    def to_dict(self) -> Dict:
        row = asdict(self)
        row["date_published"] = self.date_published.isoformat() if self.date_published else None
        return row
