# src/cleaning.py
from __future__ import annotations
import hashlib, re
from typing import Optional

# ---------- Text cleanup ----------
_ws_collapse = re.compile(r"\s+")

def clean_text(t: Optional[str]) -> str:
    """Collapse runs of whitespace (incl. nbsp and newlines) into single spaces and trim."""
    if not t:
        return ""
    return _ws_collapse.sub(" ", t.replace("\xa0", " ")).strip()

# ---------- Hashing ----------
def url_hash(url: str) -> str:
    """Stable record id for a source URL; same URL always gives the same id."""
    return hashlib.sha256((url or "").encode("utf-8")).hexdigest()
