from src.cleaning import clean_text, url_hash

def test_url_hash_is_deterministic():
    u = "https://www.lvz.de/Leipzig/Polizeiticker/Polizeiticker-Leipzig/Einbruch-in-Connewitz"
    assert url_hash(u) == url_hash(u)
    assert len(url_hash(u)) == 64

def test_url_hash_differs_per_url():
    assert url_hash("https://example.com/a") != url_hash("https://example.com/b")

def test_clean_text_collapses_whitespace():
    raw = "  Leipzig.\n\n  Unbekannte\tsind\xa0eingebrochen.  "
    assert clean_text(raw) == "Leipzig. Unbekannte sind eingebrochen."
    assert clean_text(None) == ""
    assert clean_text("   ") == ""
