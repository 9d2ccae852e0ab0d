import requests

from src.geocoding import NominatimAsker

SEARCH = "https://nominatim.example.org/search"

PAYLOAD = [
    {
        "place_id": 123,
        "licence": "Data © OpenStreetMap contributors, ODbL 1.0.",
        "osm_type": "way",
        "osm_id": 456,
        "boundingbox": ["51.33", "51.34", "12.37", "12.38"],
        "lat": "51.3397",
        "lon": "12.3811",
        "display_name": "Augustusplatz, Zentrum, Leipzig, Sachsen, Deutschland",
        "class": "highway",
        "type": "pedestrian",
        "importance": 0.52,
    }
]


def _asker(session, pauses):
    return NominatimAsker("https://nominatim.example.org/", user_agent="ua",
                          pause=5, session=session, sleep=pauses.append)


def test_resolve_parses_places(fake_session, make_response):
    fake_session.routes[SEARCH] = make_response(payload=PAYLOAD)
    places = _asker(fake_session, []).resolve("Augustusplatz, Leipzig")

    assert len(places) == 1
    p = places[0]
    assert p.latitude == 51.3397 and p.longitude == 12.3811
    assert p.display_name.startswith("Augustusplatz")
    assert p.category == "highway"
    _, kwargs = fake_session.calls[0]
    assert kwargs["params"] == {"q": "Augustusplatz, Leipzig", "format": "json"}


def test_resolve_failures_return_empty(fake_session, make_response):
    asker = _asker(fake_session, [])
    fake_session.routes[SEARCH] = make_response(status_code=500, payload=[])
    assert asker.resolve("x") == []
    fake_session.routes[SEARCH] = requests.ConnectionError("down")
    assert asker.resolve("x") == []
    fake_session.routes[SEARCH] = make_response(payload={"error": "bad"})
    assert asker.resolve("x") == []
    fake_session.routes[SEARCH] = make_response(payload=[{"display_name": "no coords"}])
    assert asker.resolve("x") == []


def test_execute_pauses_after_lookup(fake_session, make_response):
    pauses = []
    fake_session.routes[SEARCH] = make_response(payload=PAYLOAD)
    asker = _asker(fake_session, pauses)
    try:
        places = asker.execute("Augustusplatz, Leipzig").result(timeout=10)
    finally:
        asker.shutdown()
    assert len(places) == 1
    assert pauses == [5]
