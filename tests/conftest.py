import json
import sys
from pathlib import Path

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


ARTICLE_HTML = """
<html>
<head>
  <meta itemprop="datePublished" content="2021-05-01T12:00:00+02:00">
</head>
<body>
  <h1 class="pda-entry-title entry-title">Einbruch in Connewitz <span class="kicker">Polizeiticker</span></h1>
  <div id="articlecontent">
    <p class="pda-abody-p">Leipzig.  Unbekannte sind in der Nacht
       in ein Geschäft eingebrochen.</p>
    <p class="pda-abody-p">   </p>
    <p class="pda-abody-p">Die Polizei ermittelt.</p>
    <div><p class="pda-abody-p">Nicht direkt unter dem Container.</p></div>
  </div>
  <ul>
    <li>Impressum</li>
    <li>© Leipziger Verlags- und Druckereigesellschaft mbH &amp; Co. KG</li>
  </ul>
</body>
</html>
"""


class FakeResponse:
    def __init__(self, text="", status_code=200, payload=None):
        self.text = text
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Maps URL -> FakeResponse or Exception; records every call."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        target = self.routes.get(url)
        if target is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(target, Exception):
            raise target
        return target


@pytest.fixture()
def article_html():
    return ARTICLE_HTML


@pytest.fixture()
def fake_session():
    return FakeSession()


@pytest.fixture()
def make_response():
    return FakeResponse
