"""
Shared fixtures for house photo tests.

HTTP is faked at the session level with real requests.Response objects so
streaming, raise_for_status and json() behave as they do in production.
"""
import io
import json
import threading
from urllib.parse import parse_qs, urlparse

import pytest
import requests


def build_response(url, status_code=200, content=None, json_body=None):
    """Build a requests.Response without touching the network."""
    response = requests.Response()
    response.url = url
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Error"
    if json_body is not None:
        content = json.dumps(json_body).encode("utf-8")
    response.raw = io.BytesIO(content or b"")
    return response


def house_payload(house_id, address=None, extension="jpg"):
    """One house entry as the API serves it."""
    return {
        "id": house_id,
        "address": address or f"{house_id} Main St.",
        "homeowner": f"Owner {house_id}",
        "price": 100000 + house_id,
        "photoURL": f"http://photos.test/house-{house_id}.{extension}",
    }


class FakeHousesSession:
    """
    Thread-safe stand-in for requests.Session.

    Page URLs (anything with ?page=N) are answered from `pages`; every
    other URL is answered from `photos`. Unknown photo URLs raise a
    ConnectionError.
    """

    def __init__(self, pages=None, photos=None, page_status=200):
        self.pages = pages or {}
        self.photos = photos or {}
        self.page_status = page_status
        self.calls = []
        self._lock = threading.Lock()

    def get(self, url, timeout=None, stream=False, **kwargs):
        with self._lock:
            self.calls.append(url)

        query = parse_qs(urlparse(url).query)
        if "page" in query:
            if self.page_status != 200:
                return build_response(url, status_code=self.page_status)
            page = int(query["page"][0])
            return build_response(url, json_body={"houses": self.pages.get(page, [])})

        if url not in self.photos:
            raise requests.ConnectionError(f"connection refused: {url}")
        return build_response(url, content=self.photos[url])

    def page_calls(self):
        return [c for c in self.calls if "?page=" in c]


@pytest.fixture
def make_response():
    """Factory for fake responses."""
    return build_response


@pytest.fixture
def two_page_session():
    """Two pages of three houses each, every photo available."""
    pages = {
        1: [house_payload(i) for i in (1, 2, 3)],
        2: [house_payload(i, extension="png") for i in (4, 5, 6)],
    }
    photos = {}
    for houses in pages.values():
        for house in houses:
            photos[house["photoURL"]] = f"image-bytes-{house['id']}".encode("utf-8") * 100
    return FakeHousesSession(pages=pages, photos=photos)


@pytest.fixture
def houses_payload():
    """Factory for API house entries."""
    return house_payload


@pytest.fixture
def fake_session_cls():
    """The FakeHousesSession class, for tests that build their own routes."""
    return FakeHousesSession
