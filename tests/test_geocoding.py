import asyncio

import httpx

from gamebuddy.modules.profiles import geocoding


class _Response:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            request = httpx.Request("GET", "https://geocoder.test")
            raise httpx.HTTPStatusError("error", request=request, response=httpx.Response(self.status_code))

    def json(self):
        return self.payload


def test_prefers_locality(monkeypatch):
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen.update(params)
        return _Response({"locality": "Hyde Park", "city": "Austin", "principalSubdivision": "Texas"})

    monkeypatch.setattr(geocoding.httpx, "get", fake_get)

    assert geocoding.resolve_location_name(30.3, -97.7) == "Hyde Park"
    assert seen["latitude"] == 30.3
    assert seen["localityLanguage"] == "en"


def test_falls_back_to_city_then_region_then_unknown(monkeypatch):
    payloads = iter([
        {"city": "Austin", "principalSubdivision": "Texas"},
        {"principalSubdivision": "Texas"},
        {},
    ])
    monkeypatch.setattr(geocoding.httpx, "get", lambda *args, **kwargs: _Response(next(payloads)))

    assert geocoding.resolve_location_name(0, 0) == "Austin"
    assert geocoding.resolve_location_name(0, 0) == "Texas"
    assert geocoding.resolve_location_name(0, 0) == "Unknown"


def test_unreachable_geocoder_returns_none(monkeypatch):
    def fake_get(*args, **kwargs):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(geocoding.httpx, "get", fake_get)

    assert geocoding.resolve_location_name(30.3, -97.7) is None


def test_http_error_returns_none(monkeypatch):
    monkeypatch.setattr(geocoding.httpx, "get", lambda *args, **kwargs: _Response({}, status_code=503))
    assert geocoding.resolve_location_name(30.3, -97.7) is None


def test_geocode_route(client, monkeypatch):
    monkeypatch.setattr(geocoding.httpx, "get", lambda *args, **kwargs: _Response({"city": "Denver"}))

    response = client.get("/api/v1/profiles/geocode", params={"latitude": 39.7, "longitude": -104.9})

    assert response.status_code == 200
    assert response.json() == {"latitude": 39.7, "longitude": -104.9, "location": "Denver"}


def test_geocode_route_validates_bounds(client):
    response = client.get("/api/v1/profiles/geocode", params={"latitude": 95, "longitude": 0})
    assert response.status_code == 422


def test_geocode_route_calls_geocoder_outside_the_event_loop(client, monkeypatch):
    loops_seen = []

    def fake_get(*args, **kwargs):
        try:
            loops_seen.append(asyncio.get_running_loop())
        except RuntimeError:
            loops_seen.append(None)
        return _Response({"city": "Denver"})

    monkeypatch.setattr(geocoding.httpx, "get", fake_get)

    response = client.get("/api/v1/profiles/geocode", params={"latitude": 39.7, "longitude": -104.9})

    assert response.status_code == 200
    assert loops_seen == [None]
