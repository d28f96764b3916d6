import asyncio

import pytest
from aiohttp.client_exceptions import ClientConnectionError

from nethermind.dao_decoder.exceptions import ResolverHostError, ResolverRateLimitError
from nethermind.dao_decoder.resolver import http

HOST = "https://api.example.org/v1/"


class FakeResponse:
    def __init__(self, status: int, body=None):
        self.status = status
        self.body = body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def json(self):
        return self.body

    async def text(self):
        return str(self.body)


class FakeSession:
    """Stands in for aiohttp.ClientSession.  ``outcome`` is a FakeResponse or an exception to raise on GET"""

    outcome: FakeResponse | BaseException
    requests: list[tuple[str, dict]] = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def get(self, url, params=None):
        FakeSession.requests.append((url, params))
        if isinstance(FakeSession.outcome, BaseException):
            raise FakeSession.outcome
        return FakeSession.outcome


@pytest.fixture(name="session")
def fixture_session(monkeypatch):
    FakeSession.requests = []
    monkeypatch.setattr(http.aiohttp, "ClientSession", FakeSession)
    return FakeSession


def test_get_json(session):
    session.outcome = FakeResponse(200, {"results": []})

    assert asyncio.run(http.get_json(HOST, params={"hex_signature": "0xb147f40c"})) == {"results": []}
    assert session.requests == [(HOST, {"hex_signature": "0xb147f40c"})]


def test_rate_limit_status(session):
    session.outcome = FakeResponse(429)

    with pytest.raises(ResolverRateLimitError):
        asyncio.run(http.get_json(HOST, params={}))


@pytest.mark.parametrize("status", [404, 502])
def test_error_status(session, status):
    session.outcome = FakeResponse(status)

    with pytest.raises(ResolverHostError, match=str(status)):
        asyncio.run(http.get_json(HOST, params={}))


@pytest.mark.parametrize("error", [asyncio.TimeoutError(), TimeoutError(), ClientConnectionError("refused")])
def test_transport_errors_become_host_errors(session, error):
    session.outcome = error

    with pytest.raises(ResolverHostError):
        asyncio.run(http.get_json(HOST, params={}))
