import aiohttp
import pytest

from config import ShopifyConfig


class FakeResponse:
    def __init__(self, status: int = 200, body: dict = None, reason: str = "OK"):
        self.status = status
        self.reason = reason
        self._body = body if body is not None else {}

    async def json(self):
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession; routes each POST to a handler."""

    def __init__(self, handler):
        self._handler = handler
        self.requests: list[dict] = []
        self.closed = False

    def post(self, url, *, headers=None, json=None, timeout=None):
        self.requests.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        return self._handler(json)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True
        return False


def mutation_name(payload: dict) -> str:
    query = payload["query"]
    if "metaobjectDefinitionCreate" in query:
        return "metaobjectDefinitionCreate"
    return "metafieldDefinitionCreate"


def user_error_response(payload: dict, message: str, code: str = None) -> FakeResponse:
    error = {"field": ["definition"], "message": message}
    if code is not None:
        error["code"] = code
    return FakeResponse(body={"data": {mutation_name(payload): {"userErrors": [error]}}})


def created_response(payload: dict, gid: str = "gid://shopify/Definition/1") -> FakeResponse:
    name = mutation_name(payload)
    created_key = "metaobjectDefinition" if name == "metaobjectDefinitionCreate" else "createdDefinition"
    return FakeResponse(body={"data": {name: {created_key: {"id": gid}, "userErrors": []}}})


@pytest.fixture
def shop_config():
    return ShopifyConfig(store="getqflex", access_token="shpat_test", api_version="2024-07")


@pytest.fixture
def fake_shopify(monkeypatch):
    """
    Replace aiohttp.ClientSession with a FakeSession.

    Call the returned installer with a handler(payload) -> FakeResponse;
    it returns a list that collects every session created.
    """
    sessions: list[FakeSession] = []

    def install(handler):
        def factory(*args, **kwargs):
            session = FakeSession(handler)
            sessions.append(session)
            return session

        monkeypatch.setattr(aiohttp, "ClientSession", factory)
        return sessions

    return install
