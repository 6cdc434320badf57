import json
from types import SimpleNamespace

import pytest

from merchant_sandbox.api import reset_shared_client
from merchant_sandbox.core import DemoEnvironment, MerchantConfig

BASE_URL = "https://merchant.test"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, *, content=None):
        self.status_code = status_code
        if content is None:
            content = json.dumps(payload).encode("utf-8")
        self.content = content

    @property
    def text(self):
        return self.content.decode("utf-8", errors="replace")


class FakeSession:
    """Stands in for ``requests.Session``; replays queued responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append(SimpleNamespace(method=method, url=url, **kwargs))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def json_body(self, index=0):
        return json.loads(self.calls[index].data)


@pytest.fixture
def config():
    return MerchantConfig(
        environment=DemoEnvironment.SANDBOX,
        base_url=BASE_URL,
        token_base_url=BASE_URL,
    )


@pytest.fixture
def order_response():
    return FakeResponse(200, {"id": "ORDER-1", "status": "CREATED", "intent": "CAPTURE"})


@pytest.fixture
def token_response():
    return FakeResponse(
        200,
        {"access_token": "A21AA-token", "token_type": "Bearer", "expires_in": 32400},
    )


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for key in (
        "MERCHANT_ENVIRONMENT",
        "MERCHANT_BASE_URL",
        "MERCHANT_TOKEN_BASE_URL",
        "MERCHANT_TOKEN_PATH",
        "MERCHANT_CLIENT_ID",
        "MERCHANT_CLIENT_SECRET",
        "MERCHANT_TIMEOUT_SECONDS",
        "MERCHANT_TOKEN_MAX_AGE_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_shared_client()
    yield
    reset_shared_client()
