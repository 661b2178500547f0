from __future__ import annotations

import json
import threading
import time
from urllib.parse import urlsplit

import django
import pytest
from django.conf import settings

from daraja.client import DarajaClient
from daraja.config import DarajaConfig

TOKEN_PATH = "/oauth/v1/generate"


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["daraja"],
            DARAJA_CONSUMER_KEY="key-123",
            DARAJA_CONSUMER_SECRET="secret-123",
            DARAJA_SHORTCODE="174379",
            DARAJA_PASSKEY="passkey-123",
            DARAJA_ENVIRONMENT="sandbox",
        )
        django.setup()


class FakeResponse:
    def __init__(self, status_code: int, payload=None, text: str | None = None, delay: float = 0):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload if payload is not None else {})
        self.delay = delay

    def json(self):
        return json.loads(self.text)


def token_response(token: str = "token-123", expires_in="3599", status_code: int = 200) -> FakeResponse:
    return FakeResponse(status_code, {"access_token": token, "expires_in": expires_in})


class FakeGateway:
    """Stands in for requests.Session.request and routes by URL path."""

    def __init__(self):
        self.routes = {}
        self.calls = []
        self._lock = threading.Lock()

    def route(self, path: str, response):
        self.routes[path] = response

    def calls_to(self, path: str) -> list[dict]:
        return [c for c in self.calls if c["path"] == path]

    def request(self, method, url, data=None, headers=None, auth=None, timeout=None, **kwargs):
        path = urlsplit(url).path
        call = {
            "method": method,
            "url": url,
            "path": path,
            "data": data,
            "headers": dict(headers or {}),
            "auth": auth,
            "timeout": timeout,
        }
        with self._lock:
            self.calls.append(call)

        handler = self.routes.get(path)
        if handler is None:
            raise AssertionError(f"unexpected url {url}")
        response = handler(call) if callable(handler) else handler
        if response.delay:
            time.sleep(response.delay)
        return response


@pytest.fixture
def gateway(monkeypatch):
    fake = FakeGateway()

    def fake_request(self, method, url, **kwargs):
        return fake.request(method, url, **kwargs)

    monkeypatch.setattr("requests.Session.request", fake_request)
    return fake


@pytest.fixture
def config():
    return DarajaConfig(
        consumer_key="key-123",
        consumer_secret="secret-123",
        shortcode="174379",
        passkey="passkey-123",
    )


@pytest.fixture
def client(config):
    daraja_client = DarajaClient(config)
    yield daraja_client
    daraja_client.close()
