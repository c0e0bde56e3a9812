"""
Shared pytest fixtures for the Smartmessages client tests.

FakeTransport replaces requests.Session.request on the client's HTTP
session, records every call and replays queued responses, so tests can
assert on the wire parameters and on the number of network calls.
"""

import json
import os
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from smartmessages_lib import SmartmessagesClient


@dataclass
class FakeCall:
    """Record of a request made during testing."""
    method: str
    url: str
    params: Dict[str, Any] = field(default_factory=dict)
    data: Dict[str, Any] = field(default_factory=dict)
    files: Dict[str, bytes] = field(default_factory=dict)
    timeout: Optional[float] = None

    @property
    def fields(self) -> Dict[str, Any]:
        return self.params or self.data


class FakeTransport:
    """Stand-in for requests.Session.request with queued responses."""

    def __init__(self):
        self.calls: List[FakeCall] = []
        self._queue: List[Any] = []

    def queue(self, body: Any = None, status_code: int = 200, reason: str = "OK", text: Optional[str] = None):
        if text is None:
            text = json.dumps({"status": True} if body is None else body)
        response = MagicMock()
        response.status_code = status_code
        response.reason = reason
        response.text = text
        self._queue.append(response)

    def queue_error(self, exc: Exception):
        self._queue.append(exc)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last(self) -> FakeCall:
        return self.calls[-1]

    def reset(self):
        self.calls.clear()

    def __call__(self, method, url, **kwargs):
        files = {}
        for part_name, (_, handle, _) in kwargs.get("files") or []:
            files[part_name] = handle.read()
        self.calls.append(FakeCall(
            method=method,
            url=url,
            params=dict(kwargs.get("params") or {}),
            data=dict(kwargs.get("data") or {}),
            files=files,
            timeout=kwargs.get("timeout"),
        ))
        if not self._queue:
            self.queue()
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def login_envelope(**overrides) -> Dict[str, Any]:
    envelope = {
        "status": True,
        "errorcode": 0,
        "msg": "",
        "accesskey": "abc123",
        "endpoint": "https://api2.smartmessages.net/api/",
        "expires": int(time.time()) + 3600,
        "accountname": "Conta Teste",
    }
    envelope.update(overrides)
    return envelope


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    """Client with its HTTP session wired to the fake transport."""
    sm = SmartmessagesClient()
    sm._http.session.request = transport
    yield sm
    sm._http.close()


@pytest.fixture
def logged_client(client, transport):
    """Client already logged in; the login call is cleared from history."""
    transport.queue(login_envelope())
    client.login("user@smartmessages.net", "senha", "apikey123")
    transport.reset()
    return client
