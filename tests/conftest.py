"""Shared fixtures: an ApiClient wired to an in-memory backend."""

import re
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest

from factory_admin.api import ApiClient

BASE_URL = "http://backend.test/api"
TOKEN = "tok123"

VALID_CLIENT = {
    "client_name": "Acme Steel",
    "contact_person": "Ravi",
    "client_type": "Corporate",
    "email": "ravi@acme.in",
    "phone": "9800000000",
    "gst_number": "29ABCDE1234F1Z5",
    "billing_address": "12 Industrial Area",
    "billing_addr_city": "Pune",
    "billing_addr_state": "MH",
    "billing_addr_pincode": "411001",
    "shipping_address": "12 Industrial Area",
    "shipping_addr_city": "Pune",
    "shipping_addr_state": "MH",
    "shipping_addr_pincode": "411001",
    "notes": "Key account",
}

_PART_RE = re.compile(rb'name="([^"]+)"\r\n\r\n(.*?)\r\n--', re.S)


def form_fields(request: httpx.Request) -> Dict[str, str]:
    """Decode the multipart parts of a recorded request."""
    return {
        name.decode(): value.decode("utf-8")
        for name, value in _PART_RE.findall(request.content)
    }


class FakeBackend:
    """Routes (method, path) to canned JSON and records every request."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Union[httpx.Response, Callable]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, payload: Any = None, status_code: int = 200):
        self.routes[(method.upper(), "/" + path.lstrip("/"))] = httpx.Response(status_code, json=payload)

    def add_raw(self, method: str, path: str, response: Union[httpx.Response, Callable]):
        self.routes[(method.upper(), "/" + path.lstrip("/"))] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        path = request.url.path
        prefix = httpx.URL(BASE_URL).path.rstrip("/")
        if path.startswith(prefix):
            path = path[len(prefix):]

        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"errFlag": 1, "message": f"no route {path}"})
        if callable(route):
            return route(request)
        return route

    @property
    def paths(self) -> List[str]:
        prefix = httpx.URL(BASE_URL).path.rstrip("/")
        return [r.url.path[len(prefix):] for r in self.requests]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def parse_form():
    return form_fields


@pytest.fixture
def api_client(backend):
    client = ApiClient(BASE_URL, token=TOKEN, transport=httpx.MockTransport(backend.handler))
    yield client
    client.close()
