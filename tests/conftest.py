"""Shared fixtures: a recording fake of the registry API and test inputs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest

from zcom_registry.api.client import ZcomApiClient
from zcom_registry.registry import Registry, RegistryConfig

FIXTURES_ROOT = Path(__file__).resolve().parent / "fixtures"

API_ROOT = "https://cp.blockchain.z.com/api/v1"
AUTH_TOKEN = "dc6Ys52Am4cs67NsANEDymkAexMdwsNjjm6aTFuCxgsxSTPRUUkAbdXuTzNYvXe8"
ADDRESS = "0x123f681646d4a755815f9cb19e1acc8565a0c2ac"
GAS_LIMIT = 9000

OK_RESPONSE = {"status": 0, "message": "Dummy successful response"}
FAILED_RESPONSE = {"status": 1, "message": "Dummy failed response"}


@dataclass
class FakeApi:
    """Records every request and answers with one canned reply."""

    payload: Any = field(default_factory=lambda: dict(OK_RESPONSE))
    status_code: int = 200
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.payload, (dict, list)):
            return httpx.Response(self.status_code, json=self.payload)
        return httpx.Response(self.status_code, text=str(self.payload))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was made"
        return self.requests[-1]

    def last_body(self) -> dict[str, Any]:
        return json.loads(self.last.content)


@pytest.fixture()
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture()
def client(fake_api: FakeApi) -> ZcomApiClient:
    return ZcomApiClient(API_ROOT, transport=fake_api.transport)


@pytest.fixture()
def output_dir(tmp_path: Path) -> Path:
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture()
def registry(fake_api: FakeApi, output_dir: Path) -> Registry:
    config = RegistryConfig(api_root=API_ROOT, auth_token=AUTH_TOKEN, output_dir=output_dir)
    return Registry(config, transport=fake_api.transport)


@pytest.fixture(scope="session")
def dummy_abi() -> str:
    return (FIXTURES_ROOT / "dummy-abi").read_text(encoding="utf-8")
