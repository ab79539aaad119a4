"""
Shared pytest fixtures for Planets tests.

This module provides:
- MockAPI: an httpx.MockTransport wrapper with canned responses and call history
- Pydantic models shaped like the planets API payloads
"""

import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

import httpx
import pytest
from pydantic import BaseModel

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from planets.config.provider import NetworkConfig
from planets.modules.network import NetworkService


# =============================================================================
# Models
# =============================================================================

class Planet(BaseModel):
    name: str
    population: str
    climate: str
    diameter: int


class PlanetPage(BaseModel):
    count: int
    next: Optional[str] = None
    results: List[Planet]


PLANET_PAGE = {
    "count": 2,
    "next": None,
    "results": [
        {"name": "Tatooine", "population": "200000", "climate": "arid", "diameter": 10465},
        {"name": "Alderaan", "population": "2000000000", "climate": "temperate", "diameter": 12500},
    ],
}


# =============================================================================
# Transport Mocking Infrastructure
# =============================================================================

@dataclass
class MockAPI:
    """
    Fake remote API behind an httpx.MockTransport.

    Usage:
        def test_fetch(mock_api, service):
            mock_api.respond(200, json_body={"ok": True})
            await service.request(dict, endpoint_url_string="https://api.test/x")
            assert mock_api.requests[0].method == "GET"
    """

    status_code: int = 200
    content: bytes = b"{}"
    handler: Optional[Callable[[httpx.Request], Any]] = None
    requests: List[httpx.Request] = field(default_factory=list)

    def respond(self, status_code: int, json_body: Any = None, content: Optional[bytes] = None):
        self.status_code = status_code
        if content is not None:
            self.content = content
        else:
            self.content = json.dumps(json_body).encode()

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request):
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def mock_api() -> MockAPI:
    """Fake API answering 200 with an empty object until told otherwise."""
    return MockAPI()


@pytest.fixture
def service(mock_api) -> NetworkService:
    """NetworkService wired to the fake API with default timeouts."""
    return NetworkService(transport_factory=mock_api.transport)


@pytest.fixture
def fast_timeout_service(mock_api) -> NetworkService:
    """NetworkService with sub-second timeouts for timeout tests."""
    config = NetworkConfig(request_timeout=0.05, resource_timeout=0.1)
    return NetworkService(config=config, transport_factory=mock_api.transport)
