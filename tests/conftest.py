"""
Shared fixtures: backend import path, a throwaway RSA key, a fixed clock,
and a stand-in for requests.Response.
"""

import json
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

# backend/ 를 import 경로에 추가 (routes.*, commands.* 절대 import 사용)
BACKEND = Path(__file__).parent.parent / "backend"
sys.path.insert(0, str(BACKEND))


class FakeResponse:
    """Minimal requests.Response replacement."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no json body")
        return self._payload


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_key):
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


@pytest.fixture
def fixed_now():
    # 2026-10-19 14:00 KST
    return datetime(2026, 10, 19, 5, 0, tzinfo=timezone.utc)


@pytest.fixture
def fake_response():
    return FakeResponse
