# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from todo_api.gate import AuthGate
from todo_api.main import create_app
from todo_api.store import TaskStore

from .helpers import PASSWORD, USER, make_key_pair


@pytest.fixture(scope="session")
def key_pair() -> tuple[str, str]:
    return make_key_pair()


@pytest.fixture()
def gate(key_pair: tuple[str, str]) -> AuthGate:
    private_pem, public_pem = key_pair
    return AuthGate(private_pem, public_pem, user=USER, password=PASSWORD)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def client(store: TaskStore, gate: AuthGate) -> TestClient:
    return TestClient(create_app(store=store, gate=gate))


@pytest.fixture()
def auth_headers(gate: AuthGate) -> dict[str, str]:
    return {"Authorization": f"Bearer {gate.issue_token(USER, PASSWORD)}"}
