"""
FastAPI dependencies shared by the routers.

The store and the gate live on ``app.state`` so every app instance owns
its own pair.
"""

from typing import Optional

from fastapi import Request

from .gate import AuthGate
from .store import TaskStore


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


def get_gate(request: Request) -> AuthGate:
    return request.app.state.gate


def get_token_from_request(request: Request) -> Optional[str]:
    """Bearer token from ``Authorization``, else the bare ``token`` header."""
    auth_header = request.headers.get("Authorization", "")
    if auth_header.lower().startswith("bearer "):
        return auth_header.split(" ", 1)[1].strip()
    return request.headers.get("token")
