# tests/test_gate.py

from __future__ import annotations

import time
from datetime import timedelta
from pathlib import Path
from unittest.mock import Mock

import pytest
from jose import jwt

from todo_api.errors import ForbiddenError, InternalError, UnauthorizedError
from todo_api.gate import ACCESS_LEVEL, USER_KIND, AuthGate

from .helpers import PASSWORD, USER, make_key_pair


def test_issue_then_verify(gate: AuthGate) -> None:
    token = gate.issue_token(USER, PASSWORD)
    claims = gate.verify_token(token)

    assert claims.name == USER
    assert claims.access == ACCESS_LEVEL
    assert claims.kind == USER_KIND


def test_token_expires_ten_hours_out(gate: AuthGate) -> None:
    before = int(time.time())
    claims = gate.verify_token(gate.issue_token(USER, PASSWORD))
    ten_hours = 10 * 60 * 60
    assert before + ten_hours - 5 <= claims.exp <= int(time.time()) + ten_hours + 5


@pytest.mark.parametrize(
    "user,password",
    [(USER, "wrong"), ("someone", PASSWORD), ("", ""), (PASSWORD, USER)],
)
def test_wrong_credentials_forbidden(gate: AuthGate, user: str, password: str) -> None:
    with pytest.raises(ForbiddenError):
        gate.issue_token(user, password)


def test_token_signed_with_other_key_rejected(gate: AuthGate) -> None:
    other_private, other_public = make_key_pair()
    other = AuthGate(other_private, other_public, user=USER, password=PASSWORD)

    with pytest.raises(UnauthorizedError):
        gate.verify_token(other.issue_token(USER, PASSWORD))


def test_expired_token_rejected(key_pair: tuple[str, str]) -> None:
    private_pem, public_pem = key_pair
    gate = AuthGate(
        private_pem, public_pem, user=USER, password=PASSWORD,
        ttl=timedelta(seconds=-60),
    )

    with pytest.raises(UnauthorizedError):
        gate.verify_token(gate.issue_token(USER, PASSWORD))


@pytest.mark.parametrize("token", [None, "", "not-a-jwt", "a.b.c"])
def test_missing_or_malformed_token_rejected(gate: AuthGate, token) -> None:
    with pytest.raises(UnauthorizedError):
        gate.verify_token(token)


def test_token_with_wrong_claim_shape_rejected(gate: AuthGate, key_pair: tuple[str, str]) -> None:
    private_pem, _ = key_pair
    token = jwt.encode({"sub": USER, "exp": int(time.time()) + 60}, private_pem, algorithm="RS256")

    with pytest.raises(UnauthorizedError):
        gate.verify_token(token)


def test_malformed_signing_key_is_internal_error(key_pair: tuple[str, str]) -> None:
    _, public_pem = key_pair
    gate = AuthGate("not a pem key", public_pem, user=USER, password=PASSWORD)

    with pytest.raises(InternalError):
        gate.issue_token(USER, PASSWORD)


def test_gate_calls_downstream_with_claims(gate: AuthGate) -> None:
    downstream = Mock(return_value="ok")
    token = gate.issue_token(USER, PASSWORD)

    assert gate.gate(token, downstream) == "ok"
    downstream.assert_called_once()
    assert downstream.call_args.args[0].name == USER


def test_gate_short_circuits_on_bad_token(gate: AuthGate) -> None:
    downstream = Mock()

    with pytest.raises(UnauthorizedError):
        gate.gate("garbage", downstream)
    downstream.assert_not_called()


def test_from_files(tmp_path: Path, key_pair: tuple[str, str]) -> None:
    private_pem, public_pem = key_pair
    (tmp_path / "app.rsa").write_text(private_pem)
    (tmp_path / "app.rsa.pub").write_text(public_pem)

    gate = AuthGate.from_files(
        tmp_path / "app.rsa", tmp_path / "app.rsa.pub", user=USER, password=PASSWORD,
    )
    assert gate.verify_token(gate.issue_token(USER, PASSWORD)).name == USER


def test_from_files_missing_key(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        AuthGate.from_files(tmp_path / "nope", tmp_path / "nope.pub", user=USER, password=PASSWORD)
