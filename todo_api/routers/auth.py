from fastapi import APIRouter, Depends

from ..dependencies import get_gate
from ..gate import AuthGate
from ..schemas.auth import LoginRequest, Token

router = APIRouter()


@router.post("/", response_model=Token)
def login(credentials: LoginRequest, gate: AuthGate = Depends(get_gate)):
    """Exchange the accepted user/password pair for a signed token.

    Example:

        req: POST /login/ {"User": "test", "Password": "known"}
        res: 200 {"token": "eyJhbGciOiJSUzI1NiIs..."}
    """
    return Token(token=gate.issue_token(credentials.user, credentials.password))
