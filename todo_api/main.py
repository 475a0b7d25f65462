import logging
import time
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import config
from .dependencies import get_token_from_request
from .errors import ErrorKind, TodoAPIError, UnauthorizedError, ValidationError
from .gate import AuthGate
from .logging_setup import setup_logging
from .routers import auth, tasks
from .store import TaskStore

logger = logging.getLogger(__name__)

TASK_PREFIX = "/task"


def error_response(exc: TodoAPIError) -> JSONResponse:
    """Map an error kind to its status code and a non-leaking message."""
    if exc.kind is ErrorKind.INTERNAL:
        logger.error("Internal error: %s", exc.message, exc_info=exc)
    else:
        logger.info("%s: %s", exc.kind.value, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if exc.kind is ErrorKind.UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.public_message},
        headers=headers,
    )


def _is_task_path(path: str) -> bool:
    return path == TASK_PREFIX or path.startswith(TASK_PREFIX + "/")


def _default_gate() -> AuthGate:
    return AuthGate.from_files(
        config.PRIVATE_KEY_PATH,
        config.PUBLIC_KEY_PATH,
        user=config.LOGIN_USER,
        password=config.LOGIN_PASSWORD,
        ttl=timedelta(hours=config.ACCESS_TOKEN_EXPIRE_HOURS),
    )


def create_app(store: Optional[TaskStore] = None, gate: Optional[AuthGate] = None) -> FastAPI:
    """Build the API around its own task store and auth gate.

    Without an explicit gate the signing keys are loaded from the paths in
    ``todo_api.config``.
    """
    setup_logging(config.LOG_LEVEL)

    app = FastAPI(
        title="Todo Task API",
        description="In-memory task list behind a JWT login",
        version="1.0.0",
    )
    app.state.store = store if store is not None else TaskStore()
    app.state.gate = gate if gate is not None else _default_gate()

    @app.exception_handler(TodoAPIError)
    async def handle_api_error(request: Request, exc: TodoAPIError):
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors and errors[0].get("loc", ("",))[0] == "path":
            return error_response(ValidationError("invalid task id"))
        return error_response(ValidationError("malformed request body"))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "internal error"})

    @app.middleware("http")
    async def auth_gate(request: Request, call_next):
        if not _is_task_path(request.url.path):
            return await call_next(request)

        def forward(claims):
            request.state.claims = claims
            return call_next(request)

        try:
            return await app.state.gate.gate(get_token_from_request(request), forward)
        except UnauthorizedError as exc:
            return error_response(exc)

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug(
            "%s %s %d %.3fs",
            request.method, request.url.path, response.status_code, elapsed,
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(tasks.router, prefix=TASK_PREFIX, tags=["tasks"])
    app.include_router(auth.router, prefix="/login", tags=["auth"])

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    return app
