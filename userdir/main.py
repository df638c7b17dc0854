from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .env_settings import get_settings
from .errors import DirectoryError, TransportError
from .log_config import setup_logging
from .routers import auth, users

log = logging.getLogger(__name__)

app = FastAPI(title="userdir")
app.include_router(auth.router)
app.include_router(users.router)


@app.on_event("startup")
def _startup() -> None:
    st = get_settings()
    setup_logging(level=st.log_level, log_dir=st.log_dir)


@app.exception_handler(DirectoryError)
async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    code = 502 if isinstance(exc, TransportError) else 500
    log.error("%s %s failed: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return JSONResponse(status_code=code, content={"detail": str(exc)})
