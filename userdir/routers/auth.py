from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from ..deps import get_provider
from ..services import DirectoryProvider

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth")


class Credentials(BaseModel):
    username: str = ""
    password: str = ""


@router.post("/verify")
def verify(body: Credentials, provider: DirectoryProvider = Depends(get_provider)):
    username = body.username.strip()
    profile = provider.verify_credentials(username, body.password)
    if profile is None:
        log.info("Login failed for %s (%s)", username, provider.name)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    log.info("Login ok for %s (%s)", profile.username, provider.name)
    return profile.to_dict()
