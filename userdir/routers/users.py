from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import get_provider
from ..services import DirectoryProvider


router = APIRouter(prefix="/api/users")


@router.get("")
def list_users(provider: DirectoryProvider = Depends(get_provider)):
    return [u.to_dict() for u in provider.list_users()]


@router.get("/{identifier}")
def get_user(identifier: str, provider: DirectoryProvider = Depends(get_provider)):
    profile = provider.resolve_profile(identifier)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return profile.to_dict()
