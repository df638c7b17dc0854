from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UserProfile:
    """Canonical user profile, identical for every backend."""
    id: str
    username: str
    display_name: str = ""
    email: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "username": self.username,
            "displayName": self.display_name,
        }
        if self.email:
            out["email"] = self.email
        return out
