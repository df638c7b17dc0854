from __future__ import annotations

import json
import logging

from pydantic import BaseModel, Field, ValidationError

log = logging.getLogger(__name__)


class CredentialRecord(BaseModel):
    """One entry of the local credential file."""

    password_hash: str = Field(alias="passwordHash")
    display_name: str | None = Field(default="", alias="displayName")

    model_config = {"populate_by_name": True, "frozen": True}


def load_users(path: str) -> dict[str, CredentialRecord] | None:
    """Read the whole credential file.

    Returns None when the file is missing or cannot be parsed; an empty
    mapping means the file exists and holds no users. A single invalid
    record is skipped, the rest of the file stays usable.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        log.debug("Local credential store %s does not exist", path)
        return None
    except (OSError, ValueError) as e:
        log.warning("Local credential store %s is unreadable: %s", path, e)
        return None

    if not isinstance(raw, dict):
        log.warning("Local credential store %s: expected a JSON object", path)
        return None

    users: dict[str, CredentialRecord] = {}
    for name, rec in raw.items():
        try:
            users[str(name)] = CredentialRecord.model_validate(rec)
        except ValidationError as e:
            log.warning("Local credential store %s: skipping invalid record %r (%d errors)", path, name, e.error_count())
    return users
