from __future__ import annotations

import logging
import os

from ...errors import StoreUnavailableError
from ...local_store import load_users
from ...models import UserProfile
from ...security import verify_password
from .backend import DirectoryProvider
from .normalize import profile_from_record

log = logging.getLogger(__name__)


class LocalProvider(DirectoryProvider):
    """Пользователи из локального JSON-файла с bcrypt-хешами.

    Файл перечитывается при каждом вызове, поэтому правки видны сразу.
    """

    name = "local"

    def __init__(self, path: str) -> None:
        self.path = os.path.abspath(path)

    def verify_credentials(self, username: str, password: str) -> UserProfile | None:
        username = (username or "").strip()
        if not username or not password:
            return None
        users = load_users(self.path)
        record = users.get(username) if users else None
        if record is None:
            log.debug("Local verify: no such user %s", username)
            return None
        if not verify_password(password, record.password_hash):
            log.debug("Local verify: password mismatch for %s", username)
            return None
        return profile_from_record(username, record)

    def resolve_profile(self, identifier: str) -> UserProfile | None:
        # Локальный файл знает только логины: id и email тут не отличаются от логина.
        identifier = (identifier or "").strip()
        users = load_users(self.path)
        if not users or identifier not in users:
            return None
        return profile_from_record(identifier, users[identifier])

    def list_users(self) -> list[UserProfile]:
        users = load_users(self.path)
        if users is None:
            raise StoreUnavailableError(f"No users found: credential store {self.path} is missing or unreadable")
        return [profile_from_record(name, users[name]) for name in sorted(users)]
