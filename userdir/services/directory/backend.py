from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ...models import UserProfile

if TYPE_CHECKING:
    from ...env_settings import DirectorySettings

log = logging.getLogger(__name__)


class DirectoryProvider(ABC):
    """Единый интерфейс каталога пользователей.

    Отсутствие пользователя и неверный пароль неразличимы: оба дают None.
    Структурные сбои поднимаются как подклассы DirectoryError.
    """

    name: str = ""

    @abstractmethod
    def verify_credentials(self, username: str, password: str) -> UserProfile | None:
        """Профиль при верной паре логин/пароль, иначе None."""

    @abstractmethod
    def resolve_profile(self, identifier: str) -> UserProfile | None:
        """Профиль по id, email или логину; None если не найден."""

    @abstractmethod
    def list_users(self) -> list[UserProfile]:
        """Все известные пользователи."""


def provider_from_settings(settings: DirectorySettings) -> DirectoryProvider:
    """Выбор бэкенда один раз при старте: LDAP если задан LDAP_URL, иначе локальный файл."""
    if (settings.ldap_url or "").strip():
        from .ldap import LdapProvider, ldap_cfg_from_settings
        cfg = ldap_cfg_from_settings(settings)
        log.info("Directory backend: LDAP %s (base %s)", cfg.url, cfg.base_dn)
        return LdapProvider(cfg)

    from .local import LocalProvider
    log.info("Directory backend: local file %s", settings.local_auth_file)
    return LocalProvider(settings.local_auth_file)
