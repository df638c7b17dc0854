"""Ошибки каталога пользователей.

"Пользователь не найден" и "неверный пароль" ошибками не являются: провайдеры
возвращают для них ``None``. Здесь только структурные сбои, которые вызывающий
код должен отличать от отказа в доступе.
"""
from __future__ import annotations


class DirectoryError(Exception):
    """Base class for all provider failures."""


class DuplicateEntryError(DirectoryError):
    """A lookup by identifier matched more than one directory entry."""

    def __init__(self, identifier: str, count: int) -> None:
        super().__init__(f"Duplicate entries found for '{identifier}': {count}")
        self.identifier = identifier
        self.count = count


class TransportError(DirectoryError):
    """Connection failure, rejected service bind or non-zero LDAP status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class StoreUnavailableError(DirectoryError):
    """Local credential store is missing or unreadable."""
