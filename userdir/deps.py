from __future__ import annotations

from functools import lru_cache

from .env_settings import get_settings
from .services import DirectoryProvider, provider_from_settings


@lru_cache(maxsize=1)
def get_provider() -> DirectoryProvider:
    return provider_from_settings(get_settings())
