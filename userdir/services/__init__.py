"""Application service layer.

Stable import surface for routers:
    from userdir.services import ...
"""

from .directory import DirectoryProvider, LdapProvider, LocalProvider, provider_from_settings

__all__ = ["DirectoryProvider", "LdapProvider", "LocalProvider", "provider_from_settings"]
