"""User identity resolution over a local credential file or an LDAP directory.

Public API:
    - UserProfile
    - DirectoryProvider, LocalProvider, LdapProvider
    - provider_from_settings
    - DirectoryError and subclasses
"""

from .errors import DirectoryError, DuplicateEntryError, StoreUnavailableError, TransportError
from .models import UserProfile
from .services import DirectoryProvider, LdapProvider, LocalProvider, provider_from_settings

__all__ = [
    "UserProfile",
    "DirectoryProvider",
    "LocalProvider",
    "LdapProvider",
    "provider_from_settings",
    "DirectoryError",
    "DuplicateEntryError",
    "StoreUnavailableError",
    "TransportError",
]
