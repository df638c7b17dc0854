"""Directory providers: local credential file and LDAP.

    from userdir.services.directory import provider_from_settings
"""

from .backend import DirectoryProvider, provider_from_settings
from .local import LocalProvider
from .ldap import LdapProvider, ldap_cfg_from_settings

__all__ = [
    "DirectoryProvider",
    "LocalProvider",
    "LdapProvider",
    "ldap_cfg_from_settings",
    "provider_from_settings",
]
