"""LDAP directory client (ldap3).

Public API:
    - LdapConfig
    - AttributeMap
    - LdapClient
"""

from .models import AttributeMap, LdapConfig
from .client import LdapClient

__all__ = ["AttributeMap", "LdapConfig", "LdapClient"]
