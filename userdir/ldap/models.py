from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AttributeMap:
    id: str = "uid"
    username: str = "username"
    mail: str = "mail"
    display_name: str = "displayname"

    @property
    def lookup_attributes(self) -> list[str]:
        """Attributes an identifier may match: id, mail or username."""
        return [self.id, self.mail, self.username]

    @property
    def all(self) -> list[str]:
        return [self.id, self.username, self.mail, self.display_name]


@dataclass(frozen=True)
class LdapConfig:
    url: str
    base_dn: str
    bind_dn: str = ""
    bind_password: str = field(default="", repr=False)
    timeout: float = 10.0
    user_rdn_attribute: str = "cn"
    users_filter: str = "(objectClass=*)"
    attributes: AttributeMap = field(default_factory=AttributeMap)

    def __post_init__(self) -> None:
        if not (self.url or "").strip():
            raise ValueError("LDAP URL is empty")
        if not (self.base_dn or "").strip():
            raise ValueError("LDAP users base DN is required when LDAP URL is set")

    @property
    def has_service_account(self) -> bool:
        return bool(self.bind_dn)
