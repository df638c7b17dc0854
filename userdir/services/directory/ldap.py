from __future__ import annotations

import logging

from ...crypto import decrypt_str
from ...env_settings import DirectorySettings
from ...errors import DuplicateEntryError
from ...ldap import AttributeMap, LdapClient, LdapConfig
from ...ldap.utils import any_of_filter, build_user_dn
from ...models import UserProfile
from .backend import DirectoryProvider
from .normalize import profile_from_entry

log = logging.getLogger(__name__)


def ldap_cfg_from_settings(st: DirectorySettings) -> LdapConfig:
    pwd = st.ldap_bind_password
    if st.ldap_bind_password_enc:
        # Зашифрованный пароль важнее открытого, если он расшифровывается ключом приложения.
        pwd = decrypt_str(st.ldap_bind_password_enc, st.secret_key) or pwd
    return LdapConfig(
        url=st.ldap_url.strip(),
        base_dn=st.ldap_users_base_dn.strip(),
        bind_dn=st.ldap_bind_dn.strip(),
        bind_password=pwd,
        timeout=st.ldap_timeout,
        user_rdn_attribute=st.ldap_user_rdn_attribute,
        users_filter=st.ldap_users_filter,
        attributes=AttributeMap(
            id=st.ldap_id_attribute,
            username=st.ldap_username_attribute,
            mail=st.ldap_mail_attribute,
            display_name=st.ldap_display_name_attribute,
        ),
    )


class LdapProvider(DirectoryProvider):
    name = "ldap"

    def __init__(self, cfg: LdapConfig, client: LdapClient | None = None) -> None:
        self.cfg = cfg
        self.client = client or LdapClient(cfg)

    def verify_credentials(self, username: str, password: str) -> UserProfile | None:
        """Полная процедура:
        1) найти профиль по логину
        2) проверить пароль (bind от имени пользователя)
        """
        username = (username or "").strip()
        # Пустой пароль при simple bind означает анонимный вход, и сервер его примет.
        if not username or not password:
            return None

        profile = self.resolve_profile(username)
        if profile is None:
            return None

        user_dn = build_user_dn(self.cfg.user_rdn_attribute, profile.username, self.cfg.base_dn)
        with self.client.connect(user_dn, password) as conn:
            if not conn.bind():
                res = dict(conn.result or {})
                log.debug("Bind as %s rejected: %s", user_dn, res.get("description"))
                return None
        return profile

    def resolve_profile(self, identifier: str) -> UserProfile | None:
        identifier = (identifier or "").strip()
        if not identifier:
            return None

        flt = any_of_filter(self.cfg.attributes.lookup_attributes, identifier)
        with self.client.service_connection() as conn:
            entries = self.client.search(conn, flt)

        if not entries:
            log.debug("LDAP lookup: nothing matches %s", identifier)
            return None
        if len(entries) > 1:
            raise DuplicateEntryError(identifier, len(entries))
        return profile_from_entry(entries[0], self.cfg.attributes)

    def list_users(self) -> list[UserProfile]:
        with self.client.service_connection() as conn:
            entries = self.client.search(conn, self.cfg.users_filter)

        users: list[UserProfile] = []
        for e in entries:
            p = profile_from_entry(e, self.cfg.attributes)
            if p is None:
                continue
            users.append(p)
        return users
