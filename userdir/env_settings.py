from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import Field


class DirectorySettings(BaseSettings):
    # App
    secret_key: str = Field("", alias="APP_SECRET_KEY")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_dir: str = Field("", alias="LOG_DIR")

    # Local store
    local_auth_file: str = Field("./.users.json", alias="LOCAL_AUTH_FILE")

    # LDAP (наличие URL включает LDAP-бэкенд)
    ldap_url: str = Field("", alias="LDAP_URL")
    ldap_users_base_dn: str = Field("", alias="LDAP_USERS_BASE_DN")
    ldap_bind_dn: str = Field("", alias="LDAP_BIND_DN")
    ldap_bind_password: str = Field("", alias="LDAP_BIND_PASSWORD")
    ldap_bind_password_enc: str = Field("", alias="LDAP_BIND_PASSWORD_ENC")
    ldap_timeout: float = Field(10.0, alias="LDAP_TIMEOUT")
    ldap_users_filter: str = Field("(objectClass=*)", alias="LDAP_USERS_FILTER")

    # Attribute mapping
    ldap_user_rdn_attribute: str = Field("cn", alias="LDAP_USER_RDN_ATTRIBUTE")
    ldap_id_attribute: str = Field("uid", alias="LDAP_ID_ATTRIBUTE")
    ldap_username_attribute: str = Field("username", alias="LDAP_USERNAME_ATTRIBUTE")
    ldap_mail_attribute: str = Field("mail", alias="LDAP_MAIL_ATTRIBUTE")
    ldap_display_name_attribute: str = Field("displayname", alias="LDAP_DISPLAY_NAME_ATTRIBUTE")

    class Config:
        populate_by_name = True


@lru_cache(maxsize=1)
def get_settings() -> DirectorySettings:
    return DirectorySettings()
