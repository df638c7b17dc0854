import json

import pytest
from ldap3 import MOCK_SYNC, NONE, Connection, Server

from userdir.ldap import LdapClient, LdapConfig
from userdir.security import hash_password
from userdir.services.directory import LdapProvider

BASE_DN = "ou=users,dc=example,dc=com"
ADMIN_DN = "cn=admin,dc=example,dc=com"
ADMIN_PASSWORD = "admin-secret"


@pytest.fixture
def users_file(tmp_path):
    """Local store with a single user alice/secret."""
    path = tmp_path / "users.json"
    path.write_text(
        json.dumps({"alice": {"passwordHash": hash_password("secret", rounds=4), "displayName": "Alice A"}}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def directory():
    """In-memory directory shared by every connection opened on this Server."""
    server = Server("fake_directory", get_info=NONE)
    conn = Connection(server, client_strategy=MOCK_SYNC)
    conn.strategy.add_entry("dc=example,dc=com", {"objectClass": ["domain"], "dc": "example"})
    conn.strategy.add_entry(ADMIN_DN, {"objectClass": ["person"], "cn": "admin", "userPassword": ADMIN_PASSWORD})
    conn.strategy.add_entry(BASE_DN, {"objectClass": ["organizationalUnit"], "ou": "users"})
    conn.strategy.add_entry(
        f"cn=alice,{BASE_DN}",
        {
            "objectClass": ["inetOrgPerson"],
            "cn": "alice",
            "uid": "u-1001",
            "username": "alice",
            "displayname": "Alice A",
            "mail": "alice@example.com",
            "userPassword": "secret",
        },
    )
    conn.strategy.add_entry(
        f"cn=bob,{BASE_DN}",
        {
            "objectClass": ["inetOrgPerson"],
            "cn": "bob",
            "uid": "u-1002",
            "username": "bob",
            "userPassword": "hunter2",
        },
    )
    return server


def make_provider(server, **overrides) -> LdapProvider:
    params = dict(
        url="ldap://fake_directory",
        base_dn=BASE_DN,
        bind_dn=ADMIN_DN,
        bind_password=ADMIN_PASSWORD,
    )
    params.update(overrides)
    cfg = LdapConfig(**params)
    return LdapProvider(cfg, client=LdapClient(cfg, server=server, client_strategy=MOCK_SYNC))


def add_user(server, cn: str, **attrs) -> None:
    conn = Connection(server, client_strategy=MOCK_SYNC)
    conn.strategy.add_entry(f"cn={cn},{BASE_DN}", {"objectClass": ["inetOrgPerson"], "cn": cn, **attrs})


@pytest.fixture
def ldap_provider(directory):
    return make_provider(directory)


@pytest.fixture
def provider_factory(directory):
    return lambda **overrides: make_provider(directory, **overrides)


@pytest.fixture
def add_directory_user(directory):
    return lambda cn, **attrs: add_user(directory, cn, **attrs)
