from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from ldap3 import AUTO_BIND_NONE, NONE, SUBTREE, SYNC, Connection, Server
from ldap3.core.exceptions import LDAPException

from ..errors import TransportError
from .models import LdapConfig

log = logging.getLogger(__name__)


class LdapClient:
    """Thin ldap3 wrapper: one connection per `connect()` block, always released.

    Every ldap3 exception raised inside the block becomes TransportError.
    """

    def __init__(self, cfg: LdapConfig, server: Server | None = None, client_strategy: str = SYNC) -> None:
        self.cfg = cfg
        self.client_strategy = client_strategy
        self.server = server or Server(cfg.url, get_info=NONE, connect_timeout=cfg.timeout)

    @contextmanager
    def connect(self, user: str | None = None, password: str | None = None) -> Iterator[Connection]:
        conn = Connection(
            self.server,
            user=user,
            password=password,
            auto_bind=AUTO_BIND_NONE,
            client_strategy=self.client_strategy,
            receive_timeout=self.cfg.timeout,
        )
        try:
            conn.open()
            yield conn
        except LDAPException as e:
            log.warning("LDAP error (%s): %s", self.cfg.url, e)
            raise TransportError(f"LDAP error: {e}") from e
        finally:
            _release(conn)

    @contextmanager
    def service_connection(self) -> Iterator[Connection]:
        """Connection bound as the service account, anonymous if none is configured."""
        if not self.cfg.has_service_account:
            with self.connect() as conn:
                yield conn
            return

        with self.connect(self.cfg.bind_dn, self.cfg.bind_password) as conn:
            if not conn.bind():
                res = dict(conn.result or {})
                status = res.get("result")
                log.warning("Service bind as %s rejected: %s", self.cfg.bind_dn, res.get("description"))
                raise TransportError(
                    f"service bind failed: {res.get('description', 'unknown error')}",
                    status=status,
                )
            yield conn

    def search(self, conn: Connection, search_filter: str) -> list[dict[str, Any]]:
        """Subtree search under the base DN; returns raw attribute dicts.

        A non-zero completion status is raised regardless of how many
        entries arrived before it.
        """
        conn.search(
            search_base=self.cfg.base_dn,
            search_filter=search_filter,
            search_scope=SUBTREE,
            attributes=self.cfg.attributes.all,
        )
        res = dict(conn.result or {})
        status = int(res.get("result") or 0)
        if status != 0:
            raise TransportError(
                f"non-zero status from LDAP search: {status} ({res.get('description', '')})",
                status=status,
            )
        return [
            dict(e.get("attributes") or {})
            for e in (conn.response or [])
            if e.get("type") == "searchResEntry"
        ]


def _release(conn: Connection) -> None:
    try:
        if not conn.closed:
            conn.unbind()
    except LDAPException as e:
        log.debug("LDAP unbind failed: %s", e)
