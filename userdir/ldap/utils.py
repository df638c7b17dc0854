from __future__ import annotations

from typing import Any

from ldap3.utils.dn import escape_rdn


def escape_ldap_filter_value(value: str) -> str:
    """RFC 4515 escaping for LDAP filter values."""
    out: list[str] = []
    for ch in value:
        if ch == "\\":
            out.append("\\5c")
        elif ch == "*":
            out.append("\\2a")
        elif ch == "(":
            out.append("\\28")
        elif ch == ")":
            out.append("\\29")
        elif ch == "\x00":
            out.append("\\00")
        else:
            out.append(ch)
    return "".join(out)


def any_of_filter(attrs: list[str], value: str) -> str:
    """(|(a1=v)(a2=v)...) with the value escaped."""
    safe = escape_ldap_filter_value(value)
    return "(|" + "".join(f"({a}={safe})" for a in attrs) + ")"


def build_user_dn(rdn_attr: str, username: str, base_dn: str) -> str:
    """cn=<username>,<base> with RFC 4514 escaping of the RDN value."""
    rdn = f"{rdn_attr}={escape_rdn(username)}"
    base = (base_dn or "").strip()
    return f"{rdn},{base}" if base else rdn


def first_value(v: Any) -> str:
    """Single string from an ldap3 attribute value (scalar or list)."""
    if v is None:
        return ""
    if isinstance(v, (list, tuple)):
        if not v:
            return ""
        v = v[0]
    if isinstance(v, bytes):
        return v.decode("utf-8", errors="replace")
    return str(v)
