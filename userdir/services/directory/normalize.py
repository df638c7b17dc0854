from __future__ import annotations

from typing import Any, Mapping

from ...ldap.models import AttributeMap
from ...ldap.utils import first_value
from ...local_store import CredentialRecord
from ...models import UserProfile


def profile_from_record(username: str, record: CredentialRecord) -> UserProfile:
    return UserProfile(id=username, username=username, display_name=record.display_name or "")


def profile_from_entry(attributes: Mapping[str, Any], attrs: AttributeMap) -> UserProfile | None:
    """Map a raw directory entry onto a profile.

    Attribute names are matched case-insensitively. An entry without an id
    or a username is not a user (OU containers, the base entry) and gives None.
    """
    lowered = {str(k).lower(): v for k, v in attributes.items()}

    def get(name: str) -> str:
        return first_value(lowered.get(name.lower())).strip()

    uid = get(attrs.id)
    username = get(attrs.username)
    if not uid or not username:
        return None
    return UserProfile(
        id=uid,
        username=username,
        display_name=get(attrs.display_name),
        email=get(attrs.mail) or None,
    )
