"""Client identity resolution for newly joined members."""

import logging
from typing import Any, Callable, Optional

from core.models.onboarding import ClientIdentity

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = "Client"

NameLookup = Callable[[str], Optional[str]]


def _clean(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def member_label(member: Any) -> str:
    """Nickname, else username, else the placeholder."""
    nickname = _clean(getattr(member, "nick", None))
    if nickname is not None:
        return nickname

    username = _clean(getattr(member, "global_name", None)) or _clean(getattr(member, "name", None))
    if username is not None:
        return username

    return PLACEHOLDER_NAME


class AttributionResolver:
    """Turns a diff result and the name registry into a client identity.

    The policy is total: every branch ends in a non-empty display name.

    1. invite code found and mapped   -> (mapped name, code)
    2. invite code found, no mapping  -> (member label, code)
    3. no invite code                 -> (member label, None)
    """

    def resolve(self, used_code: Optional[str], lookup: NameLookup, member: Any) -> ClientIdentity:
        member_tag = getattr(member, "id", member)

        if used_code is not None:
            try:
                mapped = _clean(lookup(used_code))
            except Exception as e:
                logger.error(f"Name lookup failed for invite {used_code}: {e}")
                mapped = None

            if mapped is not None:
                logger.info(f"Invite {used_code} matched to name: {mapped}")
                return ClientIdentity(display_name=mapped, source_invite_code=used_code)

            label = member_label(member)
            logger.warning(f"No name mapped for invite {used_code}, falling back to {label!r}")
            return ClientIdentity(display_name=label, source_invite_code=used_code)

        label = member_label(member)
        logger.warning(f"Could not find used invite for {member_tag}, falling back to {label!r}")
        return ClientIdentity(display_name=label, source_invite_code=None)
