"""
Member registry for the Library Desk.

Maps member IDs to ``Member`` records. New members start with no books.
"""

import logging

from ..models.member import Member
from .repository import BaseRegistry, MemberNotFoundError

logger = logging.getLogger(__name__)


class MemberRegistry(BaseRegistry[Member]):
    """Registry of every library member, keyed by member ID."""

    entity_name = "Member"

    def key_of(self, record: Member) -> str:
        return record.member_id

    def not_found(self, key: str) -> MemberNotFoundError:
        return MemberNotFoundError(key)

    def register(self, member_id: str, name: str) -> Member:
        """
        Register a new member with an empty borrowed set.

        Raises:
            DuplicateError: If the member ID is taken; the existing member
                is left unchanged
            pydantic.ValidationError: If ID or name is blank
        """
        member = self._insert(Member(member_id=member_id, name=name))
        logger.info("Member registered: %s (%s)", member.name, member.member_id)
        return member
