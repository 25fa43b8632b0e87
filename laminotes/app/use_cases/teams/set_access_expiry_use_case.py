"""
Set Access Expiry Use Case

Handles granting or clearing time-limited team access.
"""

import logging
from datetime import datetime
from typing import Optional

from laminotes.app.services import team_roster
from laminotes.app.services.unit_of_work import UnitOfWork
from laminotes.domain.errors import MalformedInput, NotFound

from ._shared import member_response
from .dtos import MemberResponse

logger = logging.getLogger(__name__)


class SetAccessExpiryUseCase:
    """
    Use case for setting a member's access_expires.

    Business Rules:
    - Only active owners can set expiry
    - Expired access only gates authorization; the membership row is kept
    - None clears the limit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_user_id: str,
        team_id: str,
        target_user_id: str,
        access_expires: Optional[str],
    ) -> MemberResponse:
        expires_at = None
        if access_expires is not None:
            try:
                expires_at = datetime.fromisoformat(access_expires)
            except (TypeError, ValueError):
                raise MalformedInput(
                    "access_expires", f"not an ISO-8601 timestamp: {access_expires!r}"
                ) from None

        async with self.uow:
            actor = await self.uow.memberships.get_by_user_and_team(
                actor_user_id, team_id
            )
            target = await self.uow.memberships.get_by_user_and_team(
                target_user_id, team_id
            )
            if target is None:
                raise NotFound("User is not a member of this team")

            updated = team_roster.set_access_expiry(actor, target, expires_at)
            await self.uow.memberships.update(updated)

            await self.uow.commit()

        logger.info(
            f"Access of {target_user_id} in team {team_id} set to expire at "
            f"{access_expires or 'never'} by {actor_user_id}"
        )

        return member_response(updated)
