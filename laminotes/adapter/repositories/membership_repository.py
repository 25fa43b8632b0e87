from typing import List, Optional

from laminotes.adapter.store import InMemoryStore
from laminotes.app.repositories.membership_repository import IMembershipRepository
from laminotes.domain.entities import TeamMember
from laminotes.domain.errors import AlreadyMember, NotFound


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation over an InMemoryStore"""

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_user_and_team(
        self, user_id: str, team_id: str
    ) -> Optional[TeamMember]:
        return self.store.memberships.get((user_id, team_id))

    async def get_by_team_id(self, team_id: str) -> List[TeamMember]:
        return [m for m in self.store.memberships.values() if m.team_id == team_id]

    async def get_by_user_id(self, user_id: str) -> List[TeamMember]:
        return [m for m in self.store.memberships.values() if m.user_id == user_id]

    async def create(self, member: TeamMember) -> TeamMember:
        key = (member.user_id, member.team_id)
        # unique (user_id, team_id)
        if key in self.store.memberships:
            raise AlreadyMember(
                f"User {member.user_id} is already a member of team {member.team_id}"
            )
        self.store.memberships[key] = member
        return member

    async def update(self, member: TeamMember) -> TeamMember:
        key = (member.user_id, member.team_id)
        if key not in self.store.memberships:
            raise NotFound(f"No membership for {member.user_id} in {member.team_id}")
        self.store.memberships[key] = member
        return member

    async def delete(self, member: TeamMember) -> None:
        self.store.memberships.pop((member.user_id, member.team_id), None)
