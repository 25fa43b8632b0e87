from typing import List, Optional

from laminotes.adapter.store import InMemoryStore
from laminotes.app.repositories.invitation_repository import IInvitationRepository
from laminotes.domain.entities import InvitationStatus, TeamInvitation
from laminotes.domain.errors import NotFound


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation over an InMemoryStore"""

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, invitation_id: str) -> Optional[TeamInvitation]:
        return self.store.invitations.get(invitation_id)

    async def get_pending_by_team_and_email(
        self, team_id: str, email: str
    ) -> Optional[TeamInvitation]:
        email = email.strip().lower()
        for invitation in self.store.invitations.values():
            if (
                invitation.team_id == team_id
                and invitation.invited_email.lower() == email
                and invitation.status == InvitationStatus.pending
            ):
                return invitation
        return None

    async def get_by_team_id(self, team_id: str) -> List[TeamInvitation]:
        return [i for i in self.store.invitations.values() if i.team_id == team_id]

    async def get_by_email(self, email: str) -> List[TeamInvitation]:
        email = email.strip().lower()
        return [
            i for i in self.store.invitations.values()
            if i.invited_email.lower() == email
        ]

    async def create(self, invitation: TeamInvitation) -> TeamInvitation:
        self.store.invitations[invitation.id] = invitation
        return invitation

    async def update(self, invitation: TeamInvitation) -> TeamInvitation:
        if invitation.id not in self.store.invitations:
            raise NotFound(f"Invitation {invitation.id} not found")
        self.store.invitations[invitation.id] = invitation
        return invitation
