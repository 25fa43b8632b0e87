from typing import Optional

from laminotes.adapter.store import InMemoryStore
from laminotes.app.repositories.team_repository import ITeamRepository
from laminotes.domain.entities import Team


class TeamRepository(ITeamRepository):
    """Team repository implementation over an InMemoryStore"""

    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_id(self, team_id: str) -> Optional[Team]:
        return self.store.teams.get(team_id)

    async def create(self, team: Team) -> Team:
        self.store.teams[team.id] = team
        return team
